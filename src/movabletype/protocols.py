"""Protocol definitions for movabletype.

The parser reads from whatever the caller hands it: an open text or binary
file, ``sys.stdin``, an ``io.StringIO``, or a plain list of lines. The only
requirement is iteration over lines, which ``LineSource`` spells out.

Example:
    >>> import io
    >>> isinstance(io.StringIO("TITLE: Hello\\n"), LineSource)
    True
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Protocol for readable line streams.

    Iterating must yield one ``str`` or ``bytes`` line at a time, with or
    without its line ending.
    """

    def __iter__(self) -> Iterator[str | bytes]:
        """Yield the lines of the stream in order."""
        ...
