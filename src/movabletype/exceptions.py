"""Custom exceptions for movabletype.

This module defines the exception hierarchy raised while reading a Movable
Type export. Every format problem aborts the whole parse, so each exception
carries enough context (line number, field name) to locate the offending
input.

Example:
    >>> try:
    ...     raise InvalidStatusError("Bad status", line=4, field="STATUS")
    ... except MovableTypeError as e:
    ...     print(f"Error at {e.context}: {e}")
"""


class MovableTypeError(Exception):
    """Base exception for all movabletype errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about where the error occurred
    """

    def __init__(self, message: str, **context: str | int | float | bool | None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            **context: Additional context (e.g., line=12, field="DATE")
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Format error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ParseError(MovableTypeError, ValueError):
    """Malformed field value in the export stream.

    Also a ValueError, so callers that only care about "bad input" can catch
    it generically.
    """

    @property
    def line(self) -> int | None:
        """1-based line number of the offending input, if known."""
        line = self.context.get("line")
        return line if isinstance(line, int) else None

    @property
    def field(self) -> str | None:
        """Key of the offending field, if known."""
        field = self.context.get("field")
        return field if isinstance(field, str) else None


class InvalidStatusError(ParseError):
    """STATUS value outside Draft, Publish and Future.

    Example:
        >>> raise InvalidStatusError(
        ...     "STATUS column is allowed only Draft or Publish or Future. Got Published",
        ...     line=4,
        ...     field="STATUS",
        ... )
    """

    pass


class FlagRangeError(ParseError):
    """ALLOW COMMENTS or ALLOW PINGS parsed to an integer other than 0 or 1."""

    pass


class FlagTypeError(ParseError):
    """ALLOW COMMENTS or ALLOW PINGS value is not an integer.

    Raised from the underlying ValueError, which stays available as
    ``__cause__``.
    """

    pass


class DateFormatError(ParseError):
    """DATE value matches neither accepted calendar format.

    Raised from the underlying ValueError, which stays available as
    ``__cause__``.
    """

    pass


class ConfigurationError(MovableTypeError):
    """Error in parser configuration.

    Raised when:
    - A TOML configuration file cannot be read or decoded
    - A setting has an invalid value
    - An unknown setting is updated

    Example:
        >>> raise ConfigurationError(
        ...     "Unknown encoding",
        ...     encoding="utf-9",
        ... )
    """

    pass
