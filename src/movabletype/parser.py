"""Parser for the Movable Type import/export format.

An export is a sequence of records. Each record is a block of ``KEY: value``
lines, followed by multi-line blocks such as ``BODY:`` that run until a
``-----`` line, and is closed by a ``--------`` line:

    AUTHOR: catatsuy
    TITLE: Poem
    STATUS: Publish
    DATE: 04/22/2017 20:41:58
    CATEGORY: Blog
    -----
    BODY:
    <p>body</p>
    -----
    --------

The parser is a small state machine with two states: reading ordinary lines,
or capturing the content of one multi-line field. All of its working state
lives on an ``EntryParser`` instance, so independent parses never interfere.

Example:
    >>> with open("export.txt", encoding="utf-8") as f:
    ...     entries = parse(f)
    >>> for entry in entries:
    ...     print(entry.date, entry.title)
"""

import io
import logging
import re
from collections.abc import Iterator
from datetime import datetime
from typing import Any

from .config import ParserConfig
from .entry import Entry, MultilineField, Status
from .exceptions import DateFormatError, FlagRangeError, FlagTypeError, InvalidStatusError
from .protocols import LineSource

logger = logging.getLogger(__name__)

FIELD_TERMINATOR = "-----"
RECORD_TERMINATOR = "--------"
KEY_DELIMITER = ": "

DATE_FORMAT_12H = "%m/%d/%Y %I:%M:%S %p"
DATE_FORMAT_24H = "%m/%d/%Y %H:%M:%S"

# strptime accepts one-digit fields and runs of spaces; the export does not.
DATE_SHAPE_12H = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2} [AP]M")
DATE_SHAPE_24H = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{1,2}:[0-9]{2}:[0-9]{2}")

INTEGER_SHAPE = re.compile(r"[+-]?[0-9]+")

# Single-line keys that overwrite their Entry attribute.
ASSIGNED_FIELDS = {
    "AUTHOR": "author",
    "TITLE": "title",
    "BASENAME": "basename",
    "CONVERT BREAKS": "convert_breaks",
    "PRIMARY CATEGORY": "primary_category",
    "IMAGE": "image",
}

FLAG_FIELDS = {
    "ALLOW COMMENTS": "allow_comments",
    "ALLOW PINGS": "allow_pings",
}


def _blank_draft() -> dict[str, Any]:
    draft = Entry.new().model_dump()
    draft["categories"] = []
    return draft


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class EntryParser:
    """Incremental parser turning export lines into Entry records.

    Lines are pushed one at a time with ``feed``; a record is returned as
    soon as its ``--------`` line arrives. ``finish`` must be called once the
    input is exhausted.

    Attributes:
        config: Parser settings
        capturing: Multi-line field currently being captured, or None while
            reading ordinary lines
        line_number: Number of lines consumed so far
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self.capturing: MultilineField | None = None
        self.line_number = 0
        self._draft = _blank_draft()

    def feed(self, line: str | bytes) -> Entry | None:
        """Consume one line.

        Args:
            line: Raw line, with or without its line ending

        Returns:
            The record sealed by this line, or None

        Raises:
            ParseError: If a field value is malformed
        """
        if isinstance(line, bytes):
            line = line.decode(self.config.encoding)
        line = _strip_line_ending(line)
        self.line_number += 1

        if self.capturing is not None:
            self._capture(self.capturing, line)
            return None

        if line == FIELD_TERMINATOR:
            return None

        if line == RECORD_TERMINATOR:
            return self._seal()

        field = MultilineField.from_header(line)
        if field is not None:
            logger.debug(f"Line {self.line_number}: capturing {field.value}")
            self.capturing = field
            return None

        key, delimiter, value = line.partition(KEY_DELIMITER)
        if delimiter:
            self._assign(key, value)

        return None

    def finish(self) -> Entry | None:
        """Signal end of input.

        A record still in progress has no closing ``--------`` line. It is
        returned only when ``config.keep_unterminated`` is set; otherwise it
        is dropped.

        Returns:
            The unterminated record, or None
        """
        if self.capturing is not None:
            logger.debug(f"Input ended while capturing {self.capturing.value}")
            self.capturing = None

        if self._draft == _blank_draft():
            return None

        if self.config.keep_unterminated:
            return self._seal()

        logger.warning(
            f"Dropping unterminated record at end of input (line {self.line_number}, "
            f"title={self._draft['title']!r})"
        )
        self._draft = _blank_draft()
        return None

    def _capture(self, field: MultilineField, line: str) -> None:
        if line == FIELD_TERMINATOR:
            logger.debug(f"Line {self.line_number}: end of {field.value}")
            self.capturing = None
            return
        self._draft[field.attribute] += line + "\n"

    def _seal(self) -> Entry:
        entry = Entry.model_validate(self._draft)
        self._draft = _blank_draft()
        self.capturing = None
        logger.debug(f"Line {self.line_number}: sealed record {entry.title!r}")
        return entry

    def _assign(self, key: str, value: str) -> None:
        if key in ASSIGNED_FIELDS:
            self._draft[ASSIGNED_FIELDS[key]] = value
        elif key == "CATEGORY":
            self._draft["categories"].append(value)
        elif key == "STATUS":
            self._draft["status"] = self._parse_status(value)
        elif key in FLAG_FIELDS:
            self._draft[FLAG_FIELDS[key]] = self._parse_flag(key, value)
        elif key == "DATE":
            self._draft["date"] = self._parse_date(value)
        else:
            logger.debug(f"Line {self.line_number}: ignoring unknown field {key!r}")

    def _parse_status(self, value: str) -> str:
        try:
            return Status(value).value
        except ValueError:
            allowed = " or ".join(s.value for s in Status)
            raise InvalidStatusError(
                f"STATUS column is allowed only {allowed}. Got {value}",
                line=self.line_number,
                field="STATUS",
            ) from None

    def _parse_flag(self, key: str, value: str) -> int:
        try:
            if not INTEGER_SHAPE.fullmatch(value):
                raise ValueError(f"invalid literal for int() with base 10: {value!r}")
            number = int(value)
        except ValueError as e:
            raise FlagTypeError(
                f"{key} column is allowed only 0 or 1: {e}",
                line=self.line_number,
                field=key,
            ) from e

        if number not in (0, 1):
            raise FlagRangeError(
                f"{key} column is allowed only 0 or 1. Got {number}",
                line=self.line_number,
                field=key,
            )
        return number

    def _parse_date(self, value: str) -> datetime:
        if value.endswith(("AM", "PM")):
            date_format, shape = DATE_FORMAT_12H, DATE_SHAPE_12H
        else:
            date_format, shape = DATE_FORMAT_24H, DATE_SHAPE_24H
        try:
            if not shape.fullmatch(value):
                raise ValueError(f"time data {value!r} does not match format {date_format!r}")
            return datetime.strptime(value, date_format)
        except ValueError as e:
            raise DateFormatError(
                f"Parsing error on DATE column: {e}",
                line=self.line_number,
                field="DATE",
            ) from e


def iter_entries(stream: LineSource, config: ParserConfig | None = None) -> Iterator[Entry]:
    """Lazily parse an export stream.

    Each record is yielded as soon as its ``--------`` line is read. A parse
    error stops iteration at the offending line; records yielded before it
    have already been handed out.

    Args:
        stream: Readable line source, opened and closed by the caller
        config: Parser settings (defaults when omitted)

    Yields:
        Entry records in input order

    Raises:
        ParseError: If a field value is malformed
        OSError: If reading the stream fails
    """
    parser = EntryParser(config)
    for line in stream:
        entry = parser.feed(line)
        if entry is not None:
            yield entry

    trailing = parser.finish()
    if trailing is not None:
        yield trailing


def parse(stream: LineSource, config: ParserConfig | None = None) -> list[Entry]:
    """Parse a whole export stream.

    Either every record is returned or an exception is raised; no partial
    result is produced.

    Args:
        stream: Readable line source, opened and closed by the caller
        config: Parser settings (defaults when omitted)

    Returns:
        Entry records in the order their ``--------`` lines appear

    Raises:
        ParseError: If a field value is malformed
        OSError: If reading the stream fails
    """
    entries = list(iter_entries(stream, config))
    logger.info(f"Parsed {len(entries)} entries")
    return entries


def parse_string(text: str, config: ParserConfig | None = None) -> list[Entry]:
    """Parse an export held in memory."""
    return parse(io.StringIO(text), config)
