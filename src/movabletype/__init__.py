"""
movabletype - Parse Movable Type import/export files.

This package reads the line-oriented text format Movable Type uses to export
and import blog entries, and turns each record into a structured Entry.
"""

__version__ = "0.1.0"

from .config import ParserConfig
from .entry import DEFAULT_ALLOW_COMMENTS, DEFAULT_ALLOW_PINGS, Entry, MultilineField, Status
from .exceptions import (
    ConfigurationError,
    DateFormatError,
    FlagRangeError,
    FlagTypeError,
    InvalidStatusError,
    MovableTypeError,
    ParseError,
)
from .parser import EntryParser, iter_entries, parse, parse_string

__all__ = [
    "DEFAULT_ALLOW_COMMENTS",
    "DEFAULT_ALLOW_PINGS",
    "ConfigurationError",
    "DateFormatError",
    "Entry",
    "EntryParser",
    "FlagRangeError",
    "FlagTypeError",
    "InvalidStatusError",
    "MovableTypeError",
    "MultilineField",
    "ParseError",
    "ParserConfig",
    "Status",
    "iter_entries",
    "parse",
    "parse_string",
]
