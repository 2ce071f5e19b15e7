"""Record model for the Movable Type import/export format.

This module defines the Pydantic model for one blog-post record and the two
closed sets of literals the format relies on: publication statuses and the
names of the multi-line fields.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ALLOW_COMMENTS = -1
DEFAULT_ALLOW_PINGS = -1


class Status(str, Enum):
    """Publication statuses accepted in the STATUS field."""

    Draft = "Draft"
    Publish = "Publish"
    Future = "Future"


class MultilineField(str, Enum):
    """Fields whose content spans several lines up to a ``-----`` line.

    Each member's value is the field name as it appears in the export; the
    header line that opens the block is the value followed by a colon.
    """

    BODY = "BODY"
    EXTENDED_BODY = "EXTENDED BODY"
    EXCERPT = "EXCERPT"
    KEYWORDS = "KEYWORDS"
    COMMENT = "COMMENT"

    @property
    def header(self) -> str:
        """Line that opens this field's block, e.g. ``EXTENDED BODY:``."""
        return f"{self.value}:"

    @property
    def attribute(self) -> str:
        """Name of the Entry attribute this field fills."""
        return self.name.lower()

    @classmethod
    def from_header(cls, line: str) -> "MultilineField | None":
        """Return the field opened by ``line``, or None if it is not a header."""
        if not line.endswith(":"):
            return None
        try:
            return cls(line[:-1])
        except ValueError:
            return None


class Entry(BaseModel):
    """One blog-post record from a Movable Type export.

    Entries are frozen once built. ``allow_comments`` and ``allow_pings`` use
    -1 to mean "not specified"; the multi-line fields default to the empty
    string and, when populated, end every captured line with a newline.
    """

    author: str = ""
    title: str = ""
    basename: str = Field("", description="URL basename")
    status: str = Field(
        "",
        description="Draft, Publish or Future; empty when the record has no STATUS",
    )
    allow_comments: Literal[-1, 0, 1] = DEFAULT_ALLOW_COMMENTS
    allow_pings: Literal[-1, 0, 1] = DEFAULT_ALLOW_PINGS
    convert_breaks: str = Field("", description="Raw CONVERT BREAKS setting")
    date: datetime | None = Field(None, description="Naive publication timestamp")
    primary_category: str = ""
    categories: tuple[str, ...] = Field(
        default=(),
        description="CATEGORY values in order of appearance, duplicates kept",
    )
    image: str = ""
    body: str = ""
    extended_body: str = ""
    excerpt: str = ""
    keywords: str = ""
    comment: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: str) -> str:
        if value and value not in Status._value2member_map_:
            allowed = ", ".join(s.value for s in Status)
            raise ValueError(f"status must be one of {allowed} or empty, got {value!r}")
        return value

    @classmethod
    def new(cls) -> "Entry":
        """Return an entry holding only default values."""
        return cls()
