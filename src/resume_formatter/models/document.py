"""Pydantic models for lines, roles and style-tagged blocks."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DocumentKind(str, Enum):
    RESUME = "resume"
    COVER_LETTER = "cover_letter"


class TemplateId(str, Enum):
    MODERN = "modern"
    MINIMAL = "minimal"
    CORPORATE = "corporate"


class Role(str, Enum):
    """Semantic role assigned to one input line."""

    NAME = "name"
    SUBTITLE = "subtitle"
    HEADING = "heading"
    BODY = "body"
    BLANK = "blank"


class BlockKind(str, Enum):
    NAME_HEADER = "name_header"
    SUBTITLE = "subtitle"
    SECTION_HEADING = "section_heading"
    BODY_LINE = "body_line"
    BLANK_LINE = "blank_line"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"


class Line(BaseModel):
    """One input line, keeping both the raw and the trimmed text."""

    model_config = ConfigDict(frozen=True)

    raw: str
    trimmed: str
    is_empty: bool

    @classmethod
    def from_raw(cls, raw: str) -> Line:
        trimmed = raw.strip()
        return cls(raw=raw, trimmed=trimmed, is_empty=not trimmed)


class ClassifiedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: Line
    role: Role


class Block(BaseModel):
    """A classified line fused with the style attributes it renders with.

    Sizes and spacing are in points, colors are 6-digit hex strings.
    Blocks are self-contained: serializers read nothing else.
    """

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    text: str = ""
    font_size: float
    bold: bool = False
    color: str | None = None
    alignment: Alignment = Alignment.LEFT
    space_before: float = 0.0
    space_after: float = 0.0
    uppercase: bool = False

    @property
    def display_text(self) -> str:
        return self.text.upper() if self.uppercase else self.text
