"""Fuse classified lines with a style profile into blocks."""

from __future__ import annotations

from collections.abc import Sequence

from resume_formatter.models.document import (
    Alignment,
    Block,
    BlockKind,
    ClassifiedLine,
    DocumentKind,
    Role,
    TemplateId,
)
from resume_formatter.models.style import StyleProfile
from resume_formatter.parsers.classifier import classify_lines, heading_title
from resume_formatter.parsers.segmenter import split_lines
from resume_formatter.templates.styles import resolve_style


def build_blocks(
    classified: Sequence[ClassifiedLine],
    profile: StyleProfile,
    kind: DocumentKind,
) -> list[Block]:
    """Map each classified line to exactly one styled block, in order."""
    body_space_after = (
        profile.letter_space_after
        if kind is DocumentKind.COVER_LETTER
        else profile.body_space_after
    )
    return [_to_block(item, profile, body_space_after) for item in classified]


def _to_block(item: ClassifiedLine, profile: StyleProfile, body_space_after: float) -> Block:
    text = item.line.trimmed

    if item.role is Role.NAME:
        return Block(
            kind=BlockKind.NAME_HEADER,
            text=text,
            font_size=profile.name_size,
            bold=True,
            alignment=Alignment.CENTER,
            space_after=profile.name_space_after,
        )
    if item.role is Role.SUBTITLE:
        return Block(
            kind=BlockKind.SUBTITLE,
            text=text,
            font_size=profile.subtitle_size,
            color=profile.subtitle_color,
            alignment=Alignment.CENTER,
            space_after=profile.subtitle_space_after,
        )
    if item.role is Role.HEADING:
        return Block(
            kind=BlockKind.SECTION_HEADING,
            text=heading_title(text),
            font_size=profile.heading_size,
            bold=True,
            color=profile.heading_color,
            space_before=profile.heading_space_before,
            space_after=profile.heading_space_after,
            uppercase=True,
        )
    if item.role is Role.BODY:
        return Block(
            kind=BlockKind.BODY_LINE,
            text=text,
            font_size=profile.body_size,
            space_after=body_space_after,
        )
    return Block(kind=BlockKind.BLANK_LINE, font_size=profile.body_size)


def build_document(
    raw_text: str,
    kind: DocumentKind | str,
    template_id: TemplateId | str,
) -> list[Block]:
    """Segment, classify and style *raw_text* into a fresh block sequence."""
    kind = DocumentKind(kind)
    profile = resolve_style(template_id)
    return build_blocks(classify_lines(split_lines(raw_text), kind), profile, kind)
