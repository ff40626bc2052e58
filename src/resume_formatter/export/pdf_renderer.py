"""PDF output renderer using fpdf2 core fonts and a manual vertical cursor."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from io import BytesIO

from fpdf import FPDF
from fpdf.enums import MethodReturnValue, XPos, YPos

from resume_formatter.config import PageGeometry
from resume_formatter.models.document import Block, BlockKind

logger = logging.getLogger(__name__)

FONT_FAMILY = "helvetica"

_FIXED_TIMESTAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Core fonts only cover latin-1; map common typography from LLM output first
_TYPOGRAPHY = str.maketrans({
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u2022": "-",
    "\u25cf": "-",
    "\u2026": "...",
})


def render_pdf(blocks: Sequence[Block], geometry: PageGeometry | None = None) -> bytes:
    """Render a block sequence to PDF bytes.

    A leading name block and the subtitle right after it are drawn centered.
    Everything else is joined back into text, wrapped to the content width
    and drawn left-aligned; fpdf2 handles page breaks.
    """
    geometry = geometry or PageGeometry()
    pdf = _new_document(geometry)

    header, rest = split_header(blocks)
    y = geometry.margin_top
    for block in header:
        _draw_centered(pdf, block, y, geometry)
        y += (
            geometry.name_advance
            if block.kind is BlockKind.NAME_HEADER
            else geometry.subtitle_advance
        )
    if header:
        y += geometry.body_gap

    if rest:
        pdf.set_font(FONT_FAMILY, style="", size=_body_size(rest))
        body = "\n".join(_safe_text(block.display_text) for block in rest)
        line_height = pdf.font_size * geometry.line_height_factor
        pdf.set_xy(geometry.margin_left, y)
        for line in wrap_text(pdf, body, geometry.content_width):
            pdf.cell(
                geometry.content_width,
                line_height,
                line,
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )

    buf = BytesIO()
    pdf.output(buf)
    data = buf.getvalue()
    logger.debug("Rendered %d blocks to %d PDF bytes (%d pages)", len(blocks), len(data), pdf.page_no())
    return data


def split_header(blocks: Sequence[Block]) -> tuple[list[Block], list[Block]]:
    """Separate the centered name/subtitle blocks from the wrapped remainder."""
    header: list[Block] = []
    if blocks and blocks[0].kind is BlockKind.NAME_HEADER:
        header.append(blocks[0])
        if len(blocks) > 1 and blocks[1].kind is BlockKind.SUBTITLE:
            header.append(blocks[1])
    return header, list(blocks[len(header):])


def wrap_text(pdf: FPDF, text: str, width: float) -> list[str]:
    """Wrap *text* to *width* with the current font, keeping explicit line breaks."""
    return pdf.multi_cell(
        width,
        None,
        text,
        dry_run=True,
        output=MethodReturnValue.LINES,
    )


def _new_document(geometry: PageGeometry) -> FPDF:
    pdf = FPDF(unit="mm", format=(geometry.page_width, geometry.page_height))
    pdf.creation_date = _FIXED_TIMESTAMP
    right_margin = geometry.page_width - geometry.margin_left - geometry.content_width
    pdf.set_margins(geometry.margin_left, geometry.margin_top, right_margin)
    pdf.set_auto_page_break(auto=True, margin=geometry.margin_top)
    pdf.add_page()
    return pdf


def _draw_centered(pdf: FPDF, block: Block, y: float, geometry: PageGeometry) -> None:
    text = _safe_text(block.display_text)
    pdf.set_font(FONT_FAMILY, style="B" if block.bold else "", size=block.font_size)
    if block.color:
        pdf.set_text_color(*_hex_to_rgb(block.color))
    x = (geometry.page_width - pdf.get_string_width(text)) / 2
    pdf.text(x, y, text)
    pdf.set_text_color(0, 0, 0)


def _body_size(blocks: Sequence[Block]) -> float:
    for block in blocks:
        if block.kind in (BlockKind.BODY_LINE, BlockKind.BLANK_LINE):
            return block.font_size
    return blocks[0].font_size


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def _safe_text(text: str) -> str:
    """Map typography to ASCII, then replace what latin-1 Helvetica cannot draw."""
    text = text.translate(_TYPOGRAPHY)
    try:
        text.encode("latin-1")
        return text
    except UnicodeEncodeError:
        return text.encode("latin-1", errors="replace").decode("latin-1")
