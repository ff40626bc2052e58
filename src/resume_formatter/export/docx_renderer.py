"""DOCX output renderer: one paragraph per block."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Sequence
from datetime import datetime
from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from resume_formatter.models.document import Alignment, Block, BlockKind

logger = logging.getLogger(__name__)

# Pinned so identical input always yields identical bytes
_FIXED_TIMESTAMP = datetime(2024, 1, 1)
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

_ALIGNMENTS = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}


def render_docx(blocks: Sequence[Block]) -> bytes:
    """Render a block sequence to .docx bytes."""
    doc = Document()

    style = doc.styles["Normal"]
    style.font.name = "Calibri"

    props = doc.core_properties
    props.author = "resume-formatter"
    props.last_modified_by = "resume-formatter"
    props.created = _FIXED_TIMESTAMP
    props.modified = _FIXED_TIMESTAMP
    props.revision = 1

    for block in blocks:
        _render_block(doc, block)

    buf = BytesIO()
    doc.save(buf)
    data = _normalize_package(buf.getvalue())
    logger.debug("Rendered %d blocks to %d DOCX bytes", len(blocks), len(data))
    return data


def _render_block(doc: Document, block: Block) -> None:
    """Append one block as a paragraph; blank lines become empty paragraphs."""
    para = doc.add_paragraph()
    if block.kind is BlockKind.BLANK_LINE:
        return

    para.alignment = _ALIGNMENTS[block.alignment]
    fmt = para.paragraph_format
    if block.space_before:
        fmt.space_before = Pt(block.space_before)
    fmt.space_after = Pt(block.space_after)

    run = para.add_run(block.display_text)
    run.bold = block.bold
    run.font.size = Pt(block.font_size)
    if block.color:
        run.font.color.rgb = RGBColor.from_string(block.color)


def _normalize_package(data: bytes) -> bytes:
    """Rewrite the zip container with fixed entry timestamps."""
    out = BytesIO()
    with zipfile.ZipFile(BytesIO(data)) as src, zipfile.ZipFile(
        out, "w", zipfile.ZIP_DEFLATED
    ) as dst:
        for info in src.infolist():
            entry = zipfile.ZipInfo(info.filename, date_time=_ZIP_EPOCH)
            entry.compress_type = zipfile.ZIP_DEFLATED
            dst.writestr(entry, src.read(info.filename))
    return out.getvalue()
