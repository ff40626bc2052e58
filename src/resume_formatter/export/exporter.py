"""Export entry point: raw text in, document bytes out."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from resume_formatter.config import PageGeometry
from resume_formatter.exceptions import SerializationError
from resume_formatter.export.docx_renderer import render_docx
from resume_formatter.export.pdf_renderer import render_pdf
from resume_formatter.models.document import Block, DocumentKind, TemplateId
from resume_formatter.pipeline.document_builder import build_document

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    WORD_PACKAGE = "docx"
    PAGE = "pdf"

    @property
    def extension(self) -> str:
        return self.value


_FILE_PREFIXES = {
    DocumentKind.RESUME: "tailored-resume",
    DocumentKind.COVER_LETTER: "cover-letter",
}


def export(
    raw_text: str,
    kind: DocumentKind | str,
    template_id: TemplateId | str,
    fmt: ExportFormat | str,
    geometry: PageGeometry | None = None,
) -> bytes:
    """Build a fresh block sequence from *raw_text* and serialize it.

    Raises:
        ValueError: for an unknown kind, template or format.
        SerializationError: if the writer fails; no partial output is returned.
    """
    kind = DocumentKind(kind)
    template_id = TemplateId(template_id)
    fmt = ExportFormat(fmt)

    blocks = build_document(raw_text, kind, template_id)
    logger.debug(
        "Built %d blocks for %s/%s, serializing as %s",
        len(blocks), kind.value, template_id.value, fmt.value,
    )

    if fmt is ExportFormat.WORD_PACKAGE:
        return serialize(blocks, fmt, render_docx)
    return serialize(blocks, fmt, lambda b: render_pdf(b, geometry))


def serialize(
    blocks: Sequence[Block],
    fmt: ExportFormat,
    writer: Callable[[Sequence[Block]], bytes],
) -> bytes:
    """Run *writer*, turning any failure into a single SerializationError."""
    try:
        return writer(blocks)
    except Exception as exc:
        logger.error("%s serialization failed: %s", fmt.value, exc)
        raise SerializationError(fmt.value, exc) from exc


def artifact_name(
    kind: DocumentKind | str,
    template_id: TemplateId | str,
    fmt: ExportFormat | str,
) -> str:
    """Download file name, e.g. ``tailored-resume-modern.docx``."""
    prefix = _FILE_PREFIXES[DocumentKind(kind)]
    return f"{prefix}-{TemplateId(template_id).value}.{ExportFormat(fmt).extension}"
