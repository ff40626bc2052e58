"""Extract plain text from uploaded resume files (.txt, .md, .docx)."""

from __future__ import annotations

import logging
import re
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Protocol

from resume_formatter.exceptions import (
    EmptyExtractionError,
    ExtractionError,
    UnavailableCapabilityError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

_ARTIFACTS = re.compile(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]")


class TextExtractor(Protocol):
    """Turns uploaded bytes into text; raises ValueError for unreadable data."""

    def extract_text(self, data: bytes) -> str:
        ...


class PlainTextExtractor:
    def extract_text(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")


class DocxTextExtractor:
    """Paragraph text of a .docx, one line per paragraph (empty ones kept)."""

    def extract_text(self, data: bytes) -> str:
        try:
            from docx import Document
            from docx.opc.exceptions import PackageNotFoundError
        except ImportError as exc:
            raise UnavailableCapabilityError("DOCX text extraction", "python-docx") from exc

        try:
            doc = Document(BytesIO(data))
        except (zipfile.BadZipFile, PackageNotFoundError, KeyError) as exc:
            raise ValueError(f"not a valid .docx package: {exc}") from exc
        return "\n".join(p.text for p in doc.paragraphs)


_EXTRACTORS: dict[str, TextExtractor] = {
    ".txt": PlainTextExtractor(),
    ".md": PlainTextExtractor(),
    ".docx": DocxTextExtractor(),
}


def register_extractor(suffix: str, extractor: TextExtractor) -> None:
    """Register (or replace) the extractor used for a file extension."""
    _EXTRACTORS[suffix.lower()] = extractor


def get_extractor(filename: str | Path) -> TextExtractor:
    suffix = Path(filename).suffix.lower()
    try:
        return _EXTRACTORS[suffix]
    except KeyError:
        raise UnsupportedFileTypeError(suffix) from None


def parse_resume_bytes(filename: str, data: bytes) -> str:
    """Extract clean text from an uploaded file's bytes."""
    extractor = get_extractor(filename)
    try:
        raw = extractor.extract_text(data)
    except ValueError as exc:
        raise ExtractionError(filename, exc) from exc
    text = clean_text(raw)
    if not text.strip():
        raise EmptyExtractionError(filename)
    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (TXT, MD, DOCX) and return clean plain text."""
    path = Path(file_path)
    return parse_resume_bytes(path.name, path.read_bytes())


def clean_text(text: str) -> str:
    """Remove BOM / zero-width artifacts and trailing whitespace on each line.

    Blank lines are kept: they separate paragraphs downstream.
    """
    text = _ARTIFACTS.sub("", text)
    lines = [line.rstrip() for line in re.split(r"\r?\n", text)]
    return "\n".join(lines).strip("\n")
