"""Data models for the document export pipeline."""

from resume_formatter.models.document import (
    Alignment,
    Block,
    BlockKind,
    ClassifiedLine,
    DocumentKind,
    Line,
    Role,
    TemplateId,
)
from resume_formatter.models.style import StyleProfile, TemplateMeta

__all__ = [
    "Alignment",
    "Block",
    "BlockKind",
    "ClassifiedLine",
    "DocumentKind",
    "Line",
    "Role",
    "StyleProfile",
    "TemplateId",
    "TemplateMeta",
]
