"""DOCX and PDF export for resume-formatter."""
from resume_formatter.export.docx_renderer import render_docx
from resume_formatter.export.exporter import ExportFormat, artifact_name, export
from resume_formatter.export.pdf_renderer import render_pdf

__all__ = ["export", "artifact_name", "ExportFormat", "render_docx", "render_pdf"]
