"""Turn plain-text resumes and cover letters into styled DOCX and PDF files."""

__version__ = "0.1.0"
