"""Exceptions raised by extraction and export."""

from __future__ import annotations


class ResumeFormatterError(Exception):
    """Base class for all resume-formatter errors."""


class SerializationError(ResumeFormatterError):
    """
    Raised when a writer cannot turn a block sequence into bytes.

    No partial output accompanies this error.

    Attributes:
        format: Output format that failed (e.g. 'docx', 'pdf')
        original_error: The exception raised by the underlying writer
    """

    def __init__(self, format: str, original_error: Exception | None = None):
        self.format = format
        self.original_error = original_error

        message = f"Failed to serialize {format} document"
        if original_error is not None:
            message += f": {type(original_error).__name__}: {original_error}"
        super().__init__(message)


class UnavailableCapabilityError(ResumeFormatterError):
    """
    Raised when a text extraction backend cannot be loaded.

    Attributes:
        capability: Human-readable name of the missing capability
        requirement: Package that provides it
    """

    def __init__(self, capability: str, requirement: str):
        self.capability = capability
        self.requirement = requirement
        super().__init__(f"{capability} is unavailable: install '{requirement}' to enable it")


class UnsupportedFileTypeError(ResumeFormatterError, ValueError):
    """
    Raised for uploads whose extension has no registered extractor.

    Attributes:
        suffix: The rejected file extension (lower-cased, with dot)
    """

    def __init__(self, suffix: str):
        self.suffix = suffix
        message = f"Unsupported file type: {suffix or '(none)'}. Please upload a .docx or .txt file."
        if suffix == ".pdf":
            message += " For PDFs, export to DOCX or TXT and upload that."
        super().__init__(message)


class ExtractionError(ResumeFormatterError, ValueError):
    """
    Raised when an uploaded file cannot be read by its extractor.

    Attributes:
        filename: Name of the uploaded file
        original_error: The error raised while reading it
    """

    def __init__(self, filename: str, original_error: Exception | None = None):
        self.filename = filename
        self.original_error = original_error

        message = f"Failed to parse the resume file: {filename}"
        if original_error is not None:
            message += f" ({original_error})"
        super().__init__(message)


class EmptyExtractionError(ResumeFormatterError, ValueError):
    """Raised when an uploaded file yields no non-blank text."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Could not extract any text from the file: {filename}")
