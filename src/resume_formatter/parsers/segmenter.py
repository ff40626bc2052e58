"""Split raw text into lines."""

from __future__ import annotations

import re

from resume_formatter.models.document import Line

_LINE_BREAK = re.compile(r"\r?\n")

# C0 controls that XML 1.0 (and so DOCX) cannot carry; tab, LF and CR are allowed
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def split_lines(text: str) -> list[Line]:
    """Split on ``\\n`` or ``\\r\\n``, keeping blank lines as empty entries.

    Control characters other than tab are dropped first, so every writer
    receives the same text. An empty string yields a single empty line.
    """
    text = _CONTROL_CHARS.sub("", text)
    return [Line.from_raw(raw) for raw in _LINE_BREAK.split(text)]
