"""Heuristic classification of plain-text lines into semantic roles.

Resumes get a name line, an optional subtitle line and section headings;
cover letters are body text only.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from resume_formatter.models.document import ClassifiedLine, DocumentKind, Line, Role

SECTION_TITLES = frozenset({
    "PROFESSIONAL SUMMARY",
    "SUMMARY",
    "SKILLS",
    "EXPERIENCE",
    "WORK EXPERIENCE",
    "EDUCATION",
    "CERTIFICATIONS",
    "PROJECTS",
})

# Ordered rule table, applied to the upper-cased trimmed line.
# The colon rule is last and matches anything ending in ":".
HEADING_RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("section_title", lambda upper: upper in SECTION_TITLES),
    ("core_skills_prefix", lambda upper: upper.startswith("CORE SKILLS")),
    ("colon_suffix", lambda upper: upper.endswith(":")),
)


def matching_heading_rule(text: str) -> str | None:
    """Return the name of the first heading rule matching *text*, if any."""
    trimmed = text.strip()
    if not trimmed:
        return None
    upper = trimmed.upper()
    for name, predicate in HEADING_RULES:
        if predicate(upper):
            return name
    return None


def is_section_heading(text: str) -> bool:
    return matching_heading_rule(text) is not None


def heading_title(text: str) -> str:
    """Display text of a heading: trimmed, one trailing colon removed."""
    trimmed = text.strip()
    return trimmed[:-1].rstrip() if trimmed.endswith(":") else trimmed


def classify_lines(lines: Sequence[Line], kind: DocumentKind) -> list[ClassifiedLine]:
    """Assign a role to every line according to the document kind."""
    if kind is DocumentKind.COVER_LETTER:
        return [
            ClassifiedLine(line=line, role=Role.BLANK if line.is_empty else Role.BODY)
            for line in lines
        ]

    start = next((i for i, line in enumerate(lines) if not line.is_empty), None)
    if start is None:
        return [ClassifiedLine(line=Line.from_raw(""), role=Role.BLANK)]

    result = [ClassifiedLine(line=lines[start], role=Role.NAME)]
    index = start + 1

    if index < len(lines):
        candidate = lines[index]
        if not candidate.is_empty and not is_section_heading(candidate.trimmed):
            result.append(ClassifiedLine(line=candidate, role=Role.SUBTITLE))
            index += 1

    for line in lines[index:]:
        if line.is_empty:
            role = Role.BLANK
        elif is_section_heading(line.trimmed):
            role = Role.HEADING
        else:
            role = Role.BODY
        result.append(ClassifiedLine(line=line, role=role))

    return result
