"""Template style profiles.

Every ``TemplateId`` maps to a complete ``StyleProfile``; there is no
fallback profile.
"""

from __future__ import annotations

from resume_formatter.models.document import TemplateId
from resume_formatter.models.style import StyleProfile, TemplateMeta

GREY = "4B5563"
NEAR_BLACK = "111827"
BLACK = "000000"
BLUE = "1D4ED8"

STYLE_PROFILES: dict[TemplateId, StyleProfile] = {
    TemplateId.MODERN: StyleProfile(
        name_size=28,
        name_space_after=10,
        subtitle_size=12,
        subtitle_color=GREY,
        subtitle_space_after=13,
        heading_size=12,
        heading_color=GREY,
        heading_space_before=10,
        heading_space_after=4,
        body_size=11,
        body_space_after=2,
        letter_space_after=6,
    ),
    TemplateId.MINIMAL: StyleProfile(
        name_size=22,
        name_space_after=10,
        subtitle_size=12,
        subtitle_color=NEAR_BLACK,
        subtitle_space_after=13,
        heading_size=12,
        heading_color=BLACK,
        heading_space_before=8,
        heading_space_after=3,
        body_size=10,
        body_space_after=2,
        letter_space_after=6,
    ),
    TemplateId.CORPORATE: StyleProfile(
        name_size=28,
        name_space_after=10,
        subtitle_size=12,
        subtitle_color=GREY,
        subtitle_space_after=13,
        heading_size=12,
        heading_color=BLUE,
        heading_space_before=10,
        heading_space_after=4,
        body_size=11,
        body_space_after=2.5,
        letter_space_after=7,
    ),
}

TEMPLATE_META: tuple[TemplateMeta, ...] = (
    TemplateMeta(
        id=TemplateId.MODERN.value,
        name="Modern Professional",
        tag="Default",
        description="Bold name header with clean grey section titles and balanced spacing.",
    ),
    TemplateMeta(
        id=TemplateId.MINIMAL.value,
        name="Clean ATS",
        tag="ATS-friendly",
        description="Ultra-simple typography with tight spacing and no visual noise.",
    ),
    TemplateMeta(
        id=TemplateId.CORPORATE.value,
        name="Executive Blue",
        tag="Leadership",
        description="Blue section headings and a more spacious, corporate-style layout.",
    ),
)


def resolve_style(template_id: TemplateId | str) -> StyleProfile:
    """Look up the style profile for a template id (enum member or value)."""
    return STYLE_PROFILES[TemplateId(template_id)]


def list_templates() -> list[TemplateMeta]:
    return list(TEMPLATE_META)
