"""Tests for template style resolution."""

import pytest
from pydantic import ValidationError

from resume_formatter.models.document import TemplateId
from resume_formatter.models.style import StyleProfile
from resume_formatter.templates.styles import STYLE_PROFILES, list_templates, resolve_style


class TestResolveStyle:
    def test_every_template_has_profile(self):
        for template_id in TemplateId:
            assert isinstance(resolve_style(template_id), StyleProfile)

    def test_accepts_string_value(self):
        assert resolve_style("minimal") == STYLE_PROFILES[TemplateId.MINIMAL]

    def test_unknown_template_rejected(self):
        with pytest.raises(ValueError):
            resolve_style("fancy")

    def test_heading_colors(self):
        assert resolve_style(TemplateId.MODERN).heading_color == "4B5563"
        assert resolve_style(TemplateId.MINIMAL).heading_color == "000000"
        assert resolve_style(TemplateId.CORPORATE).heading_color == "1D4ED8"

    def test_minimal_is_smaller_and_tighter(self):
        modern = resolve_style(TemplateId.MODERN)
        minimal = resolve_style(TemplateId.MINIMAL)
        assert minimal.name_size == 22 < modern.name_size == 28
        assert minimal.body_size == 10 < modern.body_size == 11
        assert minimal.heading_space_before < modern.heading_space_before
        assert minimal.heading_space_after < modern.heading_space_after

    def test_corporate_has_roomier_body(self):
        corporate = resolve_style(TemplateId.CORPORATE)
        modern = resolve_style(TemplateId.MODERN)
        assert corporate.body_space_after > modern.body_space_after
        assert corporate.letter_space_after > modern.letter_space_after

    def test_profile_is_immutable(self):
        profile = resolve_style(TemplateId.MODERN)
        with pytest.raises(ValidationError):
            profile.body_size = 40

    def test_profile_rejects_bad_color(self):
        data = resolve_style(TemplateId.MODERN).model_dump()
        data["heading_color"] = "blue"
        with pytest.raises(ValidationError):
            StyleProfile(**data)


class TestListTemplates:
    def test_lists_all_templates_in_order(self):
        assert [m.id for m in list_templates()] == ["modern", "minimal", "corporate"]

    def test_display_names(self):
        names = {m.id: m.name for m in list_templates()}
        assert names["minimal"] == "Clean ATS"
        assert names["corporate"] == "Executive Blue"
