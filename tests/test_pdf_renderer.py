"""Tests for pdf_renderer.py: centering, wrapping and determinism."""

from __future__ import annotations

import re
from unittest.mock import patch

import pytest
from fpdf import FPDF

from resume_formatter.config import PageGeometry
from resume_formatter.export import pdf_renderer
from resume_formatter.export.pdf_renderer import _safe_text, render_pdf, split_header, wrap_text
from resume_formatter.models.document import BlockKind
from resume_formatter.pipeline.document_builder import build_document


def _page_count(data: bytes) -> int:
    return len(re.findall(rb"/Type\s*/Page\b", data))


# ---------------------------------------------------------------------------
# render_pdf output
# ---------------------------------------------------------------------------

def test_render_pdf_valid_pdf_magic(sample_resume_text):
    """Output of render_pdf should start with %PDF magic bytes."""
    result = render_pdf(build_document(sample_resume_text, "resume", "modern"))
    assert isinstance(result, bytes)
    assert result[:4] == b"%PDF"


def test_render_pdf_all_templates(sample_resume_text):
    """Each template should produce valid PDF bytes."""
    for template in ("modern", "minimal", "corporate"):
        result = render_pdf(build_document(sample_resume_text, "resume", template))
        assert result[:4] == b"%PDF", f"Template {template!r} did not produce valid PDF"


def test_render_pdf_empty_document():
    result = render_pdf(build_document("", "resume", "modern"))
    assert result[:4] == b"%PDF"
    assert _page_count(result) == 1


def test_render_pdf_is_deterministic(sample_resume_text):
    blocks = build_document(sample_resume_text, "resume", "corporate")
    assert render_pdf(blocks) == render_pdf(blocks)


def test_long_text_flows_onto_more_pages():
    text = "\n".join(f"Paragraph {i} " + "word " * 30 for i in range(120))
    result = render_pdf(build_document(text, "cover_letter", "modern"))
    assert _page_count(result) > 1


def test_non_latin_text_does_not_fail():
    text = "Jane Doe • Engineer\n“Quoted” – 漢字"
    result = render_pdf(build_document(text, "resume", "modern"))
    assert result[:4] == b"%PDF"


def test_custom_geometry():
    geometry = PageGeometry(page_width=216, page_height=279, margin_left=25, content_width=166)
    result = render_pdf(build_document("Jane Doe\nEngineer", "resume", "modern"), geometry)
    assert result[:4] == b"%PDF"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_name_and_subtitle_are_centered():
    blocks = build_document("Jane Doe\nEngineer\nSKILLS\nPython, Go", "resume", "modern")
    with patch.object(FPDF, "text", autospec=True) as text_mock:
        render_pdf(blocks)

    calls = text_mock.call_args_list
    assert [c.args[3] for c in calls] == ["Jane Doe", "Engineer"]
    assert [c.args[2] for c in calls] == [20, 28]
    for c in calls:
        # x centers the string for the font active at draw time
        assert 20 < c.args[1] < 105


def test_remaining_blocks_wrapped_as_one_text():
    blocks = build_document("Jane Doe\nEngineer\nSkills:\nPython, Go\n\nMore", "resume", "modern")
    with patch.object(pdf_renderer, "wrap_text", wraps=wrap_text) as wrap_mock:
        render_pdf(blocks)

    _, text, width = wrap_mock.call_args.args
    assert text == "SKILLS\nPython, Go\n\nMore"
    assert width == 170


def test_cover_letter_skips_centering():
    blocks = build_document("Dear Team,\n\nThanks", "cover_letter", "modern")
    with patch.object(FPDF, "text", autospec=True) as text_mock, patch.object(
        pdf_renderer, "wrap_text", wraps=wrap_text
    ) as wrap_mock:
        render_pdf(blocks)

    text_mock.assert_not_called()
    assert wrap_mock.call_args.args[1] == "Dear Team,\n\nThanks"


def test_name_only_resume_draws_no_body():
    blocks = build_document("Jane Doe", "resume", "modern")
    with patch.object(pdf_renderer, "wrap_text", wraps=wrap_text) as wrap_mock:
        render_pdf(blocks)
    wrap_mock.assert_not_called()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestSplitHeader:
    def test_name_and_subtitle(self):
        blocks = build_document("Jane\nEngineer\nSKILLS", "resume", "modern")
        header, rest = split_header(blocks)
        assert [b.kind for b in header] == [BlockKind.NAME_HEADER, BlockKind.SUBTITLE]
        assert [b.kind for b in rest] == [BlockKind.SECTION_HEADING]

    def test_name_without_subtitle(self):
        blocks = build_document("Jane\nSKILLS\nPython", "resume", "modern")
        header, rest = split_header(blocks)
        assert len(header) == 1
        assert len(rest) == 2

    def test_cover_letter_has_no_header(self):
        blocks = build_document("Jane\nEngineer", "cover_letter", "modern")
        header, rest = split_header(blocks)
        assert header == []
        assert rest == blocks


class TestWrapText:
    @pytest.fixture
    def pdf(self) -> FPDF:
        pdf = FPDF(unit="mm", format="A4")
        pdf.add_page()
        pdf.set_font("helvetica", size=11)
        return pdf

    def test_long_line_wrapped_within_width(self, pdf):
        lines = wrap_text(pdf, "word " * 80, 170)
        assert len(lines) > 1
        assert all(pdf.get_string_width(line.rstrip()) <= 170 for line in lines)

    def test_explicit_breaks_kept(self, pdf):
        lines = wrap_text(pdf, "one\n\ntwo", 170)
        assert [line.strip() for line in lines] == ["one", "", "two"]


class TestSafeText:
    def test_typography_mapped(self):
        assert _safe_text("“Hi” – • ok…") == '"Hi" - - ok...'

    def test_unencodable_replaced(self):
        assert _safe_text("漢") == "?"

    def test_latin1_unchanged(self):
        assert _safe_text("José Müller") == "José Müller"
