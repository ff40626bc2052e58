"""Shared test fixtures."""

from __future__ import annotations

import pytest

from resume_formatter.models.document import TemplateId
from resume_formatter.models.style import StyleProfile
from resume_formatter.templates.styles import resolve_style


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
Senior Software Engineer
jane@example.com | (555) 010-2000

PROFESSIONAL SUMMARY
Backend engineer with 8 years of experience building distributed systems.

Core Skills & Tools
Python, Go, PostgreSQL, Kubernetes

Experience
Acme Corp - Staff Engineer (2020 - Present)
- Led migration of billing to event-driven architecture
- Cut p99 latency by 40%

Languages:
English, Spanish
"""


@pytest.fixture
def sample_cover_letter_text() -> str:
    return """Dear Hiring Manager,

I am excited to apply for the Staff Engineer role at Globex.
My experience scaling payment systems maps directly to your needs.

SKILLS
Sincerely,
Jane Doe"""


@pytest.fixture
def modern_profile() -> StyleProfile:
    return resolve_style(TemplateId.MODERN)
