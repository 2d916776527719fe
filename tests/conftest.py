"""Shared test fixtures."""

from __future__ import annotations

from io import BytesIO

import pytest
from fastapi.testclient import TestClient

from skillens.api import create_app
from skillens.config import AppConfig, UploadConfig


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
Contact: jane.doe@example.com | 555-0100

Summary
Backend engineer with six years of experience building APIs.

Experience
Acme Corp - Senior Engineer (2020 - present)
- Developed a billing service in Python handling 2M requests/day
- Managed a team of 4 engineers

Education
B.Sc. Computer Science, State University

Skills
Python, PostgreSQL, Docker
"""


@pytest.fixture
def all_sections_text() -> str:
    return "Contact\nSummary\nExperience\nSkills\nEducation\n"


@pytest.fixture
def make_docx():
    """Build DOCX bytes with one paragraph per line."""

    def _make(text: str) -> bytes:
        from docx import Document

        doc = Document()
        for line in text.splitlines():
            doc.add_paragraph(line)
        buf = BytesIO()
        doc.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture
def make_pdf():
    """Build single-page PDF bytes, one text line per input line."""

    def _make(text: str) -> bytes:
        import fitz  # pymupdf

        doc = fitz.open()
        page = doc.new_page()
        y = 72
        for line in text.splitlines():
            if line.strip():
                page.insert_text((72, y), line, fontsize=10)
            y += 14
        data = doc.tobytes()
        doc.close()
        return data

    return _make


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(AppConfig()))


@pytest.fixture
def small_upload_client() -> TestClient:
    return TestClient(create_app(AppConfig(upload=UploadConfig(max_bytes=64))))
