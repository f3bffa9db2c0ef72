import io
from pathlib import Path

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from cvscoring.storage.local_storage import LocalObjectStorage

SAMPLE_CV_LINES = [
    "Anna Kowalska",
    "Senior Frontend Developer",
    "7 years of experience building web applications",
    "Skills: React, TypeScript, Node.js, Docker, AWS",
    "Built an e-commerce platform serving 1M users",
    "University of Warsaw, Computer Science",
    "English: C1",
]


@pytest.fixture()
def sample_cv_text() -> str:
    return "\n".join(SAMPLE_CV_LINES)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def cv_pdf_bytes() -> bytes:
    """Generate a one-page CV PDF, one line of SAMPLE_CV_LINES per row."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in SAMPLE_CV_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a one-row table."""
    document = Document()
    document.add_paragraph("Jan Nowak")
    document.add_paragraph("Backend developer with Python and Django")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "PostgreSQL"
    table.rows[0].cells[1].text = "Docker"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def storage(tmp_path: Path) -> LocalObjectStorage:
    return LocalObjectStorage(tmp_path / "files")
