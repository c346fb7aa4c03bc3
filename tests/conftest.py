"""
Pytest fixtures for the document pipeline tests.

PDFs are generated in memory with PyMuPDF, so no binary fixtures are needed.
"""

import io
from typing import Optional

import fitz  # PyMuPDF
import pytest


def make_pdf(
    pages: list[Optional[str]],
    encrypt: bool = False,
) -> bytes:
    """
    Build a PDF with one page per entry.

    A string entry is written as text; None produces a page with only a
    filled rectangle (no text layer), like a scanned page.
    """
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text is None:
            page.draw_rect(
                fitz.Rect(72, 72, 300, 300),
                color=(0, 0, 0),
                fill=(0.6, 0.6, 0.6),
            )
        else:
            page.insert_text((72, 72), text, fontsize=11)

    if encrypt:
        data = doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner-secret",
            user_pw="user-secret",
        )
    else:
        data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes() -> bytes:
    """A two-page PDF with text on both pages."""
    return make_pdf([
        "Objective: Grow the customer base.\nKey result: Sign 20 new accounts.",
        "Objective: Improve onboarding.\nKey result: Cut setup time by half.",
    ])


@pytest.fixture
def pdf_stream(pdf_bytes) -> io.BytesIO:
    return io.BytesIO(pdf_bytes)


@pytest.fixture
def scanned_pdf_bytes() -> bytes:
    """A PDF whose only page has graphics but no text."""
    return make_pdf([None])


@pytest.fixture
def encrypted_pdf_bytes() -> bytes:
    return make_pdf(["Confidential roadmap."], encrypt=True)


@pytest.fixture
def okr_document_text() -> str:
    """Multi-paragraph plain text, about 1.4k characters."""
    paragraphs = []
    for i in range(1, 9):
        paragraphs.append(
            f"Objective {i}. The team will deliver measurable outcomes this quarter. "
            f"Key results are reviewed every week. Progress is tracked in the dashboard. "
            f"Owners report blockers early."
        )
    return "\n\n".join(paragraphs)
