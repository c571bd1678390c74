import io
from collections.abc import Callable
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _render_pdf(pages: list[str | None]) -> bytes:
    """Render one page per entry; None leaves the page blank."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text is not None:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF with known text content."""
    return _render_pdf(["Experienced engineer"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _render_pdf(["Page1", "Page2"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _render_pdf([None])


@pytest.fixture()
def write_pdf(tmp_path: Path) -> Callable[[bytes], Path]:
    """Write bytes to a fresh .pdf file under tmp_path and return its path."""
    counter = {"n": 0}

    def _write(content: bytes) -> Path:
        counter["n"] += 1
        path = tmp_path / f"doc_{counter['n']}.pdf"
        path.write_bytes(content)
        return path

    return _write
