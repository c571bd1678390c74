from pathlib import Path

import pymupdf

from resume_review.pdf.base import BasePdfExtractor, join_pages
from resume_review.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_path: Path) -> str:
        try:
            with pymupdf.open(pdf_path, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return join_pages(pages)
