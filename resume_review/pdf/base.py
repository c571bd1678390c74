from abc import ABC, abstractmethod
from pathlib import Path

PAGE_SEPARATOR = " "


def join_pages(pages: list[str]) -> str:
    """Flatten per-page text into one string, preserving reading order."""
    return PAGE_SEPARATOR.join(page.strip() for page in pages).strip()


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_path: Path) -> str:
        """Extract plain text from a PDF file on disk.

        Args:
            pdf_path: Location of the staged PDF.

        Returns:
            Page texts joined by a single space. Empty string for documents
            without a text layer.

        Raises:
            PdfExtractionError: if the file cannot be parsed as a PDF.
        """
