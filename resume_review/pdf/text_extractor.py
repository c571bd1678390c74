import asyncio

from resume_review.logging.logger import Log
from resume_review.pdf.base import BasePdfExtractor
from resume_review.pdf.exceptions import PdfExtractionError
from resume_review.staging.models import StagedDocument


class TextExtractor:
    """Async front for a PDF engine; parsing runs in a worker thread."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def extract(self, document: StagedDocument) -> str:
        """Return the flattened text of a staged document.

        Raises:
            PdfExtractionError: if the staged file cannot be parsed.
        """
        try:
            text = await asyncio.to_thread(self._pdf_extractor.extract, document.path)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"Unexpected extraction error: {exc}") from exc
        Log.debug("Text extracted", document_id=document.id, chars=len(text))
        return text
