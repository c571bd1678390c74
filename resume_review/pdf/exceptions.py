from resume_review.ingestion.exceptions import ExtractionFailure


class PdfExtractionError(ExtractionFailure):
    """Raised when a PDF engine cannot parse a staged document."""
