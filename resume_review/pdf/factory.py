from resume_review.config.settings import Settings
from resume_review.pdf.base import BasePdfExtractor
from resume_review.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_review.pdf.pymupdf_adapter import PyMuPdfAdapter
from resume_review.pdf.text_extractor import TextExtractor


class TextExtractorFactory:
    """Builds the async text extractor around the configured PDF engine."""

    ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_engine(cls, engine: str) -> BasePdfExtractor:
        engine_cls = cls.ENGINES.get(engine.lower())
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return engine_cls()

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(cls.create_engine(settings.pdf_engine))
