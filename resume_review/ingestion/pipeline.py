"""Upload -> stage -> extract -> analyze pipeline.

Each request moves through
``received -> validated -> staged -> extracted -> analyzed -> completed``
or stops in ``errored`` with exactly one classified error. The staged file is
released before analysis starts, whatever extraction did.
"""

import uuid
from dataclasses import dataclass
from pathlib import Path

from resume_review.analysis.base import BaseAnalyzer
from resume_review.analysis.factory import AnalyzerFactory
from resume_review.analysis.models import AnalysisResult
from resume_review.config.settings import Settings
from resume_review.ingestion.exceptions import (
    ErrorKind,
    ExtractionFailure,
    IngestionFailure,
    UpstreamFailure,
)
from resume_review.ingestion.models import (
    PipelineError,
    PipelineOutcome,
    PipelineState,
    UploadedPayload,
)
from resume_review.ingestion.validator import PayloadValidator
from resume_review.logging.logger import Log
from resume_review.pdf.factory import TextExtractorFactory
from resume_review.pdf.text_extractor import TextExtractor
from resume_review.staging.models import StagedDocument
from resume_review.staging.store import StagingStore

# Validation messages are passed through; every other kind gets a fixed message.
CLIENT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.IO: "Failed to handle resume",
    ErrorKind.EXTRACTION: "Failed to extract text from PDF",
    ErrorKind.AUTH: "Invalid API key. Please check your API key.",
    ErrorKind.RATE_LIMITED: "API quota exceeded. Please try again later.",
    ErrorKind.UPSTREAM: "Failed to process with the analysis service",
}


@dataclass(slots=True)
class PipelineContext:
    request_id: str
    state: PipelineState = PipelineState.RECEIVED
    payload: UploadedPayload | None = None
    document_id: str = ""
    extracted_text: str = ""
    result: AnalysisResult | None = None


class IngestionPipeline:
    """Runs one uploaded document through validation, extraction and analysis.

    All collaborators are built once at startup and shared across requests;
    the pipeline itself keeps no per-request state between calls.
    """

    def __init__(
        self,
        *,
        validator: PayloadValidator,
        staging_store: StagingStore,
        text_extractor: TextExtractor,
        analyzer: BaseAnalyzer,
    ) -> None:
        self._validator = validator
        self._staging_store = staging_store
        self._text_extractor = text_extractor
        self._analyzer = analyzer

    async def run(self, payload: UploadedPayload | None) -> PipelineOutcome:
        """Process one upload; never raises a classified failure to the caller."""
        context = PipelineContext(request_id=uuid.uuid4().hex[:12])
        Log.info("Upload received", request_id=context.request_id)
        try:
            await self._run_stages(context, payload)
        except IngestionFailure as exc:
            return self._fail(context, exc)

        if context.result is None:
            raise RuntimeError("Pipeline finished without an analysis result")
        context.state = PipelineState.COMPLETED
        Log.info("Analysis completed", request_id=context.request_id)
        return PipelineOutcome.completed(context.result)

    async def aclose(self) -> None:
        await self._analyzer.aclose()

    async def _run_stages(
        self,
        context: PipelineContext,
        payload: UploadedPayload | None,
    ) -> None:
        context.payload = self._validator.validate(payload)
        self._advance(context, PipelineState.VALIDATED, size=context.payload.size)

        async with self._staging_store.staged(context.payload.content) as document:
            context.document_id = document.id
            self._advance(context, PipelineState.STAGED, document_id=document.id)
            context.extracted_text = await self._extract(document)
        self._advance(context, PipelineState.EXTRACTED, chars=len(context.extracted_text))
        if not context.extracted_text:
            Log.warning("Extracted text is empty", request_id=context.request_id)

        context.result = await self._analyze(context.extracted_text)
        self._advance(context, PipelineState.ANALYZED)

    async def _extract(self, document: StagedDocument) -> str:
        try:
            return await self._text_extractor.extract(document)
        except IngestionFailure:
            raise
        except Exception as exc:
            raise ExtractionFailure(f"Unclassified extraction error: {exc}") from exc

    async def _analyze(self, text: str) -> AnalysisResult:
        try:
            return await self._analyzer.analyze(text)
        except IngestionFailure:
            raise
        except Exception as exc:
            raise UpstreamFailure(f"Unclassified analysis error: {exc}") from exc

    @staticmethod
    def _advance(context: PipelineContext, state: PipelineState, **fields: object) -> None:
        context.state = state
        Log.info(f"Pipeline {state.value}", request_id=context.request_id, **fields)

    @staticmethod
    def _fail(context: PipelineContext, exc: IngestionFailure) -> PipelineOutcome:
        failed_at = context.state
        context.state = PipelineState.ERRORED
        Log.error(
            f"{exc.kind.value} after {failed_at.value}: {exc}",
            request_id=context.request_id,
        )
        message = CLIENT_MESSAGES.get(exc.kind, str(exc))
        return PipelineOutcome.errored(PipelineError(kind=exc.kind, message=message))


def build_pipeline(
    settings: Settings,
    staging_root: Path | None = None,
    analyzer: BaseAnalyzer | None = None,
) -> IngestionPipeline:
    """Build an IngestionPipeline with all required adapters."""
    validator = PayloadValidator(
        accepted_media_type=settings.accepted_media_type,
        max_bytes=settings.max_upload_bytes,
    )
    staging_store = StagingStore(
        staging_root=staging_root if staging_root is not None else Path(settings.staging_dir)
    )
    return IngestionPipeline(
        validator=validator,
        staging_store=staging_store,
        text_extractor=TextExtractorFactory.create(settings),
        analyzer=analyzer if analyzer is not None else AnalyzerFactory.create(settings),
    )
