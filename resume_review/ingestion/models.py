from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from resume_review.analysis.models import AnalysisResult
from resume_review.ingestion.exceptions import ErrorKind


@dataclass(frozen=True)
class UploadedPayload:
    """A single uploaded file as received from the client."""

    content: bytes
    media_type: str | None
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


class PipelineState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    STAGED = "staged"
    EXTRACTED = "extracted"
    ANALYZED = "analyzed"
    COMPLETED = "completed"
    ERRORED = "errored"


@dataclass(frozen=True)
class PipelineError:
    """Classified failure returned to the caller."""

    STATUS_CODES: ClassVar[dict[ErrorKind, int]] = {
        ErrorKind.VALIDATION: 400,
        ErrorKind.IO: 500,
        ErrorKind.EXTRACTION: 500,
        ErrorKind.AUTH: 401,
        ErrorKind.RATE_LIMITED: 429,
        ErrorKind.UPSTREAM: 500,
    }

    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return self.STATUS_CODES[self.kind]


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal result of one pipeline run: a result or an error, never both."""

    state: PipelineState
    result: AnalysisResult | None = None
    error: PipelineError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("PipelineOutcome needs exactly one of result or error")

    @classmethod
    def completed(cls, result: AnalysisResult) -> "PipelineOutcome":
        return cls(state=PipelineState.COMPLETED, result=result)

    @classmethod
    def errored(cls, error: PipelineError) -> "PipelineOutcome":
        return cls(state=PipelineState.ERRORED, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int:
        return self.error.status_code if self.error is not None else 200

    def to_body(self) -> dict[str, str]:
        """JSON body for the HTTP boundary: {"response": ...} or {"error": ...}."""
        if self.result is not None:
            return {"response": self.result.text}
        if self.error is not None:
            return {"error": self.error.message}
        raise ValueError("PipelineOutcome has neither result nor error")
