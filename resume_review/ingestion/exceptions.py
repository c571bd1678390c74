from enum import Enum


class ErrorKind(str, Enum):
    """Stable failure categories surfaced at the pipeline boundary."""

    VALIDATION = "ValidationFailure"
    IO = "IOFailure"
    EXTRACTION = "ExtractionFailure"
    AUTH = "AuthFailure"
    RATE_LIMITED = "RateLimited"
    UPSTREAM = "UpstreamFailure"


class IngestionFailure(Exception):
    """Base exception for all classified ingestion failures."""

    kind: ErrorKind = ErrorKind.UPSTREAM


class ValidationFailure(IngestionFailure):
    """Raised when the uploaded payload is missing or not an accepted document."""

    kind = ErrorKind.VALIDATION


class IOFailure(IngestionFailure):
    """Raised when the payload cannot be written to transient storage."""

    kind = ErrorKind.IO


class ExtractionFailure(IngestionFailure):
    """Raised when text cannot be extracted from a staged document."""

    kind = ErrorKind.EXTRACTION


class AuthFailure(IngestionFailure):
    """Raised when the analysis provider rejects the configured credentials."""

    kind = ErrorKind.AUTH


class RateLimited(IngestionFailure):
    """Raised when the analysis provider reports quota or rate exhaustion."""

    kind = ErrorKind.RATE_LIMITED


class UpstreamFailure(IngestionFailure):
    """Raised for any other analysis provider failure, timeouts included."""

    kind = ErrorKind.UPSTREAM
