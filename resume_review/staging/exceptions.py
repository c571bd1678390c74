from resume_review.ingestion.exceptions import IOFailure


class StagingWriteError(IOFailure):
    """Raised when a payload cannot be written to the staging directory."""
