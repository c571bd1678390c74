"""Maps upstream error text onto the classified failure kinds.

The provider exposes no structured error contract we rely on, so this is a
substring match on the error message and is best-effort only.
"""

from resume_review.ingestion.exceptions import (
    AuthFailure,
    IngestionFailure,
    RateLimited,
    UpstreamFailure,
)

AUTH_PATTERN = "API key"
QUOTA_PATTERN = "quota"


def classify_upstream_error(message: str) -> IngestionFailure:
    """Return the classified failure for an upstream error message."""
    if AUTH_PATTERN in message:
        return AuthFailure(message)
    if QUOTA_PATTERN in message:
        return RateLimited(message)
    return UpstreamFailure(message)
