"""Upload checks applied before anything touches the staging directory."""

from resume_review.ingestion.exceptions import ValidationFailure
from resume_review.ingestion.models import UploadedPayload


def _media_label(media_type: str) -> str:
    return media_type.rsplit("/", 1)[-1].upper()


class PayloadValidator:
    """Accepts exactly one document type, non-empty and within the size limit."""

    def __init__(
        self,
        accepted_media_type: str = "application/pdf",
        max_bytes: int | None = None,
    ) -> None:
        self._accepted_media_type = accepted_media_type.strip().lower()
        self._max_bytes = max_bytes

    def validate(self, payload: UploadedPayload | None) -> UploadedPayload:
        """Return the payload unchanged if it may be staged.

        Raises:
            ValidationFailure: missing file, wrong media type, empty or oversize content.
        """
        if payload is None:
            raise ValidationFailure("No file uploaded")
        media_type = (payload.media_type or "").split(";", 1)[0].strip().lower()
        if media_type != self._accepted_media_type:
            raise ValidationFailure(
                f"Only {_media_label(self._accepted_media_type)} files are allowed"
            )
        if payload.size == 0:
            raise ValidationFailure("Uploaded file is empty")
        if self._max_bytes is not None and payload.size > self._max_bytes:
            raise ValidationFailure(
                f"Uploaded file exceeds the {self._max_bytes} byte limit"
            )
        return payload
