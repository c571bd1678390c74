from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.datastructures import UploadFile

from resume_review.api.dependencies import get_pipeline, get_settings
from resume_review.api.schemas import ErrorResponse, ReviewResponse
from resume_review.config.settings import Settings
from resume_review.ingestion.exceptions import ValidationFailure
from resume_review.ingestion.models import PipelineError, PipelineOutcome, UploadedPayload
from resume_review.ingestion.pipeline import IngestionPipeline
from resume_review.logging.logger import Log

router = APIRouter(tags=["Reviews"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Resume Review Backend is running"


@router.post(
    "/upload-resume",
    response_model=ReviewResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def upload_resume(
    request: Request,
    pipeline: IngestionPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Review a single uploaded PDF.

    The file is read from the multipart field named by ``upload_field_name``
    (``resume`` by default). A missing field is reported by the pipeline as a
    validation failure rather than a schema error.
    """
    try:
        payload = await _read_payload(
            request, settings.upload_field_name, settings.max_upload_bytes
        )
    except ValidationFailure as exc:
        Log.warning(f"Upload rejected: {exc}")
        outcome = PipelineOutcome.errored(PipelineError(kind=exc.kind, message=str(exc)))
    else:
        outcome = await pipeline.run(payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_body())


async def _read_payload(
    request: Request, field_name: str, max_bytes: int
) -> UploadedPayload | None:
    """Read the single file part named ``field_name``.

    At most ``max_bytes + 1`` bytes are read so an oversize upload is never
    buffered whole; the validator rejects it on size.
    """
    async with request.form() as form:
        uploads = [item for item in form.getlist(field_name) if isinstance(item, UploadFile)]
        if not uploads:
            return None
        if len(uploads) > 1:
            raise ValidationFailure("Only one file may be uploaded")
        upload = uploads[0]
        content = await upload.read(max_bytes + 1)
        return UploadedPayload(
            content=content,
            media_type=upload.content_type,
            filename=upload.filename,
        )
