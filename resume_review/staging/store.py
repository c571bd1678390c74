import asyncio
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from resume_review.logging.logger import Log
from resume_review.staging.exceptions import StagingWriteError
from resume_review.staging.models import StagedDocument


def staged_file_path(staging_root: Path, document_id: str, suffix: str = ".pdf") -> Path:
    """Build path to a staged file: {staging_root}/temp_{document_id}{suffix}"""
    return staging_root / f"temp_{document_id}{suffix}"


class StagingStore:
    """Writes uploaded payloads to uniquely named files and removes them again.

    Concurrent requests share the staging directory; each staged file is keyed
    by a fresh uuid4 token, so no locking is needed.
    """

    DEFAULT_ROOT = Path("./staging")

    def __init__(self, staging_root: Path | None = None, suffix: str = ".pdf") -> None:
        self._staging_root = staging_root if staging_root is not None else self.DEFAULT_ROOT
        self._suffix = suffix

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    async def stage(self, payload: bytes) -> StagedDocument:
        """Write payload to a fresh location and return its handle.

        Raises:
            StagingWriteError: if the directory or file cannot be written.
        """
        document_id = self.new_id()
        document = StagedDocument(
            id=document_id,
            path=staged_file_path(self._staging_root, document_id, self._suffix),
        )
        try:
            await asyncio.to_thread(self._write, document.path, payload)
        except OSError as exc:
            # FileExistsError means the path belongs to someone else; leave it alone.
            if not isinstance(exc, FileExistsError):
                await asyncio.to_thread(self._discard_partial, document)
            raise StagingWriteError(f"Failed to stage document {document_id}: {exc}") from exc
        Log.debug("Document staged", document_id=document_id, size=len(payload))
        return document

    async def release(self, document: StagedDocument) -> None:
        """Remove a staged file. Never raises; problems are logged."""
        try:
            await asyncio.to_thread(document.path.unlink)
        except FileNotFoundError:
            Log.warning("Staged file already removed", document_id=document.id)
        except OSError as exc:
            Log.error(f"Failed to remove staged file: {exc}", document_id=document.id)
        else:
            Log.debug("Staged file removed", document_id=document.id)

    @asynccontextmanager
    async def staged(self, payload: bytes) -> AsyncIterator[StagedDocument]:
        """Stage payload for the duration of the block and release it exactly once on exit."""
        document = await self.stage(payload)
        try:
            yield document
        finally:
            await asyncio.shield(self.release(document))

    @staticmethod
    def _write(path: Path, payload: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("xb") as fh:
            fh.write(payload)

    @staticmethod
    def _discard_partial(document: StagedDocument) -> None:
        try:
            document.path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not remove partial staged file: {exc}", document_id=document.id)
