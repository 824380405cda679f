"""Application service for multi-file image uploads."""

import logging
from dataclasses import dataclass

from portfolio.application.interfaces import FileStorage, StoredFile
from portfolio.domain.exceptions import UploadError

logger = logging.getLogger(__name__)


@dataclass
class IncomingFile:
    """One part of a multipart upload, read into memory."""

    original_name: str
    content: bytes
    content_type: str | None = None


@dataclass
class PublishedFile:
    """A stored upload together with the URL it is served from."""

    stored: StoredFile
    url: str


class UploadService:
    """Validates and stores a batch of uploaded images.

    The whole batch is checked before anything is written: one oversized
    file or too many files rejects the request instead of silently dropping
    the offenders.
    """

    def __init__(
        self,
        storage: FileStorage,
        *,
        max_files: int = 10,
        max_file_size: int = 5 * 1024 * 1024,
        public_path: str = "/uploads",
    ):
        self._storage = storage
        self._max_files = max_files
        self._max_file_size = max_file_size
        self._public_path = "/" + public_path.strip("/")

    def public_url(self, filename: str, origin: str | None = None) -> str:
        """Absolute URL when the request origin is known, else root-relative."""
        path = f"{self._public_path}/{filename}"
        if origin:
            return f"{origin.rstrip('/')}{path}"
        return path

    def validate(self, files: list[IncomingFile]) -> None:
        if len(files) > self._max_files:
            raise UploadError(f"Too many files: at most {self._max_files} per upload")
        for incoming in files:
            if len(incoming.content) > self._max_file_size:
                limit_mb = self._max_file_size / (1024 * 1024)
                raise UploadError(
                    f"File too large: {incoming.original_name} exceeds {limit_mb:g} MB",
                    status_code=413,
                )

    async def upload(self, files: list[IncomingFile], origin: str | None = None) -> list[PublishedFile]:
        self.validate(files)

        published: list[PublishedFile] = []
        for incoming in files:
            try:
                stored = await self._storage.store_file(
                    incoming.content,
                    incoming.original_name,
                    content_type=incoming.content_type,
                )
            except OSError as exc:
                logger.exception("Failed to store upload %s", incoming.original_name)
                for done in published:
                    await self._storage.delete_file(done.stored.filename)
                raise UploadError("Unable to store uploaded file", status_code=500) from exc
            published.append(PublishedFile(stored=stored, url=self.public_url(stored.filename, origin)))

        logger.info("Stored %d uploaded file(s)", len(published))
        return published
