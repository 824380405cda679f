"""Local filesystem storage for uploaded images.

Storage layout:
    <upload_dir>/<epoch_ms>-<random>.<ext>

The directory is served read-only by the web app under the public uploads
path, so a stored filename maps directly onto its URL.
"""

import logging
import mimetypes
import secrets
import time
from pathlib import Path

from portfolio.application.interfaces import FileStorage, StoredFile

logger = logging.getLogger(__name__)

_MAX_SUFFIX_LEN = 16


def _unique_stem() -> str:
    """Millisecond timestamp plus a 9-digit random suffix."""
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9):09d}"


def _safe_suffix(filename: str) -> str:
    """Keep the original extension (with its dot) when it looks sane."""
    suffix = Path(filename).suffix
    if not suffix or len(suffix) > _MAX_SUFFIX_LEN or not suffix[1:].isalnum():
        return ""
    return suffix.lower()


class LocalFileStorage(FileStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    async def store_file(self, content: bytes, original_name: str, content_type: str | None = None) -> StoredFile:
        """Store an uploaded file under a collision-resistant generated name."""
        suffix = _safe_suffix(original_name)
        dest_path = self._upload_dir / f"{_unique_stem()}{suffix}"
        while dest_path.exists():
            dest_path = self._upload_dir / f"{_unique_stem()}{suffix}"

        dest_path.write_bytes(content)

        mime_type = content_type or mimetypes.guess_type(original_name)[0] or "application/octet-stream"

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))

        return StoredFile(
            filename=dest_path.name,
            original_name=original_name,
            size=len(content),
            mime_type=mime_type,
            stored_path=str(dest_path),
        )

    def get_file_path(self, filename: str) -> Path:
        return self._upload_dir / Path(filename).name

    async def delete_file(self, filename: str) -> bool:
        """Delete a stored file. Returns False if it was not found."""
        file_path = self.get_file_path(filename)
        if not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted file from disk: %s", file_path)
        return True
