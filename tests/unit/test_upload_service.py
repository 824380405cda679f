"""Unit tests for the UploadService and LocalFileStorage."""

import re

import pytest

from portfolio.application.interfaces import FileStorage, StoredFile
from portfolio.application.services import IncomingFile, UploadService
from portfolio.domain.exceptions import UploadError
from portfolio.infrastructure.storage.local_file_storage import LocalFileStorage


class FakeFileStorage(FileStorage):
    """Records stored files; optionally fails on the n-th store."""

    def __init__(self, fail_on: int | None = None):
        self.stored: dict[str, bytes] = {}
        self.deleted: list[str] = []
        self._fail_on = fail_on
        self._calls = 0

    async def store_file(self, content, original_name, content_type=None):
        self._calls += 1
        if self._fail_on is not None and self._calls == self._fail_on:
            raise OSError("No space left on device")
        filename = f"{self._calls}-{original_name}"
        self.stored[filename] = content
        return StoredFile(
            filename=filename,
            original_name=original_name,
            size=len(content),
            mime_type=content_type or "application/octet-stream",
            stored_path=f"/tmp/{filename}",
        )

    async def delete_file(self, filename):
        self.deleted.append(filename)
        return self.stored.pop(filename, None) is not None


def _files(count: int, size: int = 10) -> list[IncomingFile]:
    return [IncomingFile(f"photo{i}.png", b"x" * size, "image/png") for i in range(count)]


class TestUploadService:
    @pytest.mark.asyncio
    async def test_upload_returns_absolute_urls_when_origin_known(self):
        service = UploadService(FakeFileStorage(), public_path="/uploads")

        published = await service.upload(_files(2), origin="http://localhost:3001")

        assert [p.url for p in published] == [
            "http://localhost:3001/uploads/1-photo0.png",
            "http://localhost:3001/uploads/2-photo1.png",
        ]
        assert published[0].stored.mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_upload_without_origin_is_root_relative(self):
        service = UploadService(FakeFileStorage(), public_path="uploads/")

        published = await service.upload(_files(1))

        assert published[0].url == "/uploads/1-photo0.png"

    @pytest.mark.asyncio
    async def test_too_many_files_rejected_before_storing(self):
        storage = FakeFileStorage()
        service = UploadService(storage, max_files=10)

        with pytest.raises(UploadError) as exc_info:
            await service.upload(_files(11))

        assert exc_info.value.status_code == 400
        assert storage.stored == {}

    @pytest.mark.asyncio
    async def test_oversized_file_rejects_whole_batch(self):
        storage = FakeFileStorage()
        service = UploadService(storage, max_file_size=100)
        files = _files(2) + [IncomingFile("huge.jpg", b"x" * 101, "image/jpeg")]

        with pytest.raises(UploadError) as exc_info:
            await service.upload(files)

        assert exc_info.value.status_code == 413
        assert "huge.jpg" in exc_info.value.message
        assert storage.stored == {}

    @pytest.mark.asyncio
    async def test_storage_failure_removes_already_stored_files(self):
        storage = FakeFileStorage(fail_on=3)
        service = UploadService(storage)

        with pytest.raises(UploadError) as exc_info:
            await service.upload(_files(3))

        assert exc_info.value.status_code == 500
        assert storage.deleted == ["1-photo0.png", "2-photo1.png"]
        assert storage.stored == {}

    @pytest.mark.asyncio
    async def test_empty_batch_is_accepted(self):
        service = UploadService(FakeFileStorage())
        assert await service.upload([]) == []


class TestLocalFileStorage:
    @pytest.mark.asyncio
    async def test_store_uses_generated_name_and_keeps_extension(self, tmp_path):
        storage = LocalFileStorage(upload_dir=str(tmp_path / "uploads"))

        stored = await storage.store_file(b"\x89PNG", "My Photo.PNG")

        assert re.fullmatch(r"\d+-\d{9}\.png", stored.filename)
        assert (tmp_path / "uploads" / stored.filename).read_bytes() == b"\x89PNG"
        assert stored.original_name == "My Photo.PNG"
        assert stored.mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_suspicious_extension_is_dropped(self, tmp_path):
        storage = LocalFileStorage(upload_dir=str(tmp_path))

        stored = await storage.store_file(b"data", "evil.ph$p")

        assert "." not in stored.filename

    @pytest.mark.asyncio
    async def test_delete_file(self, tmp_path):
        storage = LocalFileStorage(upload_dir=str(tmp_path))
        stored = await storage.store_file(b"data", "a.jpg")

        assert await storage.delete_file(stored.filename) is True
        assert await storage.delete_file(stored.filename) is False
