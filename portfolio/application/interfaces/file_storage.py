"""Abstract interface (port) for uploaded image storage."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredFile:
    """Result of storing a single uploaded file."""

    filename: str
    original_name: str
    size: int
    mime_type: str
    stored_path: str


class FileStorage(ABC):
    """Port for persisting uploaded binaries to a publicly served area."""

    @abstractmethod
    async def store_file(self, content: bytes, original_name: str, content_type: str | None = None) -> StoredFile:
        """Persist ``content`` under a generated, collision-resistant name."""
        ...

    @abstractmethod
    async def delete_file(self, filename: str) -> bool:
        """Remove a stored file. Returns False if it did not exist."""
        ...
