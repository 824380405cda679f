"""Abstract interface (port) for the site's connection to the content API.

Implemented over HTTP in the infrastructure layer; the section loader and
the editor controller depend only on this contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from portfolio.domain.entities import (
    AboutContent,
    Blog,
    Certification,
    ContentSection,
    FeaturedSkill,
    HeroContent,
    Project,
    Skill,
)

Payload = dict[str, Any]


@dataclass
class ImageUpload:
    """A file picked in an edit form, ready to send to the upload endpoint."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass
class UploadedImage:
    """One accepted file as reported by the upload endpoint."""

    url: str
    file_name: str
    original_name: str
    size: int
    mimetype: str


class ContentGateway(ABC):
    """Port for reading and writing portfolio content remotely.

    Write methods take wire payloads (camelCase keys) and return the
    canonical entity the service stored.
    """

    @abstractmethod
    async def fetch_hero(self) -> HeroContent: ...

    @abstractmethod
    async def update_hero(self, payload: Payload) -> HeroContent: ...

    @abstractmethod
    async def fetch_about(self) -> AboutContent: ...

    @abstractmethod
    async def update_about(self, payload: Payload) -> AboutContent: ...

    @abstractmethod
    async def list_projects(self) -> list[Project]:
        """Newest first, as returned by the service."""
        ...

    @abstractmethod
    async def create_project(self, payload: Payload) -> Project: ...

    @abstractmethod
    async def list_skills(self) -> list[Skill]: ...

    @abstractmethod
    async def create_skill(self, payload: Payload) -> Skill: ...

    @abstractmethod
    async def list_blogs(self) -> list[Blog]: ...

    @abstractmethod
    async def create_blog(self, payload: Payload) -> Blog: ...

    @abstractmethod
    async def list_certifications(self) -> list[Certification]: ...

    @abstractmethod
    async def create_certification(self, payload: Payload) -> Certification: ...

    @abstractmethod
    async def list_contacts(self) -> list[FeaturedSkill]: ...

    @abstractmethod
    async def create_contact(self, payload: Payload) -> FeaturedSkill: ...

    @abstractmethod
    async def upload_images(self, files: list[ImageUpload]) -> list[UploadedImage]: ...

    @abstractmethod
    async def purge(self, sections: list[ContentSection]) -> list[ContentSection]:
        """Clear the given sections; returns the sections the service reports as cleared."""
        ...
