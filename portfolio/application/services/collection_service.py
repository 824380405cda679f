"""Application services (use cases) for the list content sections.

Each section supports exactly two operations: list everything (newest
first) and create one item. Required fields are checked before anything is
written, so a rejected request never leaves a partial row behind.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from portfolio.application.interfaces import CollectionRepository
from portfolio.application.schemas.content import (
    BlogCreate,
    CertificationCreate,
    ContentWrite,
    FeaturedSkillCreate,
    ProjectCreate,
    SkillCreate,
    normalize_images,
    normalize_lines,
)
from portfolio.domain.entities import Blog, Certification, FeaturedSkill, Project, Skill
from portfolio.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

CreateT = TypeVar("CreateT", bound=ContentWrite)
EntityT = TypeVar("EntityT")

DEFAULT_MAX_IMAGES = 5


class CollectionService(ABC, Generic[CreateT, EntityT]):
    """Orchestrates list/create for one section. Depends on the repository port (DI)."""

    entity_label: str = "item"

    def __init__(self, repository: CollectionRepository[EntityT]):
        self._repository = repository

    @abstractmethod
    def _build(self, data: CreateT) -> EntityT:
        """Turn a validated payload into a new, unsaved entity."""

    async def list_items(self) -> list[EntityT]:
        return await self._repository.get_all()

    async def create_item(self, data: CreateT) -> EntityT:
        data.ensure_required()
        entity = self._build(data)
        try:
            return await self._repository.create(entity)
        except Exception as exc:
            logger.exception("Failed to insert %s", self.entity_label)
            raise PersistenceError(f"Unable to save {self.entity_label}") from exc


class ProjectService(CollectionService[ProjectCreate, Project]):
    entity_label = "project"

    def __init__(self, repository: CollectionRepository[Project], max_images: int = DEFAULT_MAX_IMAGES):
        super().__init__(repository)
        self._max_images = max_images

    def _build(self, data: ProjectCreate) -> Project:
        images = normalize_images(data.images, self._max_images)
        # The first gallery image stands in for the legacy single image.
        image = data.text("image") or (images[0] if images else "")
        return Project(
            tag=data.text("tag"),
            title=data.text("title"),
            description=data.text("description"),
            bullets=normalize_lines(data.bullets),
            link_label=data.text("link_label"),
            link_url=data.text("link_url"),
            image=image,
            images=images,
        )


class SkillService(CollectionService[SkillCreate, Skill]):
    entity_label = "skill"

    def _build(self, data: SkillCreate) -> Skill:
        return Skill(title=data.text("title"), details=data.text("details"))


class BlogService(CollectionService[BlogCreate, Blog]):
    entity_label = "blog"

    def __init__(self, repository: CollectionRepository[Blog], max_images: int = DEFAULT_MAX_IMAGES):
        super().__init__(repository)
        self._max_images = max_images

    def _build(self, data: BlogCreate) -> Blog:
        return Blog(
            title=data.text("title"),
            summary=data.text("summary"),
            link=data.text("link"),
            images=normalize_images(data.images, self._max_images),
        )


class CertificationService(CollectionService[CertificationCreate, Certification]):
    entity_label = "certification"

    def _build(self, data: CertificationCreate) -> Certification:
        return Certification(
            title=data.text("title"),
            issuer=data.text("issuer"),
            year=data.text("year"),
            description=data.text("description"),
        )


class FeaturedSkillService(CollectionService[FeaturedSkillCreate, FeaturedSkill]):
    entity_label = "featured skill"

    def _build(self, data: FeaturedSkillCreate) -> FeaturedSkill:
        return FeaturedSkill(title=data.text("title"), details=data.text("details"))
