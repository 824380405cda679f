"""Abstract repository interfaces (ports) for portfolio content."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from portfolio.domain.entities import (
    AboutContent,
    Blog,
    Certification,
    FeaturedSkill,
    HeroContent,
    Project,
    Skill,
)

EntityT = TypeVar("EntityT")


class CollectionRepository(ABC, Generic[EntityT]):
    """Port for a many-row content table with auto-incrementing ids."""

    @abstractmethod
    async def get_all(self) -> list[EntityT]:
        """Retrieve every row, newest first."""
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> EntityT | None:
        """Retrieve a single row by its ID."""
        ...

    @abstractmethod
    async def create(self, entity: EntityT) -> EntityT:
        """Insert a row and return it with the generated id and timestamp."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Truncate the table. Returns the number of rows removed."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...


class SingletonRepository(ABC, Generic[EntityT]):
    """Port for a single fixed-id row that is never deleted, only cleared."""

    @abstractmethod
    async def get(self) -> EntityT:
        """Return the row; an empty entity if it has not been seeded."""
        ...

    @abstractmethod
    async def replace(self, entity: EntityT) -> EntityT:
        """Overwrite every field of the row and return the stored result."""
        ...

    @abstractmethod
    async def clear(self) -> EntityT:
        """Reset every field to an empty string."""
        ...


ProjectRepository = CollectionRepository[Project]
SkillRepository = CollectionRepository[Skill]
BlogRepository = CollectionRepository[Blog]
CertificationRepository = CollectionRepository[Certification]
FeaturedSkillRepository = CollectionRepository[FeaturedSkill]
HeroRepository = SingletonRepository[HeroContent]
AboutRepository = SingletonRepository[AboutContent]
