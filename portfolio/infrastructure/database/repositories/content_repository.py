"""Concrete content repositories backed by SQLAlchemy.

Rows hold canonical delimited text and JSON image arrays; ``_to_entity``
expands them into structured values and ``_to_model`` collapses them back.
"""

from abc import abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.application.interfaces import CollectionRepository, SingletonRepository
from portfolio.domain.delimited_text import (
    decode_images,
    encode_images,
    format_metrics,
    join_lines,
    parse_metrics,
    split_lines,
)
from portfolio.domain.entities import (
    AboutContent,
    Blog,
    Certification,
    FeaturedSkill,
    HeroContent,
    Project,
    Skill,
)
from portfolio.infrastructure.database.base import Base
from portfolio.infrastructure.database.models import (
    SINGLETON_ID,
    AboutModel,
    BlogModel,
    CertificationModel,
    FeaturedSkillModel,
    HeroContentModel,
    ProjectModel,
    SkillModel,
)

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=Base)


def _text(value: str | None) -> str:
    return value or ""


class SQLAlchemyCollectionRepository(CollectionRepository[EntityT], Generic[EntityT, ModelT]):
    """Shared insert/list/truncate logic for the many-row content tables."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    @abstractmethod
    def _to_entity(self, model: ModelT) -> EntityT:
        """Map ORM model → domain entity."""

    @abstractmethod
    def _to_model(self, entity: EntityT) -> ModelT:
        """Map domain entity → ORM model (for creation)."""

    async def get_all(self) -> list[EntityT]:
        stmt = select(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, entity_id: int) -> EntityT | None:
        result = await self._session.get(self.model, entity_id)
        return self._to_entity(result) if result else None

    async def create(self, entity: EntityT) -> EntityT:
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(self.model))
        await self._session.flush()
        return result.rowcount or 0

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())


class SQLAlchemyProjectRepository(SQLAlchemyCollectionRepository[Project, ProjectModel]):
    model = ProjectModel

    def _to_entity(self, model: ProjectModel) -> Project:
        image = _text(model.image)
        return Project(
            id=model.id,
            tag=model.tag,
            title=model.title,
            description=model.description,
            bullets=split_lines(model.bullets),
            link_label=_text(model.link_label),
            link_url=_text(model.link_url),
            image=image,
            images=decode_images(model.images, legacy_image=image),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        return ProjectModel(
            tag=entity.tag,
            title=entity.title,
            description=entity.description,
            bullets=join_lines(entity.bullets),
            link_label=entity.link_label,
            link_url=entity.link_url,
            image=entity.image,
            images=encode_images(entity.images),
        )


class SQLAlchemySkillRepository(SQLAlchemyCollectionRepository[Skill, SkillModel]):
    model = SkillModel

    def _to_entity(self, model: SkillModel) -> Skill:
        return Skill(
            id=model.id,
            title=model.title,
            details=model.details,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Skill) -> SkillModel:
        return SkillModel(title=entity.title, details=entity.details)


class SQLAlchemyBlogRepository(SQLAlchemyCollectionRepository[Blog, BlogModel]):
    model = BlogModel

    def _to_entity(self, model: BlogModel) -> Blog:
        return Blog(
            id=model.id,
            title=model.title,
            summary=model.summary,
            link=model.link,
            images=decode_images(model.images),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Blog) -> BlogModel:
        return BlogModel(
            title=entity.title,
            summary=entity.summary,
            link=entity.link,
            images=encode_images(entity.images),
        )


class SQLAlchemyCertificationRepository(SQLAlchemyCollectionRepository[Certification, CertificationModel]):
    model = CertificationModel

    def _to_entity(self, model: CertificationModel) -> Certification:
        return Certification(
            id=model.id,
            title=model.title,
            issuer=_text(model.issuer),
            year=_text(model.year),
            description=_text(model.description),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Certification) -> CertificationModel:
        return CertificationModel(
            title=entity.title,
            issuer=entity.issuer,
            year=entity.year,
            description=entity.description,
        )


class SQLAlchemyFeaturedSkillRepository(SQLAlchemyCollectionRepository[FeaturedSkill, FeaturedSkillModel]):
    model = FeaturedSkillModel

    def _to_entity(self, model: FeaturedSkillModel) -> FeaturedSkill:
        return FeaturedSkill(
            id=model.id,
            title=model.title,
            details=_text(model.details),
            created_at=model.created_at,
        )

    def _to_model(self, entity: FeaturedSkill) -> FeaturedSkillModel:
        return FeaturedSkillModel(title=entity.title, details=entity.details)


# ── Singletons ──────────────────────────────────────────────────────


class SQLAlchemyHeroRepository(SingletonRepository[HeroContent]):
    """Implements the hero singleton port on the fixed-id ``hero_content`` row."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: HeroContentModel) -> HeroContent:
        return HeroContent(
            tagline=_text(model.tagline),
            headline=_text(model.headline),
            subheading=_text(model.subheading),
            badges=split_lines(model.badges),
            metrics=parse_metrics(model.metrics),
            primary_label=_text(model.primary_label),
            primary_url=_text(model.primary_url),
            secondary_label=_text(model.secondary_label),
            secondary_url=_text(model.secondary_url),
            updated_at=model.updated_at,
        )

    async def _load_row(self) -> HeroContentModel:
        model = await self._session.get(HeroContentModel, SINGLETON_ID)
        if model is None:
            model = HeroContentModel(id=SINGLETON_ID)
            self._session.add(model)
        return model

    async def get(self) -> HeroContent:
        model = await self._session.get(HeroContentModel, SINGLETON_ID)
        if model is None:
            return HeroContent()
        return self._to_entity(model)

    async def replace(self, entity: HeroContent) -> HeroContent:
        model = await self._load_row()
        model.tagline = entity.tagline
        model.headline = entity.headline
        model.subheading = entity.subheading
        model.badges = join_lines(entity.badges)
        model.metrics = format_metrics(entity.metrics)
        model.primary_label = entity.primary_label
        model.primary_url = entity.primary_url
        model.secondary_label = entity.secondary_label
        model.secondary_url = entity.secondary_url
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def clear(self) -> HeroContent:
        return await self.replace(HeroContent())


class SQLAlchemyAboutRepository(SingletonRepository[AboutContent]):
    """Implements the about singleton port on the fixed-id ``about`` row."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AboutModel) -> AboutContent:
        return AboutContent(
            heading=_text(model.heading),
            summary=_text(model.summary),
            bullets=split_lines(model.bullets),
            photo=_text(model.photo),
            updated_at=model.updated_at,
        )

    async def get(self) -> AboutContent:
        model = await self._session.get(AboutModel, SINGLETON_ID)
        if model is None:
            return AboutContent()
        return self._to_entity(model)

    async def replace(self, entity: AboutContent) -> AboutContent:
        model = await self._session.get(AboutModel, SINGLETON_ID)
        if model is None:
            model = AboutModel(id=SINGLETON_ID)
            self._session.add(model)
        model.heading = entity.heading
        model.summary = entity.summary
        model.bullets = join_lines(entity.bullets)
        model.photo = entity.photo
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def clear(self) -> AboutContent:
        return await self.replace(AboutContent())
