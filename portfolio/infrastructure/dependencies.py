"""FastAPI dependency injection — wires infrastructure to application layer."""

import secrets
from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.application.services import (
    AboutService,
    BlogService,
    CertificationService,
    FeaturedSkillService,
    HeroService,
    ProjectService,
    PurgeService,
    SkillService,
    UploadService,
)
from portfolio.config import get_settings
from portfolio.domain.entities import ContentSection
from portfolio.domain.exceptions import ForbiddenError
from portfolio.infrastructure.database.repositories import (
    SQLAlchemyAboutRepository,
    SQLAlchemyBlogRepository,
    SQLAlchemyCertificationRepository,
    SQLAlchemyFeaturedSkillRepository,
    SQLAlchemyHeroRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemySkillRepository,
)
from portfolio.infrastructure.database.session import get_db_session
from portfolio.infrastructure.storage.local_file_storage import LocalFileStorage


async def require_admin_token(x_admin_token: str | None = Header(default=None)) -> None:
    """Guard for write endpoints — only active when ADMIN_TOKEN is configured."""
    expected = get_settings().admin_token
    if not expected:
        return
    if not x_admin_token or not secrets.compare_digest(x_admin_token, expected):
        raise ForbiddenError()


async def get_hero_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[HeroService, None]:
    """Provides a HeroService instance with its repository wired up."""
    yield HeroService(SQLAlchemyHeroRepository(session))


async def get_about_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AboutService, None]:
    yield AboutService(SQLAlchemyAboutRepository(session))


async def get_project_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProjectService, None]:
    settings = get_settings()
    yield ProjectService(SQLAlchemyProjectRepository(session), max_images=settings.max_section_images)


async def get_skill_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SkillService, None]:
    yield SkillService(SQLAlchemySkillRepository(session))


async def get_blog_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BlogService, None]:
    settings = get_settings()
    yield BlogService(SQLAlchemyBlogRepository(session), max_images=settings.max_section_images)


async def get_certification_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CertificationService, None]:
    yield CertificationService(SQLAlchemyCertificationRepository(session))


async def get_featured_skill_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[FeaturedSkillService, None]:
    yield FeaturedSkillService(SQLAlchemyFeaturedSkillRepository(session))


async def get_purge_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PurgeService, None]:
    """Provides a PurgeService bound to every content repository on one session."""
    yield PurgeService(
        singletons={
            ContentSection.HERO: SQLAlchemyHeroRepository(session),
            ContentSection.ABOUT: SQLAlchemyAboutRepository(session),
        },
        collections={
            ContentSection.PROJECTS: SQLAlchemyProjectRepository(session),
            ContentSection.SKILLS: SQLAlchemySkillRepository(session),
            ContentSection.BLOGS: SQLAlchemyBlogRepository(session),
            ContentSection.CERTIFICATIONS: SQLAlchemyCertificationRepository(session),
            ContentSection.CONTACTS: SQLAlchemyFeaturedSkillRepository(session),
        },
    )


def get_upload_service() -> UploadService:
    """Provides an UploadService writing into the configured upload directory."""
    settings = get_settings()
    return UploadService(
        LocalFileStorage(upload_dir=settings.upload_dir),
        max_files=settings.max_upload_files,
        max_file_size=settings.max_upload_size_bytes,
        public_path=settings.uploads_url_path,
    )
