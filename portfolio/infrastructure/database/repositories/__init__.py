from .content_repository import (
    SQLAlchemyAboutRepository,
    SQLAlchemyBlogRepository,
    SQLAlchemyCertificationRepository,
    SQLAlchemyCollectionRepository,
    SQLAlchemyFeaturedSkillRepository,
    SQLAlchemyHeroRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemySkillRepository,
)

__all__ = [
    "SQLAlchemyAboutRepository",
    "SQLAlchemyBlogRepository",
    "SQLAlchemyCertificationRepository",
    "SQLAlchemyCollectionRepository",
    "SQLAlchemyFeaturedSkillRepository",
    "SQLAlchemyHeroRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemySkillRepository",
]
