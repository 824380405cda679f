from .content_models import (
    SINGLETON_ID,
    AboutModel,
    BlogModel,
    CertificationModel,
    FeaturedSkillModel,
    HeroContentModel,
    ProjectModel,
    SkillModel,
)

__all__ = [
    "SINGLETON_ID",
    "AboutModel",
    "BlogModel",
    "CertificationModel",
    "FeaturedSkillModel",
    "HeroContentModel",
    "ProjectModel",
    "SkillModel",
]
