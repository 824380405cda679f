from .content import (
    AboutResponse,
    AboutUpdate,
    BlogCreate,
    BlogResponse,
    CertificationCreate,
    CertificationResponse,
    ErrorResponse,
    FeaturedSkillCreate,
    FeaturedSkillResponse,
    HeroResponse,
    HeroUpdate,
    MetricSchema,
    ProjectCreate,
    ProjectResponse,
    PurgeRequest,
    PurgeResponse,
    SkillCreate,
    SkillResponse,
    UploadedFileSchema,
    UploadResponse,
)

__all__ = [
    "AboutResponse",
    "AboutUpdate",
    "BlogCreate",
    "BlogResponse",
    "CertificationCreate",
    "CertificationResponse",
    "ErrorResponse",
    "FeaturedSkillCreate",
    "FeaturedSkillResponse",
    "HeroResponse",
    "HeroUpdate",
    "MetricSchema",
    "ProjectCreate",
    "ProjectResponse",
    "PurgeRequest",
    "PurgeResponse",
    "SkillCreate",
    "SkillResponse",
    "UploadedFileSchema",
    "UploadResponse",
]
