from .hero_service import HeroService
from .about_service import AboutService
from .collection_service import (
    BlogService,
    CertificationService,
    CollectionService,
    FeaturedSkillService,
    ProjectService,
    SkillService,
)
from .purge_service import PurgeService
from .upload_service import IncomingFile, PublishedFile, UploadService
from .content_state import ContentState
from .section_loader import SectionLoader

__all__ = [
    "HeroService",
    "AboutService",
    "BlogService",
    "CertificationService",
    "CollectionService",
    "FeaturedSkillService",
    "ProjectService",
    "SkillService",
    "PurgeService",
    "IncomingFile",
    "PublishedFile",
    "UploadService",
    "ContentState",
    "SectionLoader",
]
