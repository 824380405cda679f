from .content_repository import (
    AboutRepository,
    BlogRepository,
    CertificationRepository,
    CollectionRepository,
    FeaturedSkillRepository,
    HeroRepository,
    ProjectRepository,
    SingletonRepository,
    SkillRepository,
)
from .content_gateway import ContentGateway, ImageUpload, Payload, UploadedImage
from .file_storage import FileStorage, StoredFile

__all__ = [
    "AboutRepository",
    "BlogRepository",
    "CertificationRepository",
    "CollectionRepository",
    "FeaturedSkillRepository",
    "HeroRepository",
    "ProjectRepository",
    "SingletonRepository",
    "SkillRepository",
    "ContentGateway",
    "ImageUpload",
    "Payload",
    "UploadedImage",
    "FileStorage",
    "StoredFile",
]
