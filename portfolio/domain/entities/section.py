"""Editable page sections."""

from enum import Enum


class ContentSection(str, Enum):
    """The seven editable sections, in page order.

    The values double as the section names accepted by the purge endpoint.
    """

    HERO = "hero"
    ABOUT = "about"
    PROJECTS = "projects"
    SKILLS = "skills"
    BLOGS = "blogs"
    CERTIFICATIONS = "certifications"
    CONTACTS = "contacts"

    @property
    def is_singleton(self) -> bool:
        return self in (ContentSection.HERO, ContentSection.ABOUT)

    @classmethod
    def parse(cls, name: object) -> "ContentSection | None":
        """Return the section for ``name`` or None when it is unknown."""
        if not isinstance(name, str):
            return None
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None
