"""View descriptions produced by the renderer.

A SectionView says what a section's container should look like; binding it
to real markup happens only at the SiteSurface boundary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from portfolio.domain.entities import ContentSection

CARD_MOTION_DISTANCE = 35

# Container selectors the surface writes into.
SECTION_CONTAINERS: dict[ContentSection, str] = {
    ContentSection.HERO: "#hero",
    ContentSection.ABOUT: "#about",
    ContentSection.PROJECTS: "#projects .card-grid",
    ContentSection.SKILLS: "#skills .skills-grid",
    ContentSection.BLOGS: "#blog .blog-grid",
    ContentSection.CERTIFICATIONS: "#certifications .cert-list",
    ContentSection.CONTACTS: "#contact .contact-links",
}


class RenderMode(str, Enum):
    REPLACE = "replace"  # swap every child of the container
    APPEND = "append"    # add cards after the existing ones
    UPDATE = "update"    # patch existing nodes of a singleton section in place


@dataclass(frozen=True)
class Card:
    """One rendered list item."""

    element_id: str
    kind: str
    content: dict[str, Any]
    motion_distance: int = CARD_MOTION_DISTANCE


@dataclass
class SectionView:
    section: ContentSection
    mode: RenderMode
    cards: list[Card] = field(default_factory=list)
    content: dict[str, Any] = field(default_factory=dict)
    # Edit-form prefill, canonical text; focused inputs are left out.
    form_values: dict[str, str] = field(default_factory=dict)

    @property
    def container(self) -> str:
        return SECTION_CONTAINERS[self.section]
