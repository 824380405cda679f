"""Domain entity — a portfolio project card."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Project:
    """A project card.

    ``image`` is the legacy single-image column; ``images`` is the ordered
    gallery and always contains ``image`` when the gallery was never set.
    """

    tag: str
    title: str
    description: str
    bullets: list[str] = field(default_factory=list)
    link_label: str = ""
    link_url: str = ""
    image: str = ""
    images: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def cover_image(self) -> str:
        """First gallery image, falling back to the legacy ``image``."""
        return self.images[0] if self.images else self.image
