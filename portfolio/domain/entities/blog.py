"""Domain entity — a blog post teaser."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Blog:
    """A blog teaser linking out to the full article."""

    title: str
    summary: str
    link: str
    images: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
