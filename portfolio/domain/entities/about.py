"""Domain entity — the about section singleton."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class AboutContent:
    """Singleton entity for the about section (fixed row id 1)."""

    heading: str = ""
    summary: str = ""
    bullets: list[str] = field(default_factory=list)
    photo: str = ""
    updated_at: datetime | None = None
