"""Domain entity — a skill card."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Skill:
    title: str
    details: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
