"""Domain entity — a certification entry."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Certification:
    title: str
    year: str
    issuer: str = ""
    description: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
