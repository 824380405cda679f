"""Domain entity — a contact link (stored as a "featured skill")."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class FeaturedSkill:
    """A contact link.

    ``details`` is free text: a URL, an email address, a phone number or a
    plain label. The icon and href are inferred at render time.
    """

    title: str
    details: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
