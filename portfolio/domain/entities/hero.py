"""Domain entity — the hero banner singleton."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Metric:
    """A single hero statistic, e.g. ``40+`` / ``services on shared pipelines``."""

    value: str
    label: str = ""


@dataclass
class HeroContent:
    """Singleton entity for the hero section (fixed row id 1)."""

    tagline: str = ""
    headline: str = ""
    subheading: str = ""
    badges: list[str] = field(default_factory=list)
    metrics: list[Metric] = field(default_factory=list)
    primary_label: str = ""
    primary_url: str = ""
    secondary_label: str = ""
    secondary_url: str = ""
    updated_at: datetime | None = None
