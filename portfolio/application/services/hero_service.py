"""Application service (use case) for the hero singleton."""

import logging

from portfolio.application.interfaces import HeroRepository
from portfolio.application.schemas.content import HeroUpdate, normalize_lines, normalize_metrics
from portfolio.domain.entities import HeroContent
from portfolio.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class HeroService:
    """Reads and replaces the hero section. Depends on the repository port (DI)."""

    def __init__(self, repository: HeroRepository):
        self._repository = repository

    async def get_hero(self) -> HeroContent:
        return await self._repository.get()

    async def update_hero(self, data: HeroUpdate) -> HeroContent:
        """Validate, normalize and replace every hero field (last write wins)."""
        data.ensure_required()
        hero = HeroContent(
            tagline=data.text("tagline"),
            headline=data.text("headline"),
            subheading=data.text("subheading"),
            badges=normalize_lines(data.badges),
            metrics=normalize_metrics(data.metrics),
            primary_label=data.text("primary_label"),
            primary_url=data.text("primary_url"),
            secondary_label=data.text("secondary_label"),
            secondary_url=data.text("secondary_url"),
        )
        try:
            return await self._repository.replace(hero)
        except Exception as exc:
            logger.exception("Failed to update hero")
            raise PersistenceError("Unable to update hero content") from exc
