"""Application service (use case) for the about singleton."""

import logging

from portfolio.application.interfaces import AboutRepository
from portfolio.application.schemas.content import AboutUpdate, normalize_lines
from portfolio.domain.entities import AboutContent
from portfolio.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class AboutService:
    def __init__(self, repository: AboutRepository):
        self._repository = repository

    async def get_about(self) -> AboutContent:
        return await self._repository.get()

    async def update_about(self, data: AboutUpdate) -> AboutContent:
        data.ensure_required()
        about = AboutContent(
            heading=data.text("heading"),
            summary=data.text("summary"),
            bullets=normalize_lines(data.bullets),
            photo=data.text("photo"),
        )
        try:
            return await self._repository.replace(about)
        except Exception as exc:
            logger.exception("Failed to update about")
            raise PersistenceError("Unable to update about section") from exc
