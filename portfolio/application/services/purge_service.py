"""Application service for the irreversible bulk purge of content sections."""

import logging
from collections.abc import Iterable

from portfolio.application.interfaces import CollectionRepository, SingletonRepository
from portfolio.domain.entities import ContentSection

logger = logging.getLogger(__name__)


class PurgeService:
    """Clears singleton sections and truncates list sections.

    Singletons (hero, about) keep their row and are reset to empty strings;
    list sections lose every row.
    """

    def __init__(
        self,
        singletons: dict[ContentSection, SingletonRepository],
        collections: dict[ContentSection, CollectionRepository],
    ):
        self._singletons = singletons
        self._collections = collections

    @staticmethod
    def resolve_sections(requested: Iterable[object] | None) -> list[ContentSection]:
        """Map requested names to sections.

        Unknown names are ignored and duplicates collapse onto their first
        occurrence. An absent or empty request selects every section.
        """
        names = list(requested or [])
        if not names:
            return list(ContentSection)

        sections: list[ContentSection] = []
        for name in names:
            section = ContentSection.parse(name)
            if section is None:
                logger.debug("Ignoring unknown purge section %r", name)
                continue
            if section not in sections:
                sections.append(section)
        return sections

    async def purge(self, requested: Iterable[object] | None) -> list[ContentSection]:
        """Clear the requested sections and return exactly those that were cleared."""
        cleared: list[ContentSection] = []
        for section in self.resolve_sections(requested):
            if section in self._singletons:
                await self._singletons[section].clear()
            elif section in self._collections:
                removed = await self._collections[section].delete_all()
                logger.debug("Removed %d row(s) from %s", removed, section.value)
            else:
                continue
            cleared.append(section)

        logger.warning("Purged content sections: %s", ", ".join(s.value for s in cleared) or "none")
        return cleared
