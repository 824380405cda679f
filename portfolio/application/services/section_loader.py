"""Initial page load — fetch all seven sections concurrently.

Each fetch is fault-isolated: a failing section is logged as a warning and
left on its static defaults while the other sections still load.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from portfolio.application.interfaces import ContentGateway
from portfolio.application.services.content_state import ContentState
from portfolio.domain.entities import ContentSection

logger = logging.getLogger(__name__)

SectionCallback = Callable[[ContentSection], None]


class SectionLoader:
    """Fills a ContentState from the content gateway."""

    def __init__(
        self,
        gateway: ContentGateway,
        state: ContentState,
        on_loaded: SectionCallback | None = None,
    ):
        self._gateway = gateway
        self._state = state
        self._on_loaded = on_loaded

    def _fetchers(self) -> dict[ContentSection, Callable[[], Awaitable[None]]]:
        return {
            ContentSection.HERO: self._load_hero,
            ContentSection.ABOUT: self._load_about,
            ContentSection.PROJECTS: self._load_projects,
            ContentSection.SKILLS: self._load_skills,
            ContentSection.BLOGS: self._load_blogs,
            ContentSection.CERTIFICATIONS: self._load_certifications,
            ContentSection.CONTACTS: self._load_contacts,
        }

    async def _load_hero(self) -> None:
        self._state.merge_hero(await self._gateway.fetch_hero())

    async def _load_about(self) -> None:
        self._state.merge_about(await self._gateway.fetch_about())

    async def _load_projects(self) -> None:
        self._state.replace_projects(await self._gateway.list_projects())

    async def _load_skills(self) -> None:
        self._state.replace_skills(await self._gateway.list_skills())

    async def _load_blogs(self) -> None:
        self._state.replace_blogs(await self._gateway.list_blogs())

    async def _load_certifications(self) -> None:
        self._state.replace_certifications(await self._gateway.list_certifications())

    async def _load_contacts(self) -> None:
        self._state.replace_contacts(await self._gateway.list_contacts())

    async def load_section(self, section: ContentSection) -> bool:
        """Fetch one section into state. Returns False (after logging) on failure."""
        try:
            await self._fetchers()[section]()
            if self._on_loaded is not None:
                self._on_loaded(section)
        except Exception as exc:
            # Best-effort: the section keeps its static defaults.
            logger.warning("Unable to load %s section: %s", section.value, exc)
            return False
        return True

    async def load_all(self) -> dict[ContentSection, bool]:
        """Load every section in parallel and join before returning."""
        sections = list(ContentSection)
        results = await asyncio.gather(*(self.load_section(section) for section in sections))
        outcome = dict(zip(sections, results))

        failed = [section.value for section, ok in outcome.items() if not ok]
        if failed:
            logger.warning("Page loaded with static defaults for: %s", ", ".join(failed))
        else:
            logger.info("All %d sections loaded", len(sections))
        return outcome
