"""SitePage — binds ContentState and the renderer to a SiteSurface."""

import logging

from portfolio.application.interfaces import ContentGateway
from portfolio.application.services.content_state import ContentState
from portfolio.application.services.section_loader import SectionLoader
from portfolio.domain.entities import ContentSection
from portfolio.presentation.site.renderer import render_item, render_section
from portfolio.presentation.site.surface import SiteSurface
from portfolio.presentation.site.views import SectionView

logger = logging.getLogger(__name__)


class SitePage:
    """Re-renders sections of one page from its ContentState."""

    def __init__(self, state: ContentState, surface: SiteSurface):
        self._state = state
        self._surface = surface

    @property
    def state(self) -> ContentState:
        return self._state

    def render(self, section: ContentSection) -> SectionView:
        """Full refresh of one section, sparing whichever input has focus."""
        view = render_section(self._state, section, self._surface.focused_fields())
        self._apply(view)
        return view

    def render_appended(self, section: ContentSection, item: object, position: int = 0) -> SectionView:
        view = render_item(section, item, position)
        self._apply(view)
        return view

    def _apply(self, view: SectionView) -> None:
        self._surface.apply(view)
        for card in view.cards:
            try:
                self._surface.register_scroll_animation(card.element_id, card.motion_distance)
            except Exception as exc:
                # Decorative only; the card is already on the page.
                logger.warning("Scroll animation failed for %s: %s", card.element_id, exc)


async def boot_page(gateway: ContentGateway, state: ContentState, surface: SiteSurface) -> SitePage:
    """Load every section in parallel, rendering each one as it arrives.

    Sections whose fetch fails keep the page's static markup.
    """
    page = SitePage(state, surface)
    loader = SectionLoader(gateway, state, on_loaded=page.render)
    await loader.load_all()
    return page
