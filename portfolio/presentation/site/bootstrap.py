"""Site assembly — wires the content gateway, page and editor from Settings."""

import logging
from dataclasses import dataclass

import httpx

from portfolio.application.services.content_state import ContentState
from portfolio.application.services.section_loader import SectionLoader
from portfolio.config import Settings, get_settings
from portfolio.infrastructure.content_api import HttpContentGateway
from portfolio.presentation.site.editor_controller import EditorController
from portfolio.presentation.site.page import SitePage
from portfolio.presentation.site.surface import SiteSurface

logger = logging.getLogger(__name__)


@dataclass
class Site:
    """One page's worth of site objects sharing a single ContentState."""

    gateway: HttpContentGateway
    state: ContentState
    page: SitePage
    editor: EditorController

    async def boot(self) -> SitePage:
        """Load every section in parallel into this site's page."""
        await SectionLoader(self.gateway, self.state, on_loaded=self.page.render).load_all()
        return self.page


def build_site(
    surface: SiteSurface,
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Site:
    settings = settings or get_settings()
    gateway = HttpContentGateway(
        settings.api_base_url,
        timeout=settings.request_timeout_seconds,
        http_client=http_client,
    )
    state = ContentState()
    page = SitePage(state, surface)
    editor = EditorController(
        gateway,
        state,
        page,
        surface,
        max_images=settings.max_section_images,
        reload_delay=settings.purge_reload_delay_seconds,
    )
    logger.info(
        "Site wired to %s (timeout %.1fs)",
        gateway.base_url,
        gateway.timeout,
    )
    return Site(gateway=gateway, state=state, page=page, editor=editor)
