from .views import Card, RenderMode, SectionView
from .renderer import render_item, render_section
from .surface import FormPhase, FormStatus, SiteSurface
from .page import SitePage, boot_page
from .editor_controller import EditorController
from .bootstrap import Site, build_site

__all__ = [
    "Card",
    "RenderMode",
    "SectionView",
    "render_item",
    "render_section",
    "FormPhase",
    "FormStatus",
    "SiteSurface",
    "SitePage",
    "boot_page",
    "EditorController",
    "Site",
    "build_site",
]
