"""SiteSurface — the outermost boundary between the site core and real UI.

The core hands fully-formed SectionViews and form statuses to a surface;
the surface owns markup, focus tracking, dialogs and page reloads.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from portfolio.presentation.site.views import SectionView


class FormPhase(str, Enum):
    """Per-form submission states: Idle → Submitting → Success/Failed → Idle."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FormStatus:
    phase: FormPhase
    message: str

    @property
    def is_error(self) -> bool:
        return self.phase is FormPhase.FAILED


class SiteSurface(ABC):
    """Port implemented by whatever actually draws the page."""

    @abstractmethod
    def apply(self, view: SectionView) -> None:
        """Write a section view into its container."""
        ...

    @abstractmethod
    def focused_fields(self) -> frozenset[str]:
        """Inputs that currently have focus, as ``"form.field"`` names."""
        ...

    @abstractmethod
    def set_status(self, form: str, status: FormStatus) -> None: ...

    @abstractmethod
    def set_submit_enabled(self, form: str, enabled: bool) -> None: ...

    @abstractmethod
    def reset_form(self, form: str) -> None:
        """Clear a create-form's inputs after a successful save."""
        ...

    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Ask the user to confirm an irreversible action."""
        ...

    @abstractmethod
    def reload(self) -> None:
        """Reload the whole page so every section re-fetches."""
        ...

    def register_scroll_animation(self, element_id: str, distance: int) -> None:
        """Decorative reveal-on-scroll hook; a no-op unless a surface wires one."""
        return None
