"""EditorController — turns edit-form submissions into content writes.

Each form runs the same cycle: Idle → Submitting → Success/Failed → Idle.
The submit control is disabled for the duration and always re-enabled,
whatever happens in between. State is only touched after the service has
answered with the stored entity, and the form reports success once state
matches the service even if redrawing the section fails.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from contextlib import asynccontextmanager

from portfolio.application.interfaces import ContentGateway, ImageUpload, Payload
from portfolio.application.schemas.content import normalize_images
from portfolio.application.services.content_state import ContentState
from portfolio.domain.delimited_text import parse_metrics, split_lines
from portfolio.domain.entities import ContentSection
from portfolio.domain.exceptions import ContentApiError, NetworkError
from portfolio.presentation.site.page import SitePage
from portfolio.presentation.site.surface import FormPhase, FormStatus, SiteSurface

logger = logging.getLogger(__name__)

SAVING_MESSAGE = "Saving…"
NETWORK_FAILURE_MESSAGE = "Could not reach the content service. Please try again."
GENERIC_FAILURE_MESSAGE = "Something went wrong while saving. Please try again."
PURGE_FORM = "purge"

FormFields = Mapping[str, str]


class EditorController:
    """Submit handlers for every edit form on the page."""

    def __init__(
        self,
        gateway: ContentGateway,
        state: ContentState,
        page: SitePage,
        surface: SiteSurface,
        max_images: int = 5,
        reload_delay: float = 1.2,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._gateway = gateway
        self._state = state
        self._page = page
        self._surface = surface
        self._max_images = max_images
        self._reload_delay = reload_delay
        self._sleep = sleep

    @property
    def max_images(self) -> int:
        return self._max_images

    @property
    def reload_delay(self) -> float:
        return self._reload_delay

    # ── Submission cycle ────────────────────────────────────────────

    @asynccontextmanager
    async def _submission(self, form: str) -> AsyncIterator[None]:
        self._surface.set_submit_enabled(form, False)
        self._surface.set_status(form, FormStatus(FormPhase.SUBMITTING, SAVING_MESSAGE))
        try:
            yield
        finally:
            self._surface.set_submit_enabled(form, True)

    async def _run(self, form: str, action: Callable[[], Awaitable[str]], reset: bool = False) -> bool:
        """Run one submission; returns True when the service accepted it."""
        async with self._submission(form):
            try:
                message = await action()
            except ContentApiError as exc:
                self._fail(form, exc.message or GENERIC_FAILURE_MESSAGE)
                return False
            except NetworkError as exc:
                logger.warning("Submit of %s form failed: %s", form, exc)
                self._fail(form, NETWORK_FAILURE_MESSAGE)
                return False
            except Exception:
                logger.exception("Unexpected error while submitting %s form", form)
                self._fail(form, GENERIC_FAILURE_MESSAGE)
                return False

            self._surface.set_status(form, FormStatus(FormPhase.SUCCESS, message))
            if reset:
                self._surface.reset_form(form)
            return True

    def _fail(self, form: str, message: str) -> None:
        self._surface.set_status(form, FormStatus(FormPhase.FAILED, message))

    def _show(self, section: ContentSection, item: object | None = None, position: int = 0) -> None:
        """Render saved content. A render fault is logged; the save itself stands."""
        try:
            if item is None:
                self._page.render(section)
            else:
                self._page.render_appended(section, item, position)
        except Exception:
            logger.exception("Saved %s content but could not render it", section.value)

    # ── Images ──────────────────────────────────────────────────────

    async def _collect_images(self, remote: str | None, uploads: list[ImageUpload], limit: int) -> list[str]:
        """Remote URLs first, then uploaded files into whatever slots remain."""
        urls = normalize_images(remote, limit)
        remaining = limit - len(urls)
        if remaining > 0 and uploads:
            if len(uploads) > remaining:
                logger.info("Only the first %d of %d images will be uploaded", remaining, len(uploads))
            uploaded = await self._gateway.upload_images(uploads[:remaining])
            urls.extend(image.url for image in uploaded)
        return urls[:limit]

    # ── Singletons ──────────────────────────────────────────────────

    async def submit_hero(self, fields: FormFields) -> bool:
        async def save() -> str:
            payload: Payload = {
                "tagline": _text(fields, "tagline"),
                "headline": _text(fields, "headline"),
                "subheading": _text(fields, "subheading"),
                "badges": split_lines(fields.get("badges")),
                "metrics": [{"value": m.value, "label": m.label} for m in parse_metrics(fields.get("metrics"))],
                "primaryLabel": _text(fields, "primaryLabel"),
                "primaryUrl": _text(fields, "primaryUrl"),
                "secondaryLabel": _text(fields, "secondaryLabel"),
                "secondaryUrl": _text(fields, "secondaryUrl"),
            }
            hero = await self._gateway.update_hero(payload)
            self._state.merge_hero(hero)
            self._show(ContentSection.HERO)
            return "Hero updated."

        return await self._run("hero", save)

    async def submit_about(self, fields: FormFields, photo_files: list[ImageUpload] | None = None) -> bool:
        async def save() -> str:
            photos = await self._collect_images(fields.get("photo"), list(photo_files or []), limit=1)
            payload: Payload = {
                "heading": _text(fields, "heading"),
                "summary": _text(fields, "summary"),
                "bullets": split_lines(fields.get("bullets")),
                "photo": photos[0] if photos else "",
            }
            about = await self._gateway.update_about(payload)
            self._state.merge_about(about)
            self._show(ContentSection.ABOUT)
            return "About section updated."

        return await self._run("about", save)

    # ── Collections ─────────────────────────────────────────────────

    async def submit_project(self, fields: FormFields, images: list[ImageUpload] | None = None) -> bool:
        async def save() -> str:
            urls = await self._collect_images(fields.get("images"), list(images or []), self._max_images)
            payload: Payload = {
                "tag": _text(fields, "tag"),
                "title": _text(fields, "title"),
                "description": _text(fields, "description"),
                "bullets": split_lines(fields.get("bullets")),
                "linkLabel": _text(fields, "linkLabel"),
                "linkUrl": _text(fields, "linkUrl"),
                "image": urls[0] if urls else "",
                "images": urls,
            }
            project = await self._gateway.create_project(payload)
            self._state.add_project(project)
            self._show(ContentSection.PROJECTS, project, len(self._state.projects) - 1)
            return "Project added."

        return await self._run("project", save, reset=True)

    async def submit_skill(self, fields: FormFields) -> bool:
        async def save() -> str:
            payload: Payload = {"title": _text(fields, "title"), "details": _text(fields, "details")}
            skill = await self._gateway.create_skill(payload)
            self._state.add_skill(skill)
            self._show(ContentSection.SKILLS, skill, len(self._state.skills) - 1)
            return "Skill added."

        return await self._run("skill", save, reset=True)

    async def submit_blog(self, fields: FormFields, images: list[ImageUpload] | None = None) -> bool:
        async def save() -> str:
            urls = await self._collect_images(fields.get("images"), list(images or []), self._max_images)
            payload: Payload = {
                "title": _text(fields, "title"),
                "summary": _text(fields, "summary"),
                "link": _text(fields, "link"),
                "images": urls,
            }
            blog = await self._gateway.create_blog(payload)
            self._state.add_blog(blog)
            self._show(ContentSection.BLOGS, blog, len(self._state.blogs) - 1)
            return "Blog post added."

        return await self._run("blog", save, reset=True)

    async def submit_certification(self, fields: FormFields) -> bool:
        async def save() -> str:
            payload: Payload = {
                "title": _text(fields, "title"),
                "issuer": _text(fields, "issuer"),
                "year": _text(fields, "year"),
                "description": _text(fields, "description"),
            }
            certification = await self._gateway.create_certification(payload)
            self._state.add_certification(certification)
            self._show(ContentSection.CERTIFICATIONS, certification, len(self._state.certifications) - 1)
            return "Certification added."

        return await self._run("certification", save, reset=True)

    async def submit_contact(self, fields: FormFields) -> bool:
        async def save() -> str:
            payload: Payload = {"title": _text(fields, "title"), "details": _text(fields, "details")}
            contact = await self._gateway.create_contact(payload)
            self._state.add_contact(contact)
            self._show(ContentSection.CONTACTS, contact, len(self._state.contacts) - 1)
            return "Contact link added."

        return await self._run("contact", save, reset=True)

    # ── Purge ───────────────────────────────────────────────────────

    async def purge(self, sections: list[ContentSection] | None = None) -> bool:
        """Clear sections after confirmation, then reload the page."""
        targets = list(dict.fromkeys(sections)) if sections else list(ContentSection)
        noun = "section" if len(targets) == 1 else "sections"
        prompt = f"Delete all content in {len(targets)} {noun}? This cannot be undone."

        if not await self._surface.confirm(prompt):
            self._surface.set_status(PURGE_FORM, FormStatus(FormPhase.IDLE, "Purge cancelled."))
            return False

        async def clear() -> str:
            cleared = await self._gateway.purge(targets)
            logger.warning("Purged sections: %s", ", ".join(section.value for section in cleared))
            return f"Cleared {len(cleared)} {'section' if len(cleared) == 1 else 'sections'}. Reloading…"

        if not await self._run(PURGE_FORM, clear):
            return False

        await self._sleep(self._reload_delay)
        self._surface.reload()
        return True


def _text(fields: FormFields, name: str) -> str:
    return (fields.get(name) or "").strip()
