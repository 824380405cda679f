"""Client content state — the site's last-known value of every section.

One explicit container, injected into the page binder and the editor
controller, replaces module-level "current hero/about/contacts" globals.

Singletons keep the merged server responses next to the page's
static defaults; callers resolve what to display field by field with
``resolved_hero()`` / ``resolved_about()``. List sections are kept in
insertion order (oldest first), the reverse of what the service returns.
"""

from dataclasses import fields, replace
from typing import TypeVar

from portfolio.domain.defaults import default_about, default_hero
from portfolio.domain.entities import (
    AboutContent,
    Blog,
    Certification,
    ContentSection,
    FeaturedSkill,
    HeroContent,
    Project,
    Skill,
)

SingletonT = TypeVar("SingletonT", HeroContent, AboutContent)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def with_fallback(value: SingletonT | None, default: SingletonT) -> SingletonT:
    """Fill every blank field of ``value`` from ``default``."""
    if value is None:
        return default
    overrides = {
        f.name: getattr(default, f.name)
        for f in fields(value)
        if f.name != "updated_at" and _is_blank(getattr(value, f.name))
    }
    return replace(value, **overrides)


class ContentState:
    """In-memory model of every editable section on the page."""

    def __init__(
        self,
        hero_defaults: HeroContent | None = None,
        about_defaults: AboutContent | None = None,
    ):
        self._hero_defaults = hero_defaults or default_hero()
        self._about_defaults = about_defaults or default_about()
        self._hero: HeroContent | None = None
        self._about: AboutContent | None = None
        self._projects: list[Project] = []
        self._skills: list[Skill] = []
        self._blogs: list[Blog] = []
        self._certifications: list[Certification] = []
        self._contacts: list[FeaturedSkill] = []
        self._loaded: set[ContentSection] = set()

    # ── Singletons ──────────────────────────────────────────────────

    @property
    def hero(self) -> HeroContent | None:
        """Last hero returned by the service, or None before the first fetch."""
        return self._hero

    @property
    def hero_defaults(self) -> HeroContent:
        return self._hero_defaults

    def merge_hero(self, hero: HeroContent) -> None:
        """Take the server's hero; blank fields keep the last known value."""
        self._hero = hero if self._hero is None else with_fallback(hero, self._hero)
        self._loaded.add(ContentSection.HERO)

    def resolved_hero(self) -> HeroContent:
        return with_fallback(self._hero, self._hero_defaults)

    @property
    def about(self) -> AboutContent | None:
        return self._about

    @property
    def about_defaults(self) -> AboutContent:
        return self._about_defaults

    def merge_about(self, about: AboutContent) -> None:
        self._about = about if self._about is None else with_fallback(about, self._about)
        self._loaded.add(ContentSection.ABOUT)

    def resolved_about(self) -> AboutContent:
        return with_fallback(self._about, self._about_defaults)

    # ── Collections (insertion order) ───────────────────────────────

    @property
    def projects(self) -> list[Project]:
        return list(self._projects)

    def replace_projects(self, newest_first: list[Project]) -> None:
        self._projects = list(reversed(newest_first))
        self._loaded.add(ContentSection.PROJECTS)

    def add_project(self, project: Project) -> None:
        self._projects.append(project)

    @property
    def skills(self) -> list[Skill]:
        return list(self._skills)

    def replace_skills(self, newest_first: list[Skill]) -> None:
        self._skills = list(reversed(newest_first))
        self._loaded.add(ContentSection.SKILLS)

    def add_skill(self, skill: Skill) -> None:
        self._skills.append(skill)

    @property
    def blogs(self) -> list[Blog]:
        return list(self._blogs)

    def replace_blogs(self, newest_first: list[Blog]) -> None:
        self._blogs = list(reversed(newest_first))
        self._loaded.add(ContentSection.BLOGS)

    def add_blog(self, blog: Blog) -> None:
        self._blogs.append(blog)

    @property
    def certifications(self) -> list[Certification]:
        return list(self._certifications)

    def replace_certifications(self, newest_first: list[Certification]) -> None:
        self._certifications = list(reversed(newest_first))
        self._loaded.add(ContentSection.CERTIFICATIONS)

    def add_certification(self, certification: Certification) -> None:
        self._certifications.append(certification)

    @property
    def contacts(self) -> list[FeaturedSkill]:
        return list(self._contacts)

    def replace_contacts(self, newest_first: list[FeaturedSkill]) -> None:
        self._contacts = list(reversed(newest_first))
        self._loaded.add(ContentSection.CONTACTS)

    def add_contact(self, contact: FeaturedSkill) -> None:
        self._contacts.append(contact)

    # ── Bookkeeping ─────────────────────────────────────────────────

    def is_loaded(self, section: ContentSection) -> bool:
        """True once the service has answered for ``section`` at least once."""
        return section in self._loaded
