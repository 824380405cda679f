"""Renderer — pure functions from ContentState to SectionView descriptions.

Nothing here touches the surface or reads form inputs. The caller passes in
which inputs currently have focus (as ``"form.field"`` names) so that an
in-flight fetch never overwrites what the user is typing.
"""

from collections.abc import Callable
from typing import Any

from portfolio.application.services.content_state import ContentState
from portfolio.domain.contact_links import resolve_contact
from portfolio.domain.delimited_text import format_metrics, join_lines
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
from portfolio.presentation.site.views import Card, RenderMode, SectionView

FORM_METRIC_SEPARATOR = " | "


def _form_values(form: str, values: dict[str, str], focused: frozenset[str]) -> dict[str, str]:
    return {name: value for name, value in values.items() if f"{form}.{name}" not in focused}


# ── Singletons ──────────────────────────────────────────────────────


def render_hero(hero: HeroContent, focused: frozenset[str] = frozenset()) -> SectionView:
    """Hero view; ``hero`` should already be resolved against the defaults."""
    content: dict[str, Any] = {
        "tagline": hero.tagline,
        "headline": hero.headline,
        "subheading": hero.subheading,
        "badges": list(hero.badges),
        "metrics": [{"value": m.value, "label": m.label} for m in hero.metrics],
        "primaryAction": {"label": hero.primary_label, "href": hero.primary_url},
        "secondaryAction": {"label": hero.secondary_label, "href": hero.secondary_url},
    }
    form = {
        "tagline": hero.tagline,
        "headline": hero.headline,
        "subheading": hero.subheading,
        "badges": join_lines(hero.badges),
        "metrics": format_metrics(hero.metrics, FORM_METRIC_SEPARATOR),
        "primaryLabel": hero.primary_label,
        "primaryUrl": hero.primary_url,
        "secondaryLabel": hero.secondary_label,
        "secondaryUrl": hero.secondary_url,
    }
    return SectionView(
        section=ContentSection.HERO,
        mode=RenderMode.UPDATE,
        content=content,
        form_values=_form_values("hero", form, focused),
    )


def render_about(about: AboutContent, focused: frozenset[str] = frozenset()) -> SectionView:
    content: dict[str, Any] = {
        "heading": about.heading,
        "summary": about.summary,
        "bullets": list(about.bullets),
        "photo": about.photo or None,
    }
    form = {
        "heading": about.heading,
        "summary": about.summary,
        "bullets": join_lines(about.bullets),
        "photo": about.photo,
    }
    return SectionView(
        section=ContentSection.ABOUT,
        mode=RenderMode.UPDATE,
        content=content,
        form_values=_form_values("about", form, focused),
    )


# ── Cards ───────────────────────────────────────────────────────────


def _element_id(kind: str, entity_id: int | None, position: int) -> str:
    return f"{kind}-{entity_id}" if entity_id is not None else f"{kind}-new-{position}"


def project_card(project: Project, position: int = 0) -> Card:
    link = None
    if project.link_url:
        link = {"label": project.link_label or "View project", "href": project.link_url}
    return Card(
        element_id=_element_id("project", project.id, position),
        kind="project",
        content={
            "tag": project.tag,
            "title": project.title,
            "description": project.description,
            "bullets": list(project.bullets),
            "cover": project.cover_image or None,
            "gallery": list(project.images),
            "link": link,
        },
    )


def skill_card(skill: Skill, position: int = 0) -> Card:
    return Card(
        element_id=_element_id("skill", skill.id, position),
        kind="skill",
        content={"title": skill.title, "details": skill.details},
    )


def blog_card(blog: Blog, position: int = 0) -> Card:
    return Card(
        element_id=_element_id("blog", blog.id, position),
        kind="blog",
        content={
            "title": blog.title,
            "summary": blog.summary,
            "link": {"label": "Read article", "href": blog.link},
            "cover": blog.images[0] if blog.images else None,
            "gallery": list(blog.images),
        },
    )


def certification_card(certification: Certification, position: int = 0) -> Card:
    meta = " · ".join(part for part in (certification.issuer, certification.year) if part)
    return Card(
        element_id=_element_id("certification", certification.id, position),
        kind="certification",
        content={
            "title": certification.title,
            "meta": meta,
            "description": certification.description,
        },
    )


def contact_card(contact: FeaturedSkill, position: int = 0) -> Card:
    """Contact link with an inferred icon; text without a target renders as a plain label."""
    link = resolve_contact(contact.title, contact.details)
    content: dict[str, Any] = {
        "title": contact.title,
        "icon": link.icon.value,
        "label": link.label,
        "href": link.href,
    }
    if link.opens_new_context:
        content["target"] = "_blank"
        content["rel"] = "noopener"
    return Card(
        element_id=_element_id("contact", contact.id, position),
        kind="contact",
        content=content,
    )


_CARD_BUILDERS: dict[ContentSection, Callable[[Any, int], Card]] = {
    ContentSection.PROJECTS: project_card,
    ContentSection.SKILLS: skill_card,
    ContentSection.BLOGS: blog_card,
    ContentSection.CERTIFICATIONS: certification_card,
    ContentSection.CONTACTS: contact_card,
}


def render_list(section: ContentSection, items: list[Any]) -> SectionView:
    """Full replacement of a list container, items in insertion order."""
    build = _CARD_BUILDERS[section]
    return SectionView(
        section=section,
        mode=RenderMode.REPLACE,
        cards=[build(item, position) for position, item in enumerate(items)],
    )


def render_item(section: ContentSection, item: Any, position: int = 0) -> SectionView:
    """A single newly created card, appended after the existing ones."""
    return SectionView(
        section=section,
        mode=RenderMode.APPEND,
        cards=[_CARD_BUILDERS[section](item, position)],
    )


def render_section(
    state: ContentState,
    section: ContentSection,
    focused: frozenset[str] = frozenset(),
) -> SectionView:
    """Render one section from state in its best-known form."""
    if section is ContentSection.HERO:
        return render_hero(state.resolved_hero(), focused)
    if section is ContentSection.ABOUT:
        return render_about(state.resolved_about(), focused)

    items_by_section: dict[ContentSection, list[Any]] = {
        ContentSection.PROJECTS: state.projects,
        ContentSection.SKILLS: state.skills,
        ContentSection.BLOGS: state.blogs,
        ContentSection.CERTIFICATIONS: state.certifications,
        ContentSection.CONTACTS: state.contacts,
    }
    return render_list(section, items_by_section[section])
