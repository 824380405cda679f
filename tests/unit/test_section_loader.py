"""Unit tests for the parallel, fault-isolated initial page load."""

import pytest

from portfolio.application.services import ContentState, SectionLoader
from portfolio.domain.entities import ContentSection, Project, Skill
from portfolio.domain.exceptions import NetworkError
from portfolio.presentation.site import boot_page


class TestSectionLoader:
    @pytest.mark.asyncio
    async def test_all_sections_load(self, gateway):
        state = ContentState()

        outcome = await SectionLoader(gateway, state).load_all()

        assert outcome == {section: True for section in ContentSection}
        assert state.hero.tagline == "Remote tagline"

    @pytest.mark.asyncio
    async def test_failing_section_does_not_block_the_others(self, gateway):
        gateway.errors["list_skills"] = NetworkError("http://content.test/api/skills", "request timed out")
        gateway.projects = [Project(id=1, tag="t", title="p", description="d")]
        state = ContentState()

        outcome = await SectionLoader(gateway, state).load_all()

        assert outcome[ContentSection.SKILLS] is False
        assert outcome[ContentSection.PROJECTS] is True
        assert not state.is_loaded(ContentSection.SKILLS)
        assert [p.title for p in state.projects] == ["p"]

    @pytest.mark.asyncio
    async def test_callback_failure_is_isolated_to_its_section(self, gateway):
        rendered = []

        def on_loaded(section):
            if section is ContentSection.ABOUT:
                raise ValueError("render failed")
            rendered.append(section)

        outcome = await SectionLoader(gateway, ContentState(), on_loaded=on_loaded).load_all()

        assert outcome[ContentSection.ABOUT] is False
        assert ContentSection.HERO in rendered
        assert ContentSection.ABOUT not in rendered


class TestBootPage:
    @pytest.mark.asyncio
    async def test_failed_section_keeps_static_markup(self, gateway, surface):
        gateway.errors["list_blogs"] = RuntimeError("boom")
        gateway.skills = [Skill(id=2, title="Newer", details="b"), Skill(id=1, title="Older", details="a")]

        page = await boot_page(gateway, ContentState(), surface)

        rendered = {view.section for view in surface.views}
        assert ContentSection.BLOGS not in rendered
        assert rendered == set(ContentSection) - {ContentSection.BLOGS}
        skills_view = surface.last_view(ContentSection.SKILLS)
        assert [card.content["title"] for card in skills_view.cards] == ["Older", "Newer"]
        assert page.state.is_loaded(ContentSection.SKILLS)

    @pytest.mark.asyncio
    async def test_blank_remote_fields_render_from_defaults(self, gateway, surface):
        await boot_page(gateway, ContentState(), surface)

        hero_view = surface.last_view(ContentSection.HERO)
        assert hero_view.content["tagline"] == "Remote tagline"
        assert hero_view.content["headline"] == "Make launches feel calm and repeatable."
