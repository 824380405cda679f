"""Unit tests for the content application services.

Uses in-memory fake repositories to test business logic in isolation.
"""

from dataclasses import replace

import pytest

from portfolio.application.interfaces import CollectionRepository, SingletonRepository
from portfolio.application.schemas.content import HeroUpdate, ProjectCreate, SkillCreate
from portfolio.application.services import HeroService, ProjectService, PurgeService, SkillService
from portfolio.domain.entities import AboutContent, ContentSection, HeroContent, Metric, Project, Skill
from portfolio.domain.exceptions import MissingFieldsError, PersistenceError


# ── Fake Repositories ──


class FakeCollectionRepository(CollectionRepository):
    """In-memory collection repository for testing."""

    def __init__(self):
        self._items: list = []
        self._next_id = 1

    async def get_all(self):
        return list(reversed(self._items))

    async def get_by_id(self, entity_id):
        return next((item for item in self._items if item.id == entity_id), None)

    async def create(self, entity):
        stored = replace(entity, id=self._next_id)
        self._next_id += 1
        self._items.append(stored)
        return stored

    async def delete_all(self):
        removed = len(self._items)
        self._items.clear()
        return removed

    async def count(self):
        return len(self._items)


class BrokenCollectionRepository(FakeCollectionRepository):
    async def create(self, entity):
        raise RuntimeError("disk I/O error")


class FakeSingletonRepository(SingletonRepository):
    def __init__(self, entity):
        self._entity = entity
        self._empty = type(entity)()

    async def get(self):
        return self._entity

    async def replace(self, entity):
        self._entity = entity
        return entity

    async def clear(self):
        self._entity = type(self._empty)()
        return self._entity


# ── Hero ──


class TestHeroService:
    @pytest.mark.asyncio
    async def test_update_normalizes_multi_value_fields(self):
        repo = FakeSingletonRepository(HeroContent())
        service = HeroService(repo)

        hero = await service.update_hero(
            HeroUpdate.model_validate(
                {
                    "tagline": "  Reliability ",
                    "headline": "Ship calmly",
                    "subheading": "Guardrails first",
                    "badges": "Terraform\n\n  Kubernetes  ",
                    "metrics": ["40+|services", {"value": "15", "label": "clusters"}, " "],
                    "primaryLabel": "Talk",
                    "secondary_url": "cv.pdf",
                }
            )
        )

        assert hero.tagline == "Reliability"
        assert hero.badges == ["Terraform", "Kubernetes"]
        assert hero.metrics == [Metric("40+", "services"), Metric("15", "clusters")]
        assert hero.primary_label == "Talk"
        assert hero.secondary_url == "cv.pdf"
        assert (await repo.get()) is hero

    @pytest.mark.asyncio
    async def test_update_rejects_blank_required_fields(self):
        original = HeroContent(tagline="Keep me", headline="Keep", subheading="Keep")
        repo = FakeSingletonRepository(original)
        service = HeroService(repo)

        with pytest.raises(MissingFieldsError) as exc_info:
            await service.update_hero(HeroUpdate.model_validate({"tagline": "   ", "headline": "New"}))

        assert exc_info.value.fields == ["tagline", "subheading"]
        assert str(exc_info.value) == "Missing fields: tagline, subheading"
        assert (await repo.get()) is original


# ── Collections ──


class TestProjectService:
    @pytest.mark.asyncio
    async def test_create_caps_images_and_derives_cover(self):
        repo = FakeCollectionRepository()
        service = ProjectService(repo, max_images=5)

        project = await service.create_item(
            ProjectCreate.model_validate(
                {
                    "tag": "Platform",
                    "title": "Golden paths",
                    "description": "Shared pipelines",
                    "bullets": ["One", " ", "Two"],
                    "images": [f"/uploads/{i}.png" for i in range(7)],
                }
            )
        )

        assert project.id == 1
        assert project.bullets == ["One", "Two"]
        assert project.images == [f"/uploads/{i}.png" for i in range(5)]
        assert project.image == "/uploads/0.png"

    @pytest.mark.asyncio
    async def test_image_text_splits_on_lines_not_commas(self):
        repo = FakeCollectionRepository()
        service = ProjectService(repo, max_images=5)
        url = "https://res.cloudinary.com/demo/image/upload/w_400,h_300,c_fill/sample.jpg"

        project = await service.create_item(
            ProjectCreate.model_validate(
                {"tag": "Platform", "title": "Golden paths", "description": "d", "images": f"{url}\n\n/uploads/b.png"}
            )
        )

        assert project.images == [url, "/uploads/b.png"]
        assert project.image == url

    @pytest.mark.asyncio
    async def test_missing_fields_reported_together_and_nothing_inserted(self):
        repo = FakeCollectionRepository()
        service = ProjectService(repo)

        with pytest.raises(MissingFieldsError) as exc_info:
            await service.create_item(ProjectCreate.model_validate({"title": "Only a title"}))

        assert exc_info.value.fields == ["tag", "description"]
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_list_returns_newest_first(self):
        repo = FakeCollectionRepository()
        service = SkillService(repo)
        await service.create_item(SkillCreate(title="First", details="a"))
        await service.create_item(SkillCreate(title="Second", details="b"))

        items = await service.list_items()

        assert [item.title for item in items] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_store_failure_becomes_persistence_error(self):
        service = SkillService(BrokenCollectionRepository())

        with pytest.raises(PersistenceError) as exc_info:
            await service.create_item(SkillCreate(title="Terraform", details="Modules"))

        assert exc_info.value.message == "Unable to save skill"
        assert "disk" not in exc_info.value.message


# ── Purge ──


class TestPurgeService:
    def test_resolve_sections_ignores_unknown_and_duplicates(self):
        sections = PurgeService.resolve_sections(["skills", "bogus", "SKILLS", "hero"])
        assert sections == [ContentSection.SKILLS, ContentSection.HERO]

    def test_resolve_sections_skips_non_text_entries(self):
        assert PurgeService.resolve_sections(["skills", None, 3, {"name": "blogs"}]) == [ContentSection.SKILLS]

    def test_resolve_sections_empty_means_all(self):
        assert PurgeService.resolve_sections([]) == list(ContentSection)
        assert PurgeService.resolve_sections(None) == list(ContentSection)

    @pytest.mark.asyncio
    async def test_purge_clears_only_requested_sections(self):
        hero_repo = FakeSingletonRepository(HeroContent(tagline="Hi", headline="There", subheading="!"))
        about_repo = FakeSingletonRepository(AboutContent(heading="About", summary="Me"))
        skills = FakeCollectionRepository()
        projects = FakeCollectionRepository()
        await skills.create(Skill(title="Terraform", details="IaC"))
        await projects.create(Project(tag="t", title="p", description="d"))

        service = PurgeService(
            singletons={ContentSection.HERO: hero_repo, ContentSection.ABOUT: about_repo},
            collections={ContentSection.SKILLS: skills, ContentSection.PROJECTS: projects},
        )
        cleared = await service.purge(["skills", "hero", "unknown"])

        assert cleared == [ContentSection.SKILLS, ContentSection.HERO]
        assert await skills.count() == 0
        assert await projects.count() == 1
        assert (await hero_repo.get()).tagline == ""
        assert (await about_repo.get()).heading == "About"
