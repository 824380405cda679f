"""Shared fakes for the site-side tests (content gateway and surface)."""

from collections import defaultdict
from datetime import datetime, timezone

import pytest

from portfolio.application.interfaces import ContentGateway, ImageUpload, UploadedImage
from portfolio.application.services import ContentState
from portfolio.domain.entities import (
    AboutContent,
    Blog,
    Certification,
    ContentSection,
    FeaturedSkill,
    HeroContent,
    Metric,
    Project,
    Skill,
)
from portfolio.presentation.site import SitePage, SiteSurface


class FakeContentGateway(ContentGateway):
    """In-memory content service.

    ``errors`` maps a method name to the exception it should raise.
    """

    def __init__(self):
        self.hero = HeroContent(tagline="Remote tagline", headline="", subheading="Remote subheading")
        self.about = AboutContent(heading="Remote heading", summary="Remote summary")
        self.projects: list[Project] = []
        self.skills: list[Skill] = []
        self.blogs: list[Blog] = []
        self.certifications: list[Certification] = []
        self.contacts: list[FeaturedSkill] = []
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, object]] = []
        self.uploaded: list[ImageUpload] = []
        self._next_id = 100

    def _record(self, name: str, payload: object = None) -> None:
        self.calls.append((name, payload))
        if name in self.errors:
            raise self.errors[name]

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def payload_of(self, name: str):
        return next(payload for called, payload in self.calls if called == name)

    async def fetch_hero(self):
        self._record("fetch_hero")
        return self.hero

    async def update_hero(self, payload):
        self._record("update_hero", payload)
        self.hero = HeroContent(
            tagline=payload["tagline"],
            headline=payload["headline"],
            subheading=payload["subheading"],
            badges=list(payload["badges"]),
            metrics=[Metric(m["value"], m["label"]) for m in payload["metrics"]],
            primary_label=payload["primaryLabel"],
            primary_url=payload["primaryUrl"],
            secondary_label=payload["secondaryLabel"],
            secondary_url=payload["secondaryUrl"],
            updated_at=datetime.now(timezone.utc),
        )
        return self.hero

    async def fetch_about(self):
        self._record("fetch_about")
        return self.about

    async def update_about(self, payload):
        self._record("update_about", payload)
        self.about = AboutContent(
            heading=payload["heading"],
            summary=payload["summary"],
            bullets=list(payload["bullets"]),
            photo=payload["photo"],
        )
        return self.about

    async def list_projects(self):
        self._record("list_projects")
        return list(self.projects)

    async def create_project(self, payload):
        self._record("create_project", payload)
        project = Project(
            id=self._new_id(),
            tag=payload["tag"],
            title=payload["title"],
            description=payload["description"],
            bullets=list(payload["bullets"]),
            link_label=payload["linkLabel"],
            link_url=payload["linkUrl"],
            image=payload["image"],
            images=list(payload["images"]),
        )
        self.projects.insert(0, project)
        return project

    async def list_skills(self):
        self._record("list_skills")
        return list(self.skills)

    async def create_skill(self, payload):
        self._record("create_skill", payload)
        skill = Skill(id=self._new_id(), title=payload["title"], details=payload["details"])
        self.skills.insert(0, skill)
        return skill

    async def list_blogs(self):
        self._record("list_blogs")
        return list(self.blogs)

    async def create_blog(self, payload):
        self._record("create_blog", payload)
        blog = Blog(
            id=self._new_id(),
            title=payload["title"],
            summary=payload["summary"],
            link=payload["link"],
            images=list(payload["images"]),
        )
        self.blogs.insert(0, blog)
        return blog

    async def list_certifications(self):
        self._record("list_certifications")
        return list(self.certifications)

    async def create_certification(self, payload):
        self._record("create_certification", payload)
        certification = Certification(
            id=self._new_id(),
            title=payload["title"],
            issuer=payload["issuer"],
            year=payload["year"],
            description=payload["description"],
        )
        self.certifications.insert(0, certification)
        return certification

    async def list_contacts(self):
        self._record("list_contacts")
        return list(self.contacts)

    async def create_contact(self, payload):
        self._record("create_contact", payload)
        contact = FeaturedSkill(id=self._new_id(), title=payload["title"], details=payload["details"])
        self.contacts.insert(0, contact)
        return contact

    async def upload_images(self, files):
        self._record("upload_images", files)
        self.uploaded.extend(files)
        return [
            UploadedImage(
                url=f"http://content.test/uploads/{index}-{f.filename}",
                file_name=f"{index}-{f.filename}",
                original_name=f.filename,
                size=len(f.content),
                mimetype=f.content_type,
            )
            for index, f in enumerate(files)
        ]

    async def purge(self, sections):
        self._record("purge", sections)
        return list(sections)


class FakeSurface(SiteSurface):
    """Records everything the site core asks the page to do."""

    def __init__(self):
        self.views = []
        self.statuses = defaultdict(list)
        self.submit_history = defaultdict(list)
        self.resets: list[str] = []
        self.focused: frozenset[str] = frozenset()
        self.confirm_answer = True
        self.prompts: list[str] = []
        self.reloads = 0
        self.animations: list[tuple[str, int]] = []
        self.fail_animations = False
        self.fail_apply = False

    def apply(self, view):
        if self.fail_apply:
            raise RuntimeError("section container missing")
        self.views.append(view)

    def focused_fields(self):
        return self.focused

    def set_status(self, form, status):
        self.statuses[form].append(status)

    def set_submit_enabled(self, form, enabled):
        self.submit_history[form].append(enabled)

    def reset_form(self, form):
        self.resets.append(form)

    async def confirm(self, message):
        self.prompts.append(message)
        return self.confirm_answer

    def reload(self):
        self.reloads += 1

    def register_scroll_animation(self, element_id, distance):
        if self.fail_animations:
            raise RuntimeError("animation library missing")
        self.animations.append((element_id, distance))

    def last_view(self, section: ContentSection):
        return next(view for view in reversed(self.views) if view.section is section)


@pytest.fixture
def gateway() -> FakeContentGateway:
    return FakeContentGateway()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def state() -> ContentState:
    return ContentState()


@pytest.fixture
def page(state, surface) -> SitePage:
    return SitePage(state, surface)
