"""Unit tests for client content state, the renderer and the page binder."""

from portfolio.application.services import ContentState
from portfolio.domain.defaults import default_about, default_hero
from portfolio.domain.entities import AboutContent, ContentSection, FeaturedSkill, HeroContent, Metric, Project, Skill
from portfolio.presentation.site import RenderMode, render_item, render_section
from portfolio.presentation.site.views import CARD_MOTION_DISTANCE


class TestContentState:
    def test_resolved_hero_uses_defaults_before_first_fetch(self):
        state = ContentState()
        assert state.hero is None
        assert state.resolved_hero() == default_hero()

    def test_blank_fields_fall_back_per_field(self):
        state = ContentState()
        state.merge_hero(HeroContent(tagline="Remote", headline="  ", badges=[]))

        resolved = state.resolved_hero()

        assert resolved.tagline == "Remote"
        assert resolved.headline == default_hero().headline
        assert resolved.badges == default_hero().badges

    def test_merge_never_blanks_a_known_value(self):
        state = ContentState()
        state.merge_about(AboutContent(heading="First heading", summary="First summary", photo="/uploads/me.jpg"))
        state.merge_about(AboutContent(heading="Second heading", summary=""))

        assert state.about.heading == "Second heading"
        assert state.about.summary == "First summary"
        assert state.about.photo == "/uploads/me.jpg"

    def test_collections_are_kept_in_insertion_order(self):
        state = ContentState()
        older = Skill(id=1, title="Older", details="a")
        newer = Skill(id=2, title="Newer", details="b")

        state.replace_skills([newer, older])
        state.add_skill(Skill(id=3, title="Newest", details="c"))

        assert [s.title for s in state.skills] == ["Older", "Newer", "Newest"]
        assert state.is_loaded(ContentSection.SKILLS)
        assert not state.is_loaded(ContentSection.BLOGS)


class TestRenderer:
    def test_hero_form_uses_readable_metric_separator(self):
        state = ContentState()
        state.merge_hero(
            HeroContent(
                tagline="T",
                headline="H",
                subheading="S",
                badges=["A", "B"],
                metrics=[Metric("40+", "services"), Metric("3x", "")],
            )
        )

        view = render_section(state, ContentSection.HERO)

        assert view.mode is RenderMode.UPDATE
        assert view.form_values["metrics"] == "40+ | services\n3x"
        assert view.form_values["badges"] == "A\nB"
        assert view.content["metrics"] == [{"value": "40+", "label": "services"}, {"value": "3x", "label": ""}]

    def test_focused_inputs_are_not_overwritten(self):
        state = ContentState()
        state.merge_about(AboutContent(heading="Remote heading", summary="Remote summary"))

        view = render_section(state, ContentSection.ABOUT, frozenset({"about.summary"}))

        assert "summary" not in view.form_values
        assert view.form_values["heading"] == "Remote heading"
        assert view.content["summary"] == "Remote summary"

    def test_about_without_photo_renders_placeholder(self):
        state = ContentState(about_defaults=AboutContent(heading="H", summary="S"))
        view = render_section(state, ContentSection.ABOUT)
        assert view.content["photo"] is None

    def test_list_section_replaces_cards_oldest_first(self):
        state = ContentState()
        state.replace_projects(
            [
                Project(id=2, tag="t", title="Second", description="d", images=["/b.png"]),
                Project(id=1, tag="t", title="First", description="d", image="/legacy.png"),
            ]
        )

        view = render_section(state, ContentSection.PROJECTS)

        assert view.mode is RenderMode.REPLACE
        assert view.container == "#projects .card-grid"
        assert [card.element_id for card in view.cards] == ["project-1", "project-2"]
        assert view.cards[0].content["cover"] == "/legacy.png"
        assert view.cards[1].content["cover"] == "/b.png"
        assert all(card.motion_distance == CARD_MOTION_DISTANCE for card in view.cards)

    def test_contact_card_for_linkedin(self):
        view = render_item(ContentSection.CONTACTS, FeaturedSkill(id=5, title="LinkedIn", details="linkedin.com/in/x"))

        card = view.cards[0]
        assert view.mode is RenderMode.APPEND
        assert card.content["icon"] == "linkedin"
        assert card.content["href"] == "https://linkedin.com/in/x"
        assert card.content["target"] == "_blank"
        assert card.content["rel"] == "noopener"

    def test_contact_without_target_renders_plain_label(self):
        view = render_item(ContentSection.CONTACTS, FeaturedSkill(id=6, title="Location", details="Remote"))

        card = view.cards[0]
        assert card.content["href"] is None
        assert "target" not in card.content

    def test_empty_list_renders_no_cards(self):
        assert render_section(ContentState(), ContentSection.BLOGS).cards == []


class TestSitePage:
    def test_render_applies_view_and_registers_animations(self, state, surface, page):
        state.replace_skills([Skill(id=1, title="Terraform", details="Modules")])

        page.render(ContentSection.SKILLS)

        assert surface.last_view(ContentSection.SKILLS).cards[0].content["title"] == "Terraform"
        assert surface.animations == [("skill-1", CARD_MOTION_DISTANCE)]

    def test_focus_guard_comes_from_surface(self, state, surface, page):
        surface.focused = frozenset({"hero.tagline"})

        view = page.render(ContentSection.HERO)

        assert "tagline" not in view.form_values
        assert "headline" in view.form_values

    def test_animation_failure_is_not_fatal(self, state, surface, page):
        surface.fail_animations = True
        state.replace_skills([Skill(id=1, title="Terraform", details="Modules")])

        page.render(ContentSection.SKILLS)

        assert surface.last_view(ContentSection.SKILLS).cards


def test_default_about_has_bullets():
    assert default_about().bullets
