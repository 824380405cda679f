"""Pydantic DTOs (Data Transfer Objects) for portfolio content.

Field names are snake_case in Python and camelCase on the wire. Write
schemas accept every field as optional so that missing required fields are
reported together as one ``MissingFieldsError`` instead of per-field 422s.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio.domain.delimited_text import join_lines, parse_metric, parse_metrics, split_lines
from portfolio.domain.entities import Metric
from portfolio.domain.exceptions import MissingFieldsError


class WireModel(BaseModel):
    """Base for every schema that crosses the HTTP boundary."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class ContentWrite(WireModel):
    """Base for create/update payloads with server-side required fields."""

    required_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent, null or blank."""
        missing: list[str] = []
        for name in self.required_fields:
            value = getattr(self, name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(to_camel(name))
        return missing

    def ensure_required(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(missing)

    def text(self, name: str) -> str:
        """Trimmed value of an optional text field, empty when absent."""
        value = getattr(self, name, None)
        return (value or "").strip()


# ── Tagged input variants ───────────────────────────────────────────
#
# Multi-value fields arrive either pre-split (a JSON array) or as the raw
# canonical text typed into a form. Each variant has one normalization rule.

LinesInput = list[str] | str


def normalize_lines(value: LinesInput | None) -> list[str]:
    """Array → trimmed non-blank items; text → one item per line."""
    if value is None:
        return []
    if isinstance(value, str):
        return split_lines(value)
    return split_lines(join_lines(value))


class MetricSchema(WireModel):
    value: str = ""
    label: str = ""


MetricsInput = list[MetricSchema | str] | str


def normalize_metrics(value: MetricsInput | None) -> list[Metric]:
    """Objects, ``value|label`` strings or raw text → structured metrics."""
    if value is None:
        return []
    if isinstance(value, str):
        return parse_metrics(value)
    metrics: list[Metric] = []
    for entry in value:
        if isinstance(entry, MetricSchema):
            metric = Metric(value=entry.value.strip(), label=entry.label.strip())
        else:
            if not entry.strip():
                continue
            metric = parse_metric(entry)
        if metric.value or metric.label:
            metrics.append(metric)
    return metrics


def normalize_images(value: LinesInput | None, limit: int) -> list[str]:
    """Image URLs in submission order, blanks dropped, capped at ``limit``.

    Text input holds one URL per line; commas are legal inside a URL.
    """
    if value is None:
        return []
    if isinstance(value, str):
        urls = split_lines(value)
    else:
        urls = [url.strip() for url in value if url and url.strip()]
    return urls[:limit]


# ── Singletons ──────────────────────────────────────────────────────


class HeroUpdate(ContentWrite):
    """Schema for replacing the hero section."""

    required_fields: ClassVar[tuple[str, ...]] = ("tagline", "headline", "subheading")

    tagline: str | None = Field(None, examples=["Platform & Reliability Partner"])
    headline: str | None = None
    subheading: str | None = None
    badges: LinesInput | None = Field(None, examples=[["Kubernetes Ops", "Terraform"]])
    metrics: MetricsInput | None = Field(None, examples=[[{"value": "10", "label": "years"}]])
    primary_label: str | None = Field(None, validation_alias=AliasChoices("primaryLabel", "primary_label"))
    primary_url: str | None = Field(None, validation_alias=AliasChoices("primaryUrl", "primary_url"))
    secondary_label: str | None = Field(None, validation_alias=AliasChoices("secondaryLabel", "secondary_label"))
    secondary_url: str | None = Field(None, validation_alias=AliasChoices("secondaryUrl", "secondary_url"))


class HeroResponse(WireModel):
    tagline: str
    headline: str
    subheading: str
    badges: list[str]
    metrics: list[MetricSchema]
    primary_label: str
    primary_url: str
    secondary_label: str
    secondary_url: str
    updated_at: datetime | None = None


class AboutUpdate(ContentWrite):
    """Schema for replacing the about section."""

    required_fields: ClassVar[tuple[str, ...]] = ("heading", "summary")

    heading: str | None = None
    summary: str | None = None
    bullets: LinesInput | None = None
    photo: str | None = None


class AboutResponse(WireModel):
    heading: str
    summary: str
    bullets: list[str]
    photo: str
    updated_at: datetime | None = None


# ── Collections ─────────────────────────────────────────────────────


class ProjectCreate(ContentWrite):
    required_fields: ClassVar[tuple[str, ...]] = ("tag", "title", "description")

    tag: str | None = Field(None, examples=["Platform"])
    title: str | None = Field(None, examples=["Golden path pipelines"])
    description: str | None = None
    bullets: LinesInput | None = None
    link_label: str | None = None
    link_url: str | None = None
    image: str | None = None
    images: LinesInput | None = None


class ProjectResponse(WireModel):
    id: int
    tag: str
    title: str
    description: str
    bullets: list[str]
    link_label: str
    link_url: str
    image: str
    images: list[str]
    created_at: datetime


class SkillCreate(ContentWrite):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "details")

    title: str | None = None
    details: str | None = None


class SkillResponse(WireModel):
    id: int
    title: str
    details: str
    created_at: datetime


class BlogCreate(ContentWrite):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "summary", "link")

    title: str | None = None
    summary: str | None = None
    link: str | None = None
    images: LinesInput | None = None


class BlogResponse(WireModel):
    id: int
    title: str
    summary: str
    link: str
    images: list[str]
    created_at: datetime


class CertificationCreate(ContentWrite):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "year")

    title: str | None = None
    issuer: str | None = None
    year: str | None = Field(None, examples=["2024"])
    description: str | None = None


class CertificationResponse(WireModel):
    id: int
    title: str
    issuer: str
    year: str
    description: str
    created_at: datetime


class FeaturedSkillCreate(ContentWrite):
    """A contact link — ``details`` may be a URL, an email, a phone number or a label."""

    required_fields: ClassVar[tuple[str, ...]] = ("title", "details")

    title: str | None = Field(None, examples=["LinkedIn"])
    details: str | None = Field(None, examples=["linkedin.com/in/someone"])


class FeaturedSkillResponse(WireModel):
    id: int
    title: str
    details: str
    created_at: datetime


# ── Uploads / purge / errors ────────────────────────────────────────


class UploadedFileSchema(WireModel):
    file_name: str
    original_name: str
    url: str
    size: int
    mimetype: str


class UploadResponse(WireModel):
    files: list[UploadedFileSchema]


class PurgeRequest(WireModel):
    """Sections to clear; absent or empty means every section."""

    # Entries that are not section names (including null) are ignored.
    sections: list[Any] | None = None


class PurgeResponse(WireModel):
    cleared: list[str]


class ErrorResponse(BaseModel):
    error: str
