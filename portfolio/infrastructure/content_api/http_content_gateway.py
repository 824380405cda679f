"""HTTP content gateway — implements the ContentGateway port over httpx.

Every request is bounded end to end by one timeout (10 s by default) and is
never retried: timeouts and transport failures surface as NetworkError, non-2xx
answers as ContentApiError carrying the service's ``error`` message.
Responses are validated with the same pydantic schemas the service
serializes with, then mapped onto domain entities.
"""

import asyncio
import logging
from typing import Any

import httpx

from portfolio.application.interfaces import ContentGateway, ImageUpload, Payload, UploadedImage
from portfolio.application.schemas.content import (
    AboutResponse,
    BlogResponse,
    CertificationResponse,
    FeaturedSkillResponse,
    HeroResponse,
    ProjectResponse,
    PurgeResponse,
    SkillResponse,
    UploadResponse,
)
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
from portfolio.domain.exceptions import ContentApiError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


# ── Response → entity mapping ───────────────────────────────────────


def _to_hero(data: Any) -> HeroContent:
    dto = HeroResponse.model_validate(data)
    return HeroContent(
        tagline=dto.tagline,
        headline=dto.headline,
        subheading=dto.subheading,
        badges=list(dto.badges),
        metrics=[Metric(value=m.value, label=m.label) for m in dto.metrics],
        primary_label=dto.primary_label,
        primary_url=dto.primary_url,
        secondary_label=dto.secondary_label,
        secondary_url=dto.secondary_url,
        updated_at=dto.updated_at,
    )


def _to_about(data: Any) -> AboutContent:
    dto = AboutResponse.model_validate(data)
    return AboutContent(
        heading=dto.heading,
        summary=dto.summary,
        bullets=list(dto.bullets),
        photo=dto.photo,
        updated_at=dto.updated_at,
    )


def _to_project(data: Any) -> Project:
    dto = ProjectResponse.model_validate(data)
    return Project(
        id=dto.id,
        tag=dto.tag,
        title=dto.title,
        description=dto.description,
        bullets=list(dto.bullets),
        link_label=dto.link_label,
        link_url=dto.link_url,
        image=dto.image,
        images=list(dto.images),
        created_at=dto.created_at,
    )


def _to_skill(data: Any) -> Skill:
    dto = SkillResponse.model_validate(data)
    return Skill(id=dto.id, title=dto.title, details=dto.details, created_at=dto.created_at)


def _to_blog(data: Any) -> Blog:
    dto = BlogResponse.model_validate(data)
    return Blog(
        id=dto.id,
        title=dto.title,
        summary=dto.summary,
        link=dto.link,
        images=list(dto.images),
        created_at=dto.created_at,
    )


def _to_certification(data: Any) -> Certification:
    dto = CertificationResponse.model_validate(data)
    return Certification(
        id=dto.id,
        title=dto.title,
        issuer=dto.issuer,
        year=dto.year,
        description=dto.description,
        created_at=dto.created_at,
    )


def _to_contact(data: Any) -> FeaturedSkill:
    dto = FeaturedSkillResponse.model_validate(data)
    return FeaturedSkill(id=dto.id, title=dto.title, details=dto.details, created_at=dto.created_at)


class HttpContentGateway(ContentGateway):
    """Infrastructure adapter — talks to the content API under ``/api``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: list[tuple[str, tuple[str, bytes, str]]] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        # httpx applies its timeout per phase; the deadline covers the whole exchange.
        try:
            async with asyncio.timeout(self._timeout):
                response = await client.request(
                    method,
                    url,
                    json=json,
                    files=files,
                    timeout=self._timeout,
                )
        except (httpx.TimeoutException, TimeoutError) as exc:
            logger.warning("%s %s timed out after %.1fs", method, url, self._timeout)
            raise NetworkError(url, "request timed out") from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code >= 400:
            self._raise_api_error(response)
        return response.json()

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> None:
        """Raise ContentApiError with the service's ``error`` message when present."""
        message = f"Request failed with status {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"].strip():
            message = data["error"]

        raise ContentApiError(status_code=response.status_code, message=message)

    # ── Singletons ──────────────────────────────────────────────────

    async def fetch_hero(self) -> HeroContent:
        return _to_hero(await self._request("GET", "/hero"))

    async def update_hero(self, payload: Payload) -> HeroContent:
        return _to_hero(await self._request("PUT", "/hero", json=payload))

    async def fetch_about(self) -> AboutContent:
        return _to_about(await self._request("GET", "/about"))

    async def update_about(self, payload: Payload) -> AboutContent:
        return _to_about(await self._request("PUT", "/about", json=payload))

    # ── Collections ─────────────────────────────────────────────────

    async def list_projects(self) -> list[Project]:
        return [_to_project(item) for item in await self._request("GET", "/projects")]

    async def create_project(self, payload: Payload) -> Project:
        return _to_project(await self._request("POST", "/projects", json=payload))

    async def list_skills(self) -> list[Skill]:
        return [_to_skill(item) for item in await self._request("GET", "/skills")]

    async def create_skill(self, payload: Payload) -> Skill:
        return _to_skill(await self._request("POST", "/skills", json=payload))

    async def list_blogs(self) -> list[Blog]:
        return [_to_blog(item) for item in await self._request("GET", "/blogs")]

    async def create_blog(self, payload: Payload) -> Blog:
        return _to_blog(await self._request("POST", "/blogs", json=payload))

    async def list_certifications(self) -> list[Certification]:
        return [_to_certification(item) for item in await self._request("GET", "/certifications")]

    async def create_certification(self, payload: Payload) -> Certification:
        return _to_certification(await self._request("POST", "/certifications", json=payload))

    async def list_contacts(self) -> list[FeaturedSkill]:
        return [_to_contact(item) for item in await self._request("GET", "/featured-skills")]

    async def create_contact(self, payload: Payload) -> FeaturedSkill:
        return _to_contact(await self._request("POST", "/featured-skills", json=payload))

    # ── Uploads / purge ─────────────────────────────────────────────

    async def upload_images(self, files: list[ImageUpload]) -> list[UploadedImage]:
        if not files:
            return []
        parts = [("images", (f.filename, f.content, f.content_type)) for f in files]
        dto = UploadResponse.model_validate(await self._request("POST", "/uploads", files=parts))
        return [
            UploadedImage(
                url=item.url,
                file_name=item.file_name,
                original_name=item.original_name,
                size=item.size,
                mimetype=item.mimetype,
            )
            for item in dto.files
        ]

    async def purge(self, sections: list[ContentSection]) -> list[ContentSection]:
        payload = {"sections": [section.value for section in sections]}
        dto = PurgeResponse.model_validate(await self._request("DELETE", "/content", json=payload))
        cleared = [ContentSection.parse(name) for name in dto.cleared]
        return [section for section in cleared if section is not None]
