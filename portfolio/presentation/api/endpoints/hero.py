"""Hero section endpoints — singleton get/replace."""

from fastapi import APIRouter, Depends

from portfolio.application.schemas.content import HeroResponse, HeroUpdate
from portfolio.application.services import HeroService
from portfolio.infrastructure.dependencies import get_hero_service, require_admin_token

router = APIRouter(prefix="/hero", tags=["Hero"])


@router.get("", response_model=HeroResponse)
async def get_hero(
    service: HeroService = Depends(get_hero_service),
) -> HeroResponse:
    """Retrieve the hero content with badges and metrics expanded."""
    hero = await service.get_hero()
    return HeroResponse.model_validate(hero, from_attributes=True)


@router.put("", response_model=HeroResponse, dependencies=[Depends(require_admin_token)])
async def update_hero(
    data: HeroUpdate,
    service: HeroService = Depends(get_hero_service),
) -> HeroResponse:
    """Replace the hero content. Badges/metrics may be arrays or delimited text."""
    hero = await service.update_hero(data)
    return HeroResponse.model_validate(hero, from_attributes=True)
