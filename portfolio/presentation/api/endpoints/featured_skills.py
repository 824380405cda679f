"""Contact link endpoints — stored as "featured skills"."""

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas.content import FeaturedSkillCreate, FeaturedSkillResponse
from portfolio.application.services import FeaturedSkillService
from portfolio.infrastructure.dependencies import get_featured_skill_service, require_admin_token

router = APIRouter(prefix="/featured-skills", tags=["Contacts"])


@router.get("", response_model=list[FeaturedSkillResponse])
async def list_featured_skills(
    service: FeaturedSkillService = Depends(get_featured_skill_service),
) -> list[FeaturedSkillResponse]:
    contacts = await service.list_items()
    return [FeaturedSkillResponse.model_validate(c, from_attributes=True) for c in contacts]


@router.post(
    "",
    response_model=FeaturedSkillResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def create_featured_skill(
    data: FeaturedSkillCreate,
    service: FeaturedSkillService = Depends(get_featured_skill_service),
) -> FeaturedSkillResponse:
    contact = await service.create_item(data)
    return FeaturedSkillResponse.model_validate(contact, from_attributes=True)
