"""Skill endpoints — list (newest first) and create."""

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas.content import SkillCreate, SkillResponse
from portfolio.application.services import SkillService
from portfolio.infrastructure.dependencies import get_skill_service, require_admin_token

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=list[SkillResponse])
async def list_skills(
    service: SkillService = Depends(get_skill_service),
) -> list[SkillResponse]:
    skills = await service.list_items()
    return [SkillResponse.model_validate(s, from_attributes=True) for s in skills]


@router.post(
    "",
    response_model=SkillResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def create_skill(
    data: SkillCreate,
    service: SkillService = Depends(get_skill_service),
) -> SkillResponse:
    skill = await service.create_item(data)
    return SkillResponse.model_validate(skill, from_attributes=True)
