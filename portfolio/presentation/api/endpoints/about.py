"""About section endpoints — singleton get/replace."""

from fastapi import APIRouter, Depends

from portfolio.application.schemas.content import AboutResponse, AboutUpdate
from portfolio.application.services import AboutService
from portfolio.infrastructure.dependencies import get_about_service, require_admin_token

router = APIRouter(prefix="/about", tags=["About"])


@router.get("", response_model=AboutResponse)
async def get_about(
    service: AboutService = Depends(get_about_service),
) -> AboutResponse:
    about = await service.get_about()
    return AboutResponse.model_validate(about, from_attributes=True)


@router.put("", response_model=AboutResponse, dependencies=[Depends(require_admin_token)])
async def update_about(
    data: AboutUpdate,
    service: AboutService = Depends(get_about_service),
) -> AboutResponse:
    about = await service.update_about(data)
    return AboutResponse.model_validate(about, from_attributes=True)
