"""Bulk purge endpoint — irreversibly clears content sections."""

from fastapi import APIRouter, Depends

from portfolio.application.schemas.content import PurgeRequest, PurgeResponse
from portfolio.application.services import PurgeService
from portfolio.infrastructure.dependencies import get_purge_service, require_admin_token

router = APIRouter(prefix="/content", tags=["Content"])


@router.delete("", response_model=PurgeResponse, dependencies=[Depends(require_admin_token)])
async def purge_content(
    data: PurgeRequest | None = None,
    service: PurgeService = Depends(get_purge_service),
) -> PurgeResponse:
    """Clear the requested sections (all seven when none are given).

    Hero and about are reset to empty fields; list sections lose every row.
    """
    cleared = await service.purge(data.sections if data else None)
    return PurgeResponse(cleared=[section.value for section in cleared])
