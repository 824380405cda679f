"""Certification endpoints — list (newest first) and create."""

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas.content import CertificationCreate, CertificationResponse
from portfolio.application.services import CertificationService
from portfolio.infrastructure.dependencies import get_certification_service, require_admin_token

router = APIRouter(prefix="/certifications", tags=["Certifications"])


@router.get("", response_model=list[CertificationResponse])
async def list_certifications(
    service: CertificationService = Depends(get_certification_service),
) -> list[CertificationResponse]:
    certifications = await service.list_items()
    return [CertificationResponse.model_validate(c, from_attributes=True) for c in certifications]


@router.post(
    "",
    response_model=CertificationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def create_certification(
    data: CertificationCreate,
    service: CertificationService = Depends(get_certification_service),
) -> CertificationResponse:
    certification = await service.create_item(data)
    return CertificationResponse.model_validate(certification, from_attributes=True)
