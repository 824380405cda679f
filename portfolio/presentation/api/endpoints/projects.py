"""Project endpoints — list (newest first) and create."""

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas.content import ProjectCreate, ProjectResponse
from portfolio.application.services import ProjectService
from portfolio.infrastructure.dependencies import get_project_service, require_admin_token

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Retrieve every project, newest first."""
    projects = await service.list_items()
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Create a project card; at most five images are kept."""
    project = await service.create_item(data)
    return ProjectResponse.model_validate(project, from_attributes=True)
