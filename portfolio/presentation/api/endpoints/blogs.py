"""Blog endpoints — list (newest first) and create."""

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas.content import BlogCreate, BlogResponse
from portfolio.application.services import BlogService
from portfolio.infrastructure.dependencies import get_blog_service, require_admin_token

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(
    service: BlogService = Depends(get_blog_service),
) -> list[BlogResponse]:
    blogs = await service.list_items()
    return [BlogResponse.model_validate(b, from_attributes=True) for b in blogs]


@router.post(
    "",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def create_blog(
    data: BlogCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    """Create a blog teaser; at most five images are kept."""
    blog = await service.create_item(data)
    return BlogResponse.model_validate(blog, from_attributes=True)
