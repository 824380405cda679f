"""Image upload endpoint — multipart field ``images``."""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from portfolio.application.schemas.content import UploadedFileSchema, UploadResponse
from portfolio.application.services import IncomingFile, UploadService
from portfolio.config import get_settings
from portfolio.infrastructure.dependencies import get_upload_service, require_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["Uploads"])


def _request_origin(request: Request) -> str | None:
    """``scheme://host`` of the incoming request, honouring X-Forwarded-Proto."""
    host = request.headers.get("host")
    if not host:
        return None
    scheme = request.headers.get("x-forwarded-proto") or request.url.scheme
    return f"{scheme.split(',')[0].strip()}://{host}"


@router.post(
    "",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
async def upload_images(
    request: Request,
    images: list[UploadFile] = File(default=[]),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """Store up to ten images (5 MB each) and return their public URLs."""
    # Read one byte past the ceiling so oversized files are detected without
    # buffering them entirely.
    read_limit = get_settings().max_upload_size_bytes + 1
    incoming = [
        IncomingFile(
            original_name=upload.filename or "upload",
            content=await upload.read(read_limit),
            content_type=upload.content_type,
        )
        for upload in images
    ]

    published = await service.upload(incoming, origin=_request_origin(request))
    return UploadResponse(
        files=[
            UploadedFileSchema(
                file_name=item.stored.filename,
                original_name=item.stored.original_name,
                url=item.url,
                size=item.stored.size,
                mimetype=item.stored.mime_type,
            )
            for item in published
        ]
    )
