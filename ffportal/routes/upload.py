"""API routes for media uploads"""

from fastapi import APIRouter, Depends

from ffportal.middlewares.token import get_user_from_token
from ffportal.models.user import User
from ffportal.schemas.upload import (
    ImageDeleteRequestSchema,
    ImageDeleteResponseSchema,
    ImageInfoSchema,
    UploadGrantSchema,
    UploadSignatureRequestSchema,
)
from ffportal.services.upload import UploadService

upload_router = APIRouter(prefix="/upload", tags=["Upload"])


@upload_router.post("/signature", response_model=UploadGrantSchema)
def create_upload_signature(
    request: UploadSignatureRequestSchema | None = None,
    upload_service: UploadService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    request = request or UploadSignatureRequestSchema()
    return upload_service.issue_upload_grant(request.folder)


@upload_router.delete("/image", response_model=ImageDeleteResponseSchema)
def delete_image(
    request: ImageDeleteRequestSchema,
    upload_service: UploadService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return upload_service.revoke(url=request.url, public_id=request.public_id)


@upload_router.get("/image-info/{public_id:path}", response_model=ImageInfoSchema)
def read_image_info(
    public_id: str,
    upload_service: UploadService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return upload_service.image_info(public_id)
