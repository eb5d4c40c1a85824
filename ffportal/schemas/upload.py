"""DTO for media uploads"""

from pydantic import Field

from ffportal.schemas.base import BaseSchema


class UploadSignatureRequestSchema(BaseSchema):
    folder: str = Field(default="programs", pattern=r"^[\w\-]+(/[\w\-]+)*$")


class UploadGrantSchema(BaseSchema):
    signature: str
    timestamp: int
    api_key: str
    folder: str
    public_id: str
    cloud_name: str
    upload_url: str


class ImageDeleteRequestSchema(BaseSchema):
    url: str | None = None
    public_id: str | None = None


class ImageDeleteResponseSchema(BaseSchema):
    message: str
    public_id: str


class ImageInfoSchema(BaseSchema):
    public_id: str
    url: str
    exists: bool
