"""Upload service. Signs direct-to-Cloudinary uploads and deletes uploaded images.

Image bytes never pass through this API: the dashboard uploads straight to the
media host with a grant signed here.
"""

import logging
import re
import time
from uuid import uuid4

import cloudinary.exceptions
import cloudinary.uploader
import cloudinary.utils
from fastapi import Depends

from ffportal.config import Config, get_config
from ffportal.errors.upload import (
    ImageIdentifierInvalid,
    ImageIdentifierMissing,
    MediaHostError,
    UploadNotConfigured,
)
from ffportal.schemas.upload import (
    ImageDeleteResponseSchema,
    ImageInfoSchema,
    UploadGrantSchema,
)

logger = logging.getLogger(__name__)

# https://res.cloudinary.com/<cloud>/image/upload/v123/<public_id>.<ext>
PUBLIC_ID_PATTERN = re.compile(r"/v\d+/(.+)\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)


def extract_public_id(url: str) -> str | None:
    match = PUBLIC_ID_PATTERN.search(url)
    return match.group(1) if match else None


class UploadService:
    def __init__(self, config: Config = Depends(get_config)):
        self.config = config

    def _ensure_configured(self) -> None:
        if not self.config.uploads_enabled:
            raise UploadNotConfigured

    @property
    def _credentials(self) -> dict[str, str | None]:
        """Per-call SDK options, the global cloudinary.config() is never touched"""
        return dict(
            cloud_name=self.config.cloudinary_cloud_name,
            api_key=self.config.cloudinary_api_key,
            api_secret=self.config.cloudinary_api_secret,
        )

    @property
    def upload_url(self) -> str:
        return cloudinary.utils.cloudinary_api_url(
            "upload", cloud_name=self.config.cloudinary_cloud_name
        )

    def issue_upload_grant(self, folder: str = "programs") -> UploadGrantSchema:
        """Signed, time-boxed permission to upload one image into the folder."""
        self._ensure_configured()
        timestamp = int(time.time())
        public_id = f"{folder}/{uuid4()}"
        signature = cloudinary.utils.api_sign_request(
            {"folder": folder, "public_id": public_id, "timestamp": timestamp},
            self.config.cloudinary_api_secret,
        )
        logger.info("Upload grant issued for public_id=%s", public_id)
        return UploadGrantSchema(
            signature=signature,
            timestamp=timestamp,
            api_key=self.config.cloudinary_api_key or "",
            folder=folder,
            public_id=public_id,
            cloud_name=self.config.cloudinary_cloud_name or "",
            upload_url=self.upload_url,
        )

    def revoke(
        self, url: str | None = None, public_id: str | None = None
    ) -> ImageDeleteResponseSchema:
        """Delete an image from the media host, identified by public_id or its URL."""
        if not url and not public_id:
            raise ImageIdentifierMissing
        image_public_id = public_id or extract_public_id(url or "")
        if not image_public_id:
            raise ImageIdentifierInvalid(url)
        self._ensure_configured()

        try:
            response = cloudinary.uploader.destroy(
                image_public_id,
                timeout=self.config.cloudinary_timeout,
                **self._credentials,
            )
        except cloudinary.exceptions.Error as exc:
            logger.error("Media host destroy failed: %s", exc)
            raise MediaHostError(str(exc)) from exc

        result = response.get("result")
        # "not found" means the image is already gone
        if result not in ("ok", "not found"):
            logger.error("Media host destroy returned result=%s", result)
            raise MediaHostError(f"{result=}")

        logger.info("Image public_id=%s deleted (%s)", image_public_id, result)
        return ImageDeleteResponseSchema(
            message="Image deleted successfully", public_id=image_public_id
        )

    def image_info(self, public_id: str) -> ImageInfoSchema:
        """Optimized delivery URL of an uploaded image. Existence is not checked."""
        if not public_id:
            raise ImageIdentifierMissing
        self._ensure_configured()
        url, _ = cloudinary.utils.cloudinary_url(
            public_id,
            quality="auto",
            fetch_format="auto",
            secure=True,
            cloud_name=self.config.cloudinary_cloud_name,
        )
        return ImageInfoSchema(public_id=public_id, url=url, exists=True)
