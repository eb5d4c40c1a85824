"""Media upload errors"""

from ffportal.errors.base import ApplicationError
from ffportal.errors.common import ValidationError


class ImageIdentifierMissing(ValidationError):
    error_code = 6001
    error = "Either url or public_id is required"


class ImageIdentifierInvalid(ValidationError):
    error_code = 6002
    error = "Invalid image URL or public_id"


class UploadNotConfigured(ApplicationError):
    error_code = 6501
    error = "Media host credentials are not configured"


class MediaHostError(ApplicationError):
    error_code = 6502
    error = "Media host request failed"
