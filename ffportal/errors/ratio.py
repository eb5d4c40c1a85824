"""Transfer ratio usage errors"""

from ffportal.errors.common import ConflictError, ValidationError


class RatioInvalid(ValidationError):
    error_code = 5001
    error = "Ratio must be a positive number"


class RatioAlreadyExists(ConflictError):
    error_code = 5002
    error = "Ratio already exists for this program-card combination"


class RatioReferenceArchived(ValidationError):
    error_code = 5003
    error = "Ratio can not reference an archived object"
