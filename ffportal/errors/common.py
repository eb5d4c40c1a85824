"""Common application errors, may be raised from several services"""

from ffportal.errors.base import ApplicationError


class ValidationError(ApplicationError):
    http_code = 400
    error_code = 1400
    error = "Validation failed"


class ConflictError(ApplicationError):
    http_code = 400
    error_code = 1409
    error = "Conflicting object already exists"


class NotFoundError(ApplicationError):
    http_code = 404
    error_code = 1404
    error = "Not found"
