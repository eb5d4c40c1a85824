"""Authentication usage errors"""

from ffportal.errors.base import ApplicationError


class AuthError(ApplicationError):
    http_code = 401
    error_code = 3000
    error = "Authentication failed"


class InvalidCredentials(AuthError):
    error_code = 3001
    error = "Invalid credentials"


class TokenInvalid(AuthError):
    error_code = 3002
    error = "Token is invalid"


class TokenMissing(AuthError):
    error_code = 3003
    error = "Token is missing"


class SecretKeyMissing(ApplicationError):
    error_code = 3500
    error = "Secret key is not configured"
