"""Middleware for User authentication, checks for a valid bearer token in request headers"""

from fastapi import Depends, Header

from ffportal.errors.token import TokenInvalid, TokenMissing
from ffportal.models.user import User
from ffportal.services.token import TokenService


def get_user_from_token(
    authorization: str | None = Header(
        default=None,
        description="Bearer token issued by POST /login",
    ),
    token_service: TokenService = Depends(),
) -> User:
    if not authorization:
        raise TokenMissing
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise TokenInvalid
    return token_service.get_user_from_token(token.strip())
