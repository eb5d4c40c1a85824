"""API routes for login and token verification"""

from fastapi import APIRouter, Depends

from ffportal.middlewares.token import get_user_from_token
from ffportal.models.user import User
from ffportal.schemas.token import (
    LoginRequestSchema,
    LoginResponseSchema,
    UserSchema,
    VerifyResponseSchema,
)
from ffportal.services.token import TokenService

auth_router = APIRouter(tags=["Auth"])


@auth_router.post("/login", response_model=LoginResponseSchema)
def login(
    credentials: LoginRequestSchema,
    token_service: TokenService = Depends(),
):
    """Does NOT require authentication, exchanges credentials for a bearer token."""
    return token_service.login(credentials.username, credentials.password)


@auth_router.get("/verify", response_model=VerifyResponseSchema)
def verify(
    actor: User = Depends(get_user_from_token),
):
    return VerifyResponseSchema(user=UserSchema.model_validate(actor))
