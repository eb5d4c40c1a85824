"""Token service. Checks user credentials, issues and verifies signed tokens."""

import logging
import time
from datetime import timedelta

import jwt
from fastapi import Depends
from sqlalchemy.orm import Session

from ffportal.config import Config, get_config
from ffportal.errors.common import NotFoundError
from ffportal.errors.token import InvalidCredentials, SecretKeyMissing, TokenInvalid
from ffportal.models.user import User
from ffportal.passwords import verify_password
from ffportal.schemas.token import LoginResponseSchema, UserSchema
from ffportal.services.user import UserService
from ffportal.uow import get_uow

logger = logging.getLogger(__name__)


class TokenService:
    ALGORITHM = "HS256"

    def __init__(
        self,
        db: Session = Depends(get_uow),
        user_service: UserService = Depends(),
        config: Config = Depends(get_config),
    ):
        self.db = db
        self.user_service = user_service
        self.config = config

    @property
    def _secret_key(self) -> str:
        if not self.config.secret_key:
            raise SecretKeyMissing
        return self.config.secret_key

    def _generate_new_token(self, user: User) -> str:
        """Generate a new signed token with user id, name and expiry."""
        now = int(time.time())
        data = {
            "sub": str(user.id),
            "username": user.username,
            "iat": now,
            "exp": now
            + int(timedelta(days=self.config.token_lifetime_days).total_seconds()),
        }
        return jwt.encode(data, self._secret_key, algorithm=self.ALGORITHM)

    def decode_user_id_from_token(self, token: str) -> int:
        """Check signature and expiry, return user id without DB lookup."""
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.ALGORITHM])
            return int(payload["sub"])
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
            raise TokenInvalid

    def get_user_from_token(self, token: str) -> User:
        """Verify the token, then load the user it was issued to."""
        user_id = self.decode_user_id_from_token(token)
        try:
            return self.user_service.get(user_id)
        except NotFoundError:
            # user was removed after the token had been issued
            raise TokenInvalid

    def login(self, username: str, password: str) -> LoginResponseSchema:
        try:
            user = self.user_service.get_by_username(username)
        except NotFoundError:
            logger.info("Login failed: unknown user %r", username)
            raise InvalidCredentials
        if not verify_password(password, user.password_hash):
            logger.info("Login failed: wrong password for user %r", username)
            raise InvalidCredentials
        token = self._generate_new_token(user)
        logger.info("User id=%s logged in", user.id)
        return LoginResponseSchema(token=token, user=UserSchema.model_validate(user))
