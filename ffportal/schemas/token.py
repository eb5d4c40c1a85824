"""DTO for authentication"""

from pydantic import Field

from ffportal.schemas.base import BaseSchema


class LoginRequestSchema(BaseSchema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserSchema(BaseSchema):
    id: int
    username: str


class LoginResponseSchema(BaseSchema):
    token: str
    user: UserSchema


class VerifyResponseSchema(BaseSchema):
    user: UserSchema
