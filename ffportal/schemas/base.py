"""Base DTOs for API endpoints"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # needed for ORM
    model_config = ConfigDict(
        from_attributes=True,
        arbitrary_types_allowed=True,
        str_strip_whitespace=True,
    )

    # default dump options to deserialize pydantic models
    def dump(self):
        return self.model_dump(exclude_none=True)


class BaseReadSchema(BaseSchema):
    id: int
    created_at: datetime
    modified_at: datetime


class BaseUpdateSchema(BaseSchema):
    pass


class BaseFilterSchema(BaseSchema):
    created_before: datetime | None = None
    created_after: datetime | None = None


class MessageSchema(BaseSchema):
    message: str


M = TypeVar("M")


class PaginationSchema(BaseSchema, Generic[M]):
    items: list[M]
    total: int
    skip: int
    limit: int
