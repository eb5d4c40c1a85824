"""DTO for Program"""

from pydantic import Field

from ffportal.schemas.base import BaseFilterSchema, BaseReadSchema, BaseUpdateSchema


class ProgramSchema(BaseReadSchema):
    name: str
    asset_name: str
    enabled: bool
    archived: bool


class ProgramCreateSchema(BaseUpdateSchema):
    name: str = Field(min_length=1)
    asset_name: str = ""
    enabled: bool = True


class ProgramUpdateSchema(BaseUpdateSchema):
    name: str | None = Field(default=None, min_length=1)
    asset_name: str | None = None
    enabled: bool | None = None
    # archiving is reversible by direct update
    archived: bool | None = None


class ProgramFiltersSchema(BaseFilterSchema):
    name: str | None = None
    enabled: bool | None = None
    archived: bool = False
