"""DTO for CreditCard"""

from pydantic import Field

from ffportal.schemas.base import BaseFilterSchema, BaseReadSchema, BaseUpdateSchema


class CreditCardSchema(BaseReadSchema):
    name: str
    bank_name: str
    archived: bool


class CreditCardCreateSchema(BaseUpdateSchema):
    name: str = Field(min_length=1)
    bank_name: str = Field(min_length=1)


class CreditCardUpdateSchema(BaseUpdateSchema):
    name: str | None = Field(default=None, min_length=1)
    bank_name: str | None = Field(default=None, min_length=1)
    archived: bool | None = None


class CreditCardFiltersSchema(BaseFilterSchema):
    name: str | None = None
    bank_name: str | None = None
    archived: bool = False
