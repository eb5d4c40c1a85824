"""DTO for TransferRatio"""

from pydantic import Field

from ffportal.schemas.base import BaseReadSchema, BaseSchema


class RatioProgramSchema(BaseSchema):
    """Program display fields, resolved on read"""

    id: int
    name: str
    asset_name: str
    enabled: bool


class RatioCreditCardSchema(BaseSchema):
    """CreditCard display fields, resolved on read"""

    id: int
    name: str
    bank_name: str


class TransferRatioSchema(BaseReadSchema):
    program_id: int
    program: RatioProgramSchema | None = None
    credit_card_id: int
    credit_card: RatioCreditCardSchema | None = None
    ratio: float
    archived: bool


class TransferRatioUpsertSchema(BaseSchema):
    program_id: int = Field(gt=0)
    credit_card_id: int = Field(gt=0)
    # strict: booleans and numeric strings are rejected, sign is checked by the service
    ratio: float = Field(strict=True, allow_inf_nan=False)


class TransferRatioUpdateSchema(BaseSchema):
    ratio: float = Field(strict=True, allow_inf_nan=False)
