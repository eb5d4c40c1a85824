"""API routes for CreditCard manipulation"""

from fastapi import APIRouter, Depends, status

from ffportal.middlewares.token import get_user_from_token
from ffportal.models.user import User
from ffportal.schemas.base import MessageSchema, PaginationSchema
from ffportal.schemas.credit_card import (
    CreditCardCreateSchema,
    CreditCardFiltersSchema,
    CreditCardSchema,
    CreditCardUpdateSchema,
)
from ffportal.services.credit_card import CreditCardService

credit_card_router = APIRouter(prefix="/credit-cards", tags=["Credit cards"])


@credit_card_router.post(
    "", response_model=CreditCardSchema, status_code=status.HTTP_201_CREATED
)
def create_credit_card(
    credit_card: CreditCardCreateSchema,
    credit_card_service: CreditCardService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return credit_card_service.create(credit_card)


@credit_card_router.get("", response_model=PaginationSchema[CreditCardSchema])
def read_credit_cards(
    filters: CreditCardFiltersSchema = Depends(),
    skip: int = 0,
    limit: int = 100,
    credit_card_service: CreditCardService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return credit_card_service.get_all(filters, skip, limit)


@credit_card_router.get("/{credit_card_id}", response_model=CreditCardSchema)
def read_credit_card(
    credit_card_id: int,
    credit_card_service: CreditCardService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return credit_card_service.get(credit_card_id)


@credit_card_router.put("/{credit_card_id}", response_model=CreditCardSchema)
def update_credit_card(
    credit_card_id: int,
    credit_card_update: CreditCardUpdateSchema,
    credit_card_service: CreditCardService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return credit_card_service.update(credit_card_id, credit_card_update)


@credit_card_router.delete("/{credit_card_id}", response_model=MessageSchema)
def archive_credit_card(
    credit_card_id: int,
    credit_card_service: CreditCardService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    credit_card_service.archive(credit_card_id)
    return MessageSchema(message="Credit card archived successfully")
