"""API routes for TransferRatio manipulation"""

from fastapi import APIRouter, Depends

from ffportal.middlewares.token import get_user_from_token
from ffportal.models.user import User
from ffportal.schemas.base import MessageSchema
from ffportal.schemas.transfer_ratio import (
    TransferRatioSchema,
    TransferRatioUpdateSchema,
    TransferRatioUpsertSchema,
)
from ffportal.services.transfer_ratio import TransferRatioService

transfer_ratio_router = APIRouter(prefix="/ratios", tags=["Transfer ratios"])


@transfer_ratio_router.get("", response_model=list[TransferRatioSchema])
def read_ratios(
    transfer_ratio_service: TransferRatioService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return transfer_ratio_service.list_all()


@transfer_ratio_router.get("/{program_id}", response_model=list[TransferRatioSchema])
def read_program_ratios(
    program_id: int,
    transfer_ratio_service: TransferRatioService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return transfer_ratio_service.list_by_program(program_id)


@transfer_ratio_router.post("", response_model=TransferRatioSchema)
def upsert_ratio(
    transfer_ratio: TransferRatioUpsertSchema,
    transfer_ratio_service: TransferRatioService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    """Create the ratio of a program-card pair, or update it if the pair already has one."""
    return transfer_ratio_service.upsert(
        program_id=transfer_ratio.program_id,
        credit_card_id=transfer_ratio.credit_card_id,
        ratio=transfer_ratio.ratio,
    )


@transfer_ratio_router.put("/{ratio_id}", response_model=TransferRatioSchema)
def update_ratio(
    ratio_id: int,
    transfer_ratio_update: TransferRatioUpdateSchema,
    transfer_ratio_service: TransferRatioService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return transfer_ratio_service.update_ratio(ratio_id, transfer_ratio_update.ratio)


@transfer_ratio_router.delete("/{ratio_id}", response_model=MessageSchema)
def archive_ratio(
    ratio_id: int,
    transfer_ratio_service: TransferRatioService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    transfer_ratio_service.archive(ratio_id)
    return MessageSchema(message="Ratio archived successfully")
