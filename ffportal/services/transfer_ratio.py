"""Transfer ratio service. Keeps a single active ratio per program-card pair."""

import logging
import math

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ffportal.config import Config, get_config
from ffportal.errors.ratio import RatioAlreadyExists, RatioInvalid, RatioReferenceArchived
from ffportal.models.transfer_ratio import TransferRatio
from ffportal.services.base import BaseService
from ffportal.services.credit_card import CreditCardService
from ffportal.services.mixins.archivable_mixin import ArchivableServiceMixin
from ffportal.services.program import ProgramService
from ffportal.uow import get_uow

logger = logging.getLogger(__name__)


class TransferRatioService(
    ArchivableServiceMixin[TransferRatio], BaseService[TransferRatio]
):
    model = TransferRatio

    def __init__(
        self,
        db: Session = Depends(get_uow),
        program_service: ProgramService = Depends(),
        credit_card_service: CreditCardService = Depends(),
        config: Config = Depends(get_config),
    ):
        self.db = db
        self.program_service = program_service
        self.credit_card_service = credit_card_service
        self.config = config

    @staticmethod
    def _validate_ratio(ratio: float | None) -> float:
        if ratio is None:
            raise RatioInvalid("ratio is required")
        if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
            raise RatioInvalid(f"{ratio=}")
        if not math.isfinite(ratio) or ratio < 0:
            raise RatioInvalid(f"{ratio=}")
        return float(ratio)

    def _check_references(self, program_id: int, credit_card_id: int) -> None:
        """Both ends of a ratio must exist and be active."""
        program = self.program_service.get(program_id)
        if program.archived:
            raise RatioReferenceArchived(f"Program id={program_id}")
        credit_card = self.credit_card_service.get(credit_card_id)
        if credit_card.archived:
            raise RatioReferenceArchived(f"CreditCard id={credit_card_id}")

    def _find_active(self, program_id: int, credit_card_id: int) -> TransferRatio | None:
        return (
            self.db.query(self.model)
            .filter(
                self.model.program_id == program_id,
                self.model.credit_card_id == credit_card_id,
                self.model.archived.is_(False),
            )
            .first()
        )

    def _count_active(self, program_id: int, credit_card_id: int) -> int:
        return (
            self.db.query(self.model.id)
            .filter(
                self.model.program_id == program_id,
                self.model.credit_card_id == credit_card_id,
                self.model.archived.is_(False),
            )
            .count()
        )

    def upsert(
        self, program_id: int, credit_card_id: int, ratio: float | None
    ) -> TransferRatio:
        """
        Set the ratio of a program-card pair.

        The active ratio of the pair is updated in place if there is one,
        otherwise a new ratio is created. The unique index on active pairs is
        the final arbiter: an insert that loses a race against another request
        is reported as RatioAlreadyExists.
        """
        ratio = self._validate_ratio(ratio)
        if self.config.ratio_reference_check:
            self._check_references(program_id, credit_card_id)

        transfer_ratio = self._find_active(program_id, credit_card_id)
        if transfer_ratio is not None:
            transfer_ratio.ratio = ratio
            transfer_ratio.touch()
            self.db.flush()
            self.db.refresh(transfer_ratio)
            logger.info(
                "TransferRatio id=%s updated: program_id=%s credit_card_id=%s ratio=%s",
                transfer_ratio.id,
                program_id,
                credit_card_id,
                ratio,
            )
            return transfer_ratio

        transfer_ratio = self.model(
            program_id=program_id, credit_card_id=credit_card_id, ratio=ratio
        )
        self.db.add(transfer_ratio)
        try:
            self.db.flush()
        except IntegrityError as exc:
            self.db.rollback()
            if self._count_active(program_id, credit_card_id) > 0:
                logger.warning(
                    "TransferRatio conflict: program_id=%s credit_card_id=%s",
                    program_id,
                    credit_card_id,
                )
                raise RatioAlreadyExists(
                    f"program_id={program_id}, credit_card_id={credit_card_id}"
                ) from exc
            raise
        self.db.refresh(transfer_ratio)
        logger.info(
            "TransferRatio id=%s created: program_id=%s credit_card_id=%s ratio=%s",
            transfer_ratio.id,
            program_id,
            credit_card_id,
            ratio,
        )
        return transfer_ratio

    def update_ratio(self, ratio_id: int, ratio: float | None) -> TransferRatio:
        """Replace the value of a ratio by id, archived ratios included."""
        ratio = self._validate_ratio(ratio)
        transfer_ratio = self.get(ratio_id)
        transfer_ratio.ratio = ratio
        transfer_ratio.touch()
        self.db.flush()
        self.db.refresh(transfer_ratio)
        return transfer_ratio

    def list_all(self) -> list[TransferRatio]:
        """Active ratios, newest first"""
        return (
            self.db.query(self.model)
            .filter(self.model.archived.is_(False))
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def list_by_program(self, program_id: int) -> list[TransferRatio]:
        """Active ratios of one program, oldest first"""
        return (
            self.db.query(self.model)
            .filter(
                self.model.program_id == program_id,
                self.model.archived.is_(False),
            )
            .order_by(self.model.created_at.asc(), self.model.id.asc())
            .all()
        )
