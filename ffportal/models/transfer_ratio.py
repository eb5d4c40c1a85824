"""TransferRatio model. Exchange rate of card reward points into program miles."""

from sqlalchemy import CheckConstraint, Float, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ffportal.models.base import BaseModel
from ffportal.models.credit_card import CreditCard
from ffportal.models.program import Program


class TransferRatio(BaseModel):
    __tablename__ = "transfer_ratios"
    __table_args__ = (
        CheckConstraint("ratio >= 0", name="ck_transfer_ratios_ratio_non_negative"),
        # at most one active ratio per program-card pair, archived history is kept
        Index(
            "uq_transfer_ratios_active_pair",
            "program_id",
            "credit_card_id",
            unique=True,
            sqlite_where=text("NOT archived"),
            postgresql_where=text("NOT archived"),
        ),
    )

    # no database foreign keys: references are checked by the service,
    # and only when Config.ratio_reference_check is on
    program_id: Mapped[int] = mapped_column(nullable=False)
    program: Mapped[Program | None] = relationship(
        primaryjoin="foreign(TransferRatio.program_id) == Program.id",
        lazy="joined",
        viewonly=True,
    )

    credit_card_id: Mapped[int] = mapped_column(nullable=False)
    credit_card: Mapped[CreditCard | None] = relationship(
        primaryjoin="foreign(TransferRatio.credit_card_id) == CreditCard.id",
        lazy="joined",
        viewonly=True,
    )

    # units of program currency per unit of card reward currency, 0 means disabled
    ratio: Mapped[float] = mapped_column(Float, nullable=False)
    archived: Mapped[bool] = mapped_column(default=False)
