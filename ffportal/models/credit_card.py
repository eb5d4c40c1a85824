"""CreditCard model. Bank card product, source of reward points."""

from sqlalchemy.orm import Mapped, mapped_column

from ffportal.models.base import BaseModel


class CreditCard(BaseModel):
    __tablename__ = "credit_cards"

    name: Mapped[str] = mapped_column(nullable=False)
    bank_name: Mapped[str] = mapped_column(nullable=False)
    archived: Mapped[bool] = mapped_column(default=False, index=True)
