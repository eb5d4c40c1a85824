"""Program model. Airline frequent flyer (loyalty) program."""

from sqlalchemy.orm import Mapped, mapped_column

from ffportal.models.base import BaseModel


class Program(BaseModel):
    __tablename__ = "programs"

    name: Mapped[str] = mapped_column(nullable=False)
    # logo reference, usually a media host URL
    asset_name: Mapped[str] = mapped_column(default="")
    # only enabled programs are offered to end users
    enabled: Mapped[bool] = mapped_column(default=True)
    archived: Mapped[bool] = mapped_column(default=False, index=True)
