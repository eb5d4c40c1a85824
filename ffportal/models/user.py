"""User model. Dashboard administrator account."""

from sqlalchemy.orm import Mapped, mapped_column

from ffportal.models.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(unique=True, nullable=False)
    # bcrypt hash, salt included
    password_hash: Mapped[str] = mapped_column(nullable=False)
