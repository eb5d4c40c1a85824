"""Base for all ORM models"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    # do not create separate table for this class
    __abstract__ = True

    # everything should have an id and timestamps
    id: Mapped[int] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )

    def touch(self) -> None:
        """Mark the object as modified. Called by every mutating service operation."""
        self.modified_at = datetime.now()

    def __repr__(self):
        """Automatically generate __repr__ of a database object from its columns"""
        model_name = self.__class__.__name__
        attr_strs = []
        for attr, column in inspect(self.__class__).columns.items():
            value = getattr(self, attr)
            attr_strs.append(f"{attr}={value!r}")
        attr_str = ", ".join(attr_strs)
        return f"<{model_name}({attr_str})>"
