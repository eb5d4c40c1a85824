"""Mixin for soft-deletable models, for example: Programs, CreditCards, TransferRatios"""

import logging
from typing import Generic, TypeVar

from sqlalchemy.orm import Query, Session

from ffportal.models.base import BaseModel
from ffportal.services.base import BaseService

_M = TypeVar("_M", bound=BaseModel)

logger = logging.getLogger(__name__)


class ArchivableServiceMixin(BaseService[_M], Generic[_M]):
    model: type[_M]
    db: Session

    def archive(self, obj_id: int) -> _M:
        """Soft-delete an object. Archiving twice is allowed and re-stamps it."""
        db_obj = self.get(obj_id)
        db_obj.archived = True  # type: ignore
        db_obj.touch()
        self.db.flush()
        self.db.refresh(db_obj)
        logger.info("%s id=%s archived", self.model.__name__, obj_id)
        return db_obj

    def _apply_archived_filter(self, query: Query[_M], archived: bool) -> Query[_M]:
        return query.filter(self.model.archived == archived)  # type: ignore
