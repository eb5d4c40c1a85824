"""Program service"""

from sqlalchemy.orm import Query

from ffportal.models.program import Program
from ffportal.schemas.program import ProgramFiltersSchema
from ffportal.services.base import BaseService
from ffportal.services.mixins.archivable_mixin import ArchivableServiceMixin


class ProgramService(ArchivableServiceMixin[Program], BaseService[Program]):
    model = Program
    default_filters = ProgramFiltersSchema

    def _apply_filters(
        self, query: Query[Program], filters: ProgramFiltersSchema
    ) -> Query[Program]:
        query = self._apply_archived_filter(query, filters.archived)
        if filters.name is not None:
            query = query.filter(self.model.name.ilike(f"%{filters.name}%"))
        if filters.enabled is not None:
            query = query.filter(self.model.enabled == filters.enabled)
        return query

    def _apply_ordering(self, query: Query[Program]) -> Query[Program]:
        return query.order_by(self.model.created_at.desc(), self.model.id.desc())
