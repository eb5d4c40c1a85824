"""CreditCard service"""

from sqlalchemy.orm import Query

from ffportal.models.credit_card import CreditCard
from ffportal.schemas.credit_card import CreditCardFiltersSchema
from ffportal.services.base import BaseService
from ffportal.services.mixins.archivable_mixin import ArchivableServiceMixin


class CreditCardService(ArchivableServiceMixin[CreditCard], BaseService[CreditCard]):
    model = CreditCard
    default_filters = CreditCardFiltersSchema

    def _apply_filters(
        self, query: Query[CreditCard], filters: CreditCardFiltersSchema
    ) -> Query[CreditCard]:
        query = self._apply_archived_filter(query, filters.archived)
        if filters.name is not None:
            query = query.filter(self.model.name.ilike(f"%{filters.name}%"))
        if filters.bank_name is not None:
            query = query.filter(self.model.bank_name.ilike(f"%{filters.bank_name}%"))
        return query

    def _apply_ordering(self, query: Query[CreditCard]) -> Query[CreditCard]:
        return query.order_by(self.model.bank_name, self.model.name, self.model.id)
