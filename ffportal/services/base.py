"""Base service that incorporates business logic and CRUD operations."""

from typing import Generic, Type, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Query, Session

from ffportal.errors.common import NotFoundError
from ffportal.models.base import BaseModel
from ffportal.schemas.base import BaseFilterSchema, BaseUpdateSchema, PaginationSchema
from ffportal.uow import get_uow

M = TypeVar("M", bound=BaseModel)  # model
BFS = TypeVar("BFS", bound=BaseFilterSchema)
BUS = TypeVar("BUS", bound=BaseUpdateSchema)


class BaseService(Generic[M]):
    model: Type[M]
    # filters used when the caller passes none, e.g. to hide archived objects
    default_filters: Type[BaseFilterSchema] | None = None
    db: Session

    def __init__(self, db: Session = Depends(get_uow)):
        self.db = db

    def create(self, schema: BUS, overrides: dict = {}) -> M:
        data = schema.dump()
        data = {**data, **overrides}
        new_obj = self.model(**data)
        self.db.add(new_obj)
        self.db.flush()
        self.db.refresh(new_obj)
        return new_obj

    def get(self, obj_id: int) -> M:
        db_obj = self.db.query(self.model).filter(self.model.id == obj_id).first()
        if not db_obj:
            raise NotFoundError(f"{self.model.__name__} id={obj_id}")
        return db_obj

    def exists(self, obj_id: int) -> bool:
        return (
            self.db.query(self.model.id).filter(self.model.id == obj_id).first()
            is not None
        )

    def _apply_base_filters(self, query: Query[M], filters: BFS) -> Query[M]:
        """Common filters that are present for any database model"""
        if filters.created_after is not None:
            query = query.filter(self.model.created_at >= filters.created_after)
        if filters.created_before is not None:
            query = query.filter(self.model.created_at <= filters.created_before)
        return query

    def _apply_filters(self, query: Query[M], filters: BFS) -> Query[M]:
        """Filters for a particular model. To be overridden by child class."""
        return query

    def _apply_ordering(self, query: Query[M]) -> Query[M]:
        return query.order_by(self.model.id.desc())

    def get_all(
        self, filters: BFS | None = None, skip=0, limit=100
    ) -> PaginationSchema[M]:
        query = self.db.query(self.model)
        if filters is None and self.default_filters is not None:
            filters = self.default_filters()
        if filters:
            query = self._apply_base_filters(query, filters)
            query = self._apply_filters(query, filters)
        query = self._apply_ordering(query)
        total = query.count()
        items = query.offset(skip).limit(limit).all()
        return PaginationSchema[M](items=items, total=total, skip=skip, limit=limit)

    def update(self, obj_id: int, schema: BUS, overrides: dict = {}) -> M:
        obj = self.get(obj_id)
        data = schema.dump()
        data = {**data, **overrides}
        for key, value in data.items():
            setattr(obj, key, value)
        obj.touch()
        self.db.flush()
        self.db.refresh(obj)
        return obj
