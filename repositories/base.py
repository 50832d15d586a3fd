"""
Base repository interface for catalog store access.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from typing import Any, Dict, Generic, TypeVar, Optional, List, Type
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StoreError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("catalog.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations on rows keyed by an
    integer ``id``. Driver errors are rolled back and re-raised as StoreError.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _fail(self, operation: str, exc: Exception) -> StoreError:
        try:
            self.db.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(
                f"catalog_store_rollback_failed table={self.model.__tablename__} "
                f"operation={operation} error={rollback_exc}"
            )
        logger.error(
            f"catalog_store_failed table={self.model.__tablename__} "
            f"operation={operation} error={exc}"
        )
        return StoreError()

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by ID, or None"""
        try:
            return self.db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._fail("get", e) from e

    def count(self) -> int:
        """Total number of rows"""
        try:
            return self.db.execute(
                select(func.count()).select_from(self.model)
            ).scalar_one()
        except SQLAlchemyError as e:
            raise self._fail("count", e) from e

    def get_page(self, offset: int, limit: int) -> List[ModelType]:
        """Rows ordered by id ascending, windowed by offset/limit"""
        try:
            stmt = (
                select(self.model).order_by(self.model.id).offset(offset).limit(limit)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise self._fail("page", e) from e

    def list_by_owner(self, owner_id: str) -> List[ModelType]:
        """All rows owned by a user, ordered by id"""
        try:
            stmt = (
                select(self.model)
                .where(self.model.owner_id == owner_id)
                .order_by(self.model.id)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise self._fail("list_by_owner", e) from e

    def create(self, values: Dict[str, Any]) -> int:
        """Insert a new row and return its store-generated id"""
        entity = self.model(**values)
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        except SQLAlchemyError as e:
            raise self._fail("insert", e) from e
        return entity.id

    def replace(self, entity_id: int, values: Dict[str, Any]) -> bool:
        """Replace every mutable field of an existing row. False if absent."""
        try:
            entity = self.db.get(self.model, entity_id)
            if entity is None:
                return False
            for key, value in values.items():
                setattr(entity, key, value)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e

    def delete(self, entity_id: int) -> bool:
        """Hard-delete a row by ID. False if absent."""
        try:
            entity = self.db.get(self.model, entity_id)
            if entity is None:
                return False
            self.db.delete(entity)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
