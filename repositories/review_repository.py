"""
Review Repository - Catalog store access for review rows
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for review data access"""

    def __init__(self, db: Session):
        super().__init__(db, Review)

    def list_for_recipe(self, recipe_id: int) -> List[Review]:
        """All reviews of a recipe, ordered by id"""
        try:
            stmt = (
                select(Review).where(Review.recipe_id == recipe_id).order_by(Review.id)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise self._fail("list_for_recipe", e) from e

    def first_for_recipe(self, recipe_id: int) -> Optional[Review]:
        """The lowest-id review of a recipe, or None"""
        try:
            stmt = (
                select(Review)
                .where(Review.recipe_id == recipe_id)
                .order_by(Review.id)
                .limit(1)
            )
            return self.db.scalars(stmt).first()
        except SQLAlchemyError as e:
            raise self._fail("first_for_recipe", e) from e
