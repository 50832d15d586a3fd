"""
Recipe Repository - Catalog store access for recipe rows
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)
