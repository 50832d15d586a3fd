"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.recipe_repository import RecipeRepository
from repositories.review_repository import ReviewRepository
from repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "ReviewRepository",
    "UserRepository",
]
