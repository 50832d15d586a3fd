"""
Catalog domain mappers.
Handles transformation between stored rows/documents and response DTOs.
"""

from typing import Any, Dict

from domain.models import Recipe, Review
from domain.schemas.catalog_schemas import RecipeResponse, ReviewResponse
from domain.schemas.user_schemas import UserResponse


class CatalogMapper:
    """Mapper for recipe, review and user transformations."""

    @staticmethod
    def recipe_to_response(recipe: Recipe) -> RecipeResponse:
        return RecipeResponse.model_validate(recipe)

    @staticmethod
    def review_to_response(review: Review) -> ReviewResponse:
        return ReviewResponse.model_validate(review)

    @staticmethod
    def user_to_response(document: Dict[str, Any]) -> UserResponse:
        """
        Convert an identity store user document to UserResponse.

        Args:
            document: user document as returned by a normal (hash-free) lookup

        Returns:
            UserResponse with the back-reference arrays
        """
        return UserResponse(
            user_id=document["user_id"],
            recipes=list(document.get("recipes") or []),
            reviews=list(document.get("reviews") or []),
        )
