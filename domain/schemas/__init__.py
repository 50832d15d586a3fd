"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.catalog_schemas import (
    RecipeCreate,
    RecipeResponse,
    ReviewCreate,
    ReviewResponse,
    CreatedResponse,
    LinksResponse,
)
from domain.schemas.user_schemas import (
    UserCreate,
    LoginRequest,
    TokenResponse,
    UserResponse,
)

__all__ = [
    # Catalog schemas
    "RecipeCreate",
    "RecipeResponse",
    "ReviewCreate",
    "ReviewResponse",
    "CreatedResponse",
    "LinksResponse",
    # User schemas
    "UserCreate",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
]
