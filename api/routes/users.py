"""User routes - registration, login and owner-scoped listings"""

from fastapi import APIRouter, Depends, status
import logging

from api.dependencies import (
    get_credential_service,
    get_current_principal,
    get_recipe_repository,
    get_review_repository,
)
from api.responses import created_response
from domain.mappers import CatalogMapper
from domain.schemas.catalog_schemas import CreatedResponse
from domain.schemas.user_schemas import (
    LoginRequest,
    TokenResponse,
    UserCreate,
    UserResponse,
)
from repositories import RecipeRepository, ReviewRepository
from services.credential_service import CredentialService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("catalog.api.users")


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user: UserCreate,
    credentials: CredentialService = Depends(get_credential_service),
):
    """Register a new user from JSON body"""
    user_id = credentials.register(user.user_id, user.password)
    return created_response(user_id, "user", f"/users/{user_id}")


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    """Exchange a handle and password for a bearer token."""
    return TokenResponse(token=credentials.login(body.user_id, body.password))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    principal: str = Depends(get_current_principal),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Get a user's profile; only the user themself may read it."""
    return CatalogMapper.user_to_response(credentials.get_user(principal, user_id))


@router.get("/{user_id}/recipes")
def get_user_recipes(
    user_id: str, recipes: RecipeRepository = Depends(get_recipe_repository)
):
    """Recipes owned by a user, read from the catalog store."""
    rows = recipes.list_by_owner(user_id)
    return {"recipes": [CatalogMapper.recipe_to_response(r) for r in rows]}


@router.get("/{user_id}/reviews")
def get_user_reviews(
    user_id: str, reviews: ReviewRepository = Depends(get_review_repository)
):
    """Reviews written by a user, read from the catalog store."""
    rows = reviews.list_by_owner(user_id)
    return {"reviews": [CatalogMapper.review_to_response(r) for r in rows]}
