"""
Recipe routes - paginated listing and CRUD over catalog store recipe rows.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from api.dependencies import (
    get_recipe_repository,
    get_review_repository,
    get_write_orchestrator,
)
from api.responses import created_response, paginated_response
from app.exceptions import NotFoundError
from domain.mappers import CatalogMapper
from domain.schemas.catalog_schemas import CreatedResponse, LinksResponse, RecipeCreate
from repositories import RecipeRepository, ReviewRepository
from services.pagination import PaginationService, parse_page_number
from services.write_orchestrator import WriteOrchestrator

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("catalog.api.recipes")


@router.get("")
def list_recipes(
    page: Optional[str] = Query(default=None, description="1-based page number"),
    recipes: RecipeRepository = Depends(get_recipe_repository),
):
    """List recipes ordered by id, ten per page."""
    window, rows = PaginationService(recipes).fetch(parse_page_number(page))
    items = [CatalogMapper.recipe_to_response(r).model_dump() for r in rows]
    return paginated_response(items, window, "/recipes")


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe: RecipeCreate,
    orchestrator: WriteOrchestrator = Depends(get_write_orchestrator),
):
    """Create a recipe for an existing owner."""
    recipe_id = orchestrator.create_recipe(recipe)
    return created_response(recipe_id, "recipe", f"/recipes/{recipe_id}")


@router.get("/{recipe_id}")
def get_recipe(
    recipe_id: int, recipes: RecipeRepository = Depends(get_recipe_repository)
):
    recipe = recipes.get_by_id(recipe_id)
    if recipe is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return CatalogMapper.recipe_to_response(recipe)


@router.put("/{recipe_id}", response_model=LinksResponse)
def update_recipe(
    recipe_id: int,
    recipe: RecipeCreate,
    recipes: RecipeRepository = Depends(get_recipe_repository),
):
    """Replace every field of a recipe."""
    if not recipes.replace(recipe_id, recipe.model_dump()):
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return {"links": {"recipe": f"/recipes/{recipe_id}"}}


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int, recipes: RecipeRepository = Depends(get_recipe_repository)
):
    # Owner back-references are left in place
    if not recipes.delete(recipe_id):
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{recipe_id}/reviews")
def list_recipe_reviews(
    recipe_id: int, reviews: ReviewRepository = Depends(get_review_repository)
):
    """All reviews of one recipe, unpaginated."""
    rows = reviews.list_for_recipe(recipe_id)
    return {"reviews": [CatalogMapper.review_to_response(r) for r in rows]}
