"""
Review routes - paginated listing and CRUD over catalog store review rows.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from api.dependencies import get_review_repository, get_write_orchestrator
from api.responses import created_response, paginated_response
from app.exceptions import NotFoundError
from domain.mappers import CatalogMapper
from domain.schemas.catalog_schemas import CreatedResponse, LinksResponse, ReviewCreate
from repositories import ReviewRepository
from services.pagination import PaginationService, parse_page_number
from services.write_orchestrator import WriteOrchestrator

router = APIRouter(prefix="/reviews", tags=["Reviews"])
logger = logging.getLogger("catalog.api.reviews")


@router.get("")
def list_reviews(
    page: Optional[str] = Query(default=None, description="1-based page number"),
    reviews: ReviewRepository = Depends(get_review_repository),
):
    """List reviews ordered by id, ten per page."""
    window, rows = PaginationService(reviews).fetch(parse_page_number(page))
    items = [CatalogMapper.review_to_response(r).model_dump() for r in rows]
    return paginated_response(items, window, "/reviews")


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    review: ReviewCreate,
    orchestrator: WriteOrchestrator = Depends(get_write_orchestrator),
):
    """Create a review for an existing owner."""
    review_id = orchestrator.create_review(review)
    return created_response(review_id, "review", f"/reviews/{review_id}")


@router.get("/{recipe_id}")
def get_review_for_recipe(
    recipe_id: int, reviews: ReviewRepository = Depends(get_review_repository)
):
    """First review (lowest id) written for the given recipe."""
    review = reviews.first_for_recipe(recipe_id)
    if review is None:
        raise NotFoundError(f"No review found for recipe {recipe_id}")
    return CatalogMapper.review_to_response(review)


@router.put("/{review_id}", response_model=LinksResponse)
def update_review(
    review_id: int,
    review: ReviewCreate,
    reviews: ReviewRepository = Depends(get_review_repository),
):
    """Replace every field of a review."""
    if not reviews.replace(review_id, review.model_dump()):
        raise NotFoundError(f"Review {review_id} not found")
    return {"links": {"review": f"/reviews/{review_id}"}}


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: int, reviews: ReviewRepository = Depends(get_review_repository)
):
    if not reviews.delete(review_id):
        raise NotFoundError(f"Review {review_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
