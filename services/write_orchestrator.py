"""
Write orchestrator - creates recipes and reviews across both stores.

Each create runs three steps in order and stops at the first failure:

1. look up the owner in the identity store (absent -> InvalidOwnerError)
2. insert the row into the catalog store
3. append the new id to the owner's back-reference array

Nothing is retried or rolled back. If step 3 fails the row stays in the
catalog store and the caller still gets a StoreError carrying
``step=BACKREF_APPEND`` and the orphaned ``entity_id``.
"""

import logging
from typing import Any, Callable, Dict

from app.exceptions import InvalidOwnerError, StoreError, WriteStep
from domain.schemas.catalog_schemas import RecipeCreate, ReviewCreate
from repositories import RecipeRepository, ReviewRepository, UserRepository
from repositories.base import BaseRepository

logger = logging.getLogger("catalog.orchestrator")


class WriteOrchestrator:
    """Sequences identity validation, catalog insert and back-reference update"""

    def __init__(
        self,
        users: UserRepository,
        recipes: RecipeRepository,
        reviews: ReviewRepository,
    ):
        self.users = users
        self.recipes = recipes
        self.reviews = reviews

    def create_recipe(self, payload: RecipeCreate) -> int:
        """Create a recipe owned by ``payload.owner_id`` and return its id."""
        return self._create_owned(
            kind="recipe",
            values=payload.model_dump(),
            catalog=self.recipes,
            append=self.users.add_recipe,
        )

    def create_review(self, payload: ReviewCreate) -> int:
        """Create a review owned by ``payload.owner_id`` and return its id."""
        return self._create_owned(
            kind="review",
            values=payload.model_dump(),
            catalog=self.reviews,
            append=self.users.add_review,
        )

    def _create_owned(
        self,
        kind: str,
        values: Dict[str, Any],
        catalog: BaseRepository,
        append: Callable[[str, int], None],
    ) -> int:
        owner_id = values["owner_id"]

        # 1. Owner must resolve
        try:
            owner_exists = self.users.exists(owner_id)
        except StoreError as e:
            raise StoreError(
                f"Error inserting {kind} into DB. Please try again later.",
                step=WriteStep.OWNER_LOOKUP,
            ) from e
        if not owner_exists:
            logger.warning(f"{kind}_create_rejected owner_id={owner_id} reason=invalid_owner")
            raise InvalidOwnerError(owner_id)

        # 2. Catalog row
        try:
            entity_id = catalog.create(values)
        except StoreError as e:
            raise StoreError(
                f"Error inserting {kind} into DB. Please try again later.",
                step=WriteStep.CATALOG_INSERT,
            ) from e

        # 3. Back-reference; the row is durable from here on
        try:
            append(owner_id, entity_id)
        except StoreError as e:
            logger.error(
                f"{kind}_backref_missing {kind}_id={entity_id} owner_id={owner_id} "
                f"step={WriteStep.BACKREF_APPEND.value}"
            )
            raise StoreError(
                f"Error inserting {kind} into DB. Please try again later.",
                step=WriteStep.BACKREF_APPEND,
                entity_id=entity_id,
            ) from e

        logger.info(f"{kind}_created {kind}_id={entity_id} owner_id={owner_id}")
        return entity_id
