"""
User Repository - Identity store (MongoDB) access for user documents
"""

import logging
from typing import Any, Dict, Optional

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.exceptions import ConflictError, StoreError

logger = logging.getLogger("catalog.users")

# Normal lookups never return the hash or the store's own _id
PUBLIC_PROJECTION = {"_id": 0, "password_hash": 0}
PRIVATE_PROJECTION = {"_id": 0}


class UserRepository:
    """
    Repository for user documents keyed by the natural login handle.

    ``recipes`` and ``reviews`` inside each document are a denormalized index
    of owned catalog rows, appended with atomic ``$push`` updates.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def get_by_user_id(
        self, user_id: str, include_password: bool = False
    ) -> Optional[Dict[str, Any]]:
        """Point lookup by login handle.

        Args:
            user_id: login handle
            include_password: also return ``password_hash``; only the login
                path asks for this

        Returns:
            User document or None if not found
        """
        projection = PRIVATE_PROJECTION if include_password else PUBLIC_PROJECTION
        try:
            return self.collection.find_one({"user_id": user_id}, projection)
        except PyMongoError as e:
            logger.error(f"identity_store_failed operation=find user_id={user_id} error={e}")
            raise StoreError() from e

    def exists(self, user_id: str) -> bool:
        return self.get_by_user_id(user_id) is not None

    def create_user(self, user_id: str, password_hash: str) -> str:
        """Insert a new user document with empty back-reference arrays"""
        document = {
            "user_id": user_id,
            "password_hash": password_hash,
            "recipes": [],
            "reviews": [],
        }
        try:
            self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise ConflictError(f"User {user_id} already exists") from e
        except PyMongoError as e:
            logger.error(f"identity_store_failed operation=insert user_id={user_id} error={e}")
            raise StoreError() from e
        return user_id

    def add_recipe(self, user_id: str, recipe_id: int) -> None:
        self._push(user_id, "recipes", recipe_id)

    def add_review(self, user_id: str, review_id: int) -> None:
        self._push(user_id, "reviews", review_id)

    def _push(self, user_id: str, field: str, entity_id: int) -> None:
        try:
            result = self.collection.update_one(
                {"user_id": user_id}, {"$push": {field: entity_id}}
            )
        except PyMongoError as e:
            logger.error(
                f"identity_store_failed operation=push field={field} "
                f"user_id={user_id} entity_id={entity_id} error={e}"
            )
            raise StoreError() from e
        if result.matched_count == 0:
            logger.error(
                f"identity_store_failed operation=push field={field} "
                f"user_id={user_id} entity_id={entity_id} error=no_matching_user"
            )
            raise StoreError()
