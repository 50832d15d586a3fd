"""
Tests for the store adapters.

- RecipeRepository / ReviewRepository against an in-memory catalog store
- UserRepository against the in-memory users collection
- translation of driver errors into StoreError / ConflictError
"""

from unittest.mock import patch

import pytest
from pymongo.errors import PyMongoError
from sqlalchemy.exc import OperationalError

from app.exceptions import ConflictError, StoreError
from repositories import RecipeRepository, ReviewRepository
from test_fixtures import recipe_payload, review_payload


def test_recipe_repository_create_and_get(db_session):
    repo = RecipeRepository(db_session)

    first = repo.create(recipe_payload())
    second = repo.create(recipe_payload(title="Dal"))

    assert second > first
    assert repo.get_by_id(second).title == "Dal"
    assert repo.get_by_id(12345) is None
    assert repo.count() == 2


def test_recipe_repository_replace_and_delete(db_session):
    repo = RecipeRepository(db_session)
    recipe_id = repo.create(recipe_payload())

    assert repo.replace(recipe_id, recipe_payload("bob", title="New", steps="one step"))
    row = repo.get_by_id(recipe_id)
    assert (row.owner_id, row.title, row.steps) == ("bob", "New", "one step")

    assert repo.delete(recipe_id) is True
    assert repo.delete(recipe_id) is False
    assert repo.replace(recipe_id, recipe_payload()) is False


def test_get_page_orders_by_id(db_session):
    repo = RecipeRepository(db_session)
    for i in range(5):
        repo.create(recipe_payload(title=str(i)))

    assert [r.title for r in repo.get_page(offset=2, limit=2)] == ["2", "3"]
    assert repo.get_page(offset=10, limit=2) == []


def test_review_repository_recipe_queries(db_session):
    repo = ReviewRepository(db_session)
    repo.create(review_payload(3, "alice", title="a"))
    repo.create(review_payload(3, "bob", title="b"))

    assert repo.first_for_recipe(3).title == "a"
    assert [r.title for r in repo.list_for_recipe(3)] == ["a", "b"]
    assert repo.first_for_recipe(4) is None
    assert [r.owner_id for r in repo.list_by_owner("bob")] == ["bob"]


def test_catalog_errors_become_store_errors(db_session):
    repo = RecipeRepository(db_session)
    failure = OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    with patch.object(db_session, "execute", side_effect=failure):
        with pytest.raises(StoreError) as exc_info:
            repo.count()

    assert "server closed" not in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_user_repository_push_is_keyed_by_handle(user_repo, users_collection):
    user_repo.create_user("alice", "hash")
    user_repo.create_user("bob", "hash")

    user_repo.add_recipe("alice", 1)
    user_repo.add_recipe("alice", 2)
    user_repo.add_review("bob", 9)

    assert users_collection.raw("alice")["recipes"] == [1, 2]
    assert users_collection.raw("bob")["reviews"] == [9]
    assert users_collection.raw("bob")["recipes"] == []


def test_user_repository_lookup_projection(user_repo):
    user_repo.create_user("alice", "hash")

    assert user_repo.get_by_user_id("alice") == {"user_id": "alice", "recipes": [], "reviews": []}
    assert user_repo.get_by_user_id("alice", include_password=True)["password_hash"] == "hash"
    assert user_repo.get_by_user_id("nobody") is None
    assert user_repo.exists("alice") and not user_repo.exists("nobody")


def test_user_repository_errors(user_repo, users_collection):
    user_repo.create_user("alice", "hash")
    with pytest.raises(ConflictError):
        user_repo.create_user("alice", "hash")

    with patch.object(users_collection, "find_one", side_effect=PyMongoError("down")):
        with pytest.raises(StoreError):
            user_repo.get_by_user_id("alice")

    with patch.object(users_collection, "insert_one", side_effect=PyMongoError("down")):
        with pytest.raises(StoreError):
            user_repo.create_user("bob", "hash")


def test_rollback_failure_still_raises_store_error(db_session):
    repo = RecipeRepository(db_session)
    failure = OperationalError("INSERT", {}, Exception("connection lost"))

    with patch.object(db_session, "commit", side_effect=failure), patch.object(
        db_session, "rollback", side_effect=failure
    ):
        with pytest.raises(StoreError) as exc_info:
            repo.create(recipe_payload())

    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_user_repository_push_to_missing_user_fails(user_repo, users_collection):
    with pytest.raises(StoreError):
        user_repo.add_recipe("ghost", 1)

    assert users_collection.raw("ghost") is None
