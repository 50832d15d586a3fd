"""
API dependencies for dependency injection.

Every component is built here from explicit store handles; tests swap the
handles through ``app.dependency_overrides[get_db]`` and
``app.dependency_overrides[get_users_collection]``.
"""

from typing import Generator, Optional
from fastapi import Depends, Header
from pymongo.collection import Collection
from sqlalchemy.orm import Session

from adapters import mongo_adapter
from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from repositories import RecipeRepository, ReviewRepository, UserRepository
from services import CredentialService, WriteOrchestrator


def get_db() -> Generator[Session, None, None]:
    """
    Catalog store session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_users_collection() -> Collection:
    """Identity store users collection"""
    return mongo_adapter.users_collection()


def get_recipe_repository(db: Session = Depends(get_db)) -> RecipeRepository:
    return RecipeRepository(db)


def get_review_repository(db: Session = Depends(get_db)) -> ReviewRepository:
    return ReviewRepository(db)


def get_user_repository(
    collection: Collection = Depends(get_users_collection),
) -> UserRepository:
    return UserRepository(collection)


def get_write_orchestrator(
    users: UserRepository = Depends(get_user_repository),
    recipes: RecipeRepository = Depends(get_recipe_repository),
    reviews: ReviewRepository = Depends(get_review_repository),
) -> WriteOrchestrator:
    return WriteOrchestrator(users=users, recipes=recipes, reviews=reviews)


def get_credential_service(
    users: UserRepository = Depends(get_user_repository),
) -> CredentialService:
    return CredentialService(
        users,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        token_expire_minutes=settings.token_expire_minutes,
        hash_rounds=settings.password_hash_rounds,
    )


def _extract_bearer_token(authorization: Optional[str]) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise UnauthorizedError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise UnauthorizedError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise UnauthorizedError("Authorization must be: Bearer <token>.")
    return token


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


def get_current_principal(
    token: str = Depends(get_bearer_token),
    credentials: CredentialService = Depends(get_credential_service),
) -> str:
    """Authenticated login handle; 401 on any token problem."""
    return credentials.authenticate(token)
