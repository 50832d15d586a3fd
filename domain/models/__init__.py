"""
Domain models package - SQLAlchemy ORM models for the catalog store.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.catalog import Recipe, Review

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Catalog models
    "Recipe",
    "Review",
]
