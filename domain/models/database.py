"""
Catalog store database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("catalog.database")

# Create SQLAlchemy Base
Base = declarative_base()

# Create engine
engine = create_engine(settings.postgres_db_url, echo=settings.db_echo, future=True)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database():
    """Initialize catalog store schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Catalog tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection).

    The session is closed on success and on failure alike.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
