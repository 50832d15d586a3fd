"""MongoDB adapter owning the identity store connection.
"""

import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from app.config import settings

logger = logging.getLogger("catalog.mongo")

USERS_COLLECTION = "users"

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str) -> Database:
    """Open the client, verify it with a ping and ensure the user_id index."""
    global _client, _db
    client = MongoClient(uri)
    try:
        client.admin.command("ping")
        db = client[db_name]
        db[USERS_COLLECTION].create_index(
            [("user_id", ASCENDING)], unique=True, name="user_id_unique"
        )
    except Exception:
        client.close()
        raise
    _client, _db = client, db
    logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    return db


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    finally:
        _client = None
        _db = None


def get_db() -> Database:
    """Return the connected database, lazily creating a client if needed.

    MongoClient connects in the background, so a store that is down surfaces
    as a PyMongoError on the first operation rather than here.
    """
    global _client, _db
    if _db is not None:
        return _db
    _client = MongoClient(settings.mongo_uri)
    _db = _client[settings.mongo_db_name]
    return _db


def users_collection() -> Collection:
    return get_db()[USERS_COLLECTION]
