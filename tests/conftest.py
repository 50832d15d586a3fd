"""
Pytest configuration and shared setup.
This file ensures the project root is in sys.path for imports and seeds the
settings environment before any application module is imported.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("TOKEN_EXPIRE_MINUTES", "30")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
# The real catalog engine is never used by tests; avoid needing a Postgres driver
os.environ.setdefault("POSTGRES_DB_URL", "sqlite://")

# Shared fixtures; imported here so every test module can request them
from test_fixtures import (  # noqa: E402,F401
    client,
    credential_service,
    db_session,
    orchestrator,
    user_repo,
    users_collection,
)
