"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    InvalidOwnerError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    ForbiddenError,
    StoreError,
    WriteStep,
)

__all__ = [
    "settings",
    "AppError",
    "ServiceValidationError",
    "InvalidOwnerError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "ForbiddenError",
    "StoreError",
    "WriteStep",
]
