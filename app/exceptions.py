from enum import Enum
from typing import Any, List, Mapping, Optional


class WriteStep(str, Enum):
    """Steps of an orchestrated create, in execution order."""

    OWNER_LOOKUP = "owner_lookup"
    CATALOG_INSERT = "catalog_insert"
    BACKREF_APPEND = "backref_append"


class AppError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message, safe to return to clients
        details: optional structured context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500

    def __init__(self, message: str = "Error", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    ``details`` is a list of ``{"field": ..., "message": ...}`` entries.
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[List[Mapping[str, Any]]] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code or "VALIDATION_ERROR")


class InvalidOwnerError(ServiceValidationError):
    """Raised when an owner reference does not resolve to an existing user."""

    def __init__(self, owner_id: str):
        super().__init__(
            f"Invalid owner ID: {owner_id}.",
            details=[{"field": "owner_id", "message": "owner does not exist"}],
            code="INVALID_OWNER",
        )
        self.owner_id = owner_id


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code or "NOT_FOUND")


class ConflictError(AppError):
    """Raised when a resource conflict occurs (e.g., duplicate login handle)."""

    http_status = 409

    def __init__(self, message: str = "Conflict", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code or "CONFLICT")


class UnauthorizedError(AppError):
    """Raised when authentication fails (bad credentials, missing or invalid token)."""

    http_status = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code or "UNAUTHORIZED")


class ForbiddenError(AppError):
    """Raised when an authenticated principal may not access the target resource."""

    http_status = 403

    def __init__(self, message: str = "Forbidden", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code or "FORBIDDEN")


class StoreError(AppError):
    """Raised when either backing store fails.

    The message never carries driver details; the original exception is kept
    as ``__cause__``. ``step`` names the orchestrated write step that failed
    and ``entity_id`` is set when the catalog row had already been persisted.
    """

    http_status = 500

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        step: Optional[WriteStep] = None,
        entity_id: Optional[int] = None,
    ):
        super().__init__(message, code="STORE_ERROR")
        self.step = step
        self.entity_id = entity_id

    def to_dict(self) -> dict:
        return {"error": self.message}
