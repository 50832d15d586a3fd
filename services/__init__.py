"""Services package - Business logic layer"""

from services.credential_service import CredentialService
from services.pagination import PaginationService, PageWindow, PAGE_SIZE
from services.write_orchestrator import WriteOrchestrator

__all__ = [
    "CredentialService",
    "PaginationService",
    "PageWindow",
    "PAGE_SIZE",
    "WriteOrchestrator",
]
