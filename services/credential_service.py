"""
Credential service - registration, login, session tokens and the
principal-equals-target check for protected user reads.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List

from app.exceptions import (
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from repositories import UserRepository
from services import security

logger = logging.getLogger("catalog.credentials")

# Same message for "no such user" and "wrong password"
INVALID_CREDENTIALS = "Invalid credentials."
INVALID_TOKEN = "Invalid or expired token."


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    """Hash compared against when the user is absent, so both login failures cost the same."""
    return security.hash_password("not-a-real-password", rounds)


class CredentialService:
    """Business logic for user credentials"""

    def __init__(
        self,
        users: UserRepository,
        *,
        secret: str,
        algorithm: str,
        token_expire_minutes: int,
        hash_rounds: int,
    ):
        self.users = users
        self.secret = secret
        self.algorithm = algorithm
        self.token_expire_minutes = token_expire_minutes
        self.hash_rounds = hash_rounds

    def register(self, user_id: str, password: str) -> str:
        """
        Create a user document with a bcrypt hash and empty back-reference arrays.

        Returns:
            The new user's login handle
        """
        missing: List[Dict[str, Any]] = [
            {"field": name, "message": "field required"}
            for name, value in (("user_id", user_id), ("password", password))
            if not value or not str(value).strip()
        ]
        if missing:
            raise ServiceValidationError("Request doesn't contain a valid user.", details=missing)

        try:
            password_hash = security.hash_password(password, self.hash_rounds)
        except security.AuthSecurityError as e:
            raise ServiceValidationError(
                "Request doesn't contain a valid user.",
                details=[{"field": "password", "message": str(e)}],
            ) from e

        self.users.create_user(user_id, password_hash)
        logger.info(f"user_registered user_id={user_id}")
        return user_id

    def login(self, user_id: str, password: str) -> str:
        """Verify credentials and issue a signed session token bound to ``user_id``."""
        user = self.users.get_by_user_id(user_id, include_password=True)
        if user is None:
            security.verify_password(password, _dummy_hash(self.hash_rounds))
            logger.warning(f"login_failed user_id={user_id}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not security.verify_password(password, str(user.get("password_hash") or "")):
            logger.warning(f"login_failed user_id={user_id}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"login_succeeded user_id={user_id}")
        return security.build_access_token(
            subject=user_id,
            secret=self.secret,
            algorithm=self.algorithm,
            expire_minutes=self.token_expire_minutes,
        )

    def authenticate(self, token: str) -> str:
        """Verify signature and validity window; return the principal (subject)."""
        try:
            payload = security.decode_access_token(
                token, secret=self.secret, algorithm=self.algorithm
            )
        except security.AuthSecurityError as e:
            logger.info(f"token_rejected reason={e}")
            raise UnauthorizedError(INVALID_TOKEN) from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise UnauthorizedError(INVALID_TOKEN)
        return subject

    @staticmethod
    def authorize(principal: str, target_user_id: str) -> None:
        """Only the user themself may read their profile."""
        if principal != target_user_id:
            logger.warning(f"access_denied principal={principal} target={target_user_id}")
            raise ForbiddenError("Unauthorized to access that resource")

    def get_user(self, principal: str, target_user_id: str) -> Dict[str, Any]:
        """Authorized, hash-free lookup of the target user's document."""
        self.authorize(principal, target_user_id)
        user = self.users.get_by_user_id(target_user_id)
        if user is None:
            raise NotFoundError(f"User {target_user_id} not found")
        return user
