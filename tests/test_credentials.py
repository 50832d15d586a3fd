"""
Tests for registration, login, session tokens and principal checks.
"""

import bcrypt
import jwt
import pytest

from app.config import settings
from app.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from services import security


def test_register_stores_hash_not_password(credential_service, users_collection):
    assert credential_service.register("alice", "s3cret-pass") == "alice"

    doc = users_collection.raw("alice")
    assert doc["password_hash"] != "s3cret-pass"
    assert bcrypt.checkpw(b"s3cret-pass", doc["password_hash"].encode())
    assert doc["recipes"] == [] and doc["reviews"] == []


def test_register_uses_configured_cost(credential_service, users_collection):
    credential_service.register("alice", "s3cret-pass")
    cost = users_collection.raw("alice")["password_hash"].split("$")[2]
    assert int(cost) == settings.password_hash_rounds


@pytest.mark.parametrize("user_id, password", [("", "pw"), ("alice", ""), ("  ", "pw")])
def test_register_requires_handle_and_password(credential_service, user_id, password):
    with pytest.raises(ServiceValidationError) as exc_info:
        credential_service.register(user_id, password)
    assert exc_info.value.details


def test_register_duplicate_handle(credential_service):
    credential_service.register("alice", "s3cret-pass")
    with pytest.raises(ConflictError):
        credential_service.register("alice", "other-pass")


def test_normal_lookup_hides_hash(credential_service, user_repo):
    credential_service.register("alice", "s3cret-pass")

    assert "password_hash" not in user_repo.get_by_user_id("alice")
    assert "password_hash" in user_repo.get_by_user_id("alice", include_password=True)


def test_login_token_subject_is_handle(credential_service):
    credential_service.register("alice", "s3cret-pass")
    token = credential_service.login("alice", "s3cret-pass")

    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert payload["sub"] == "alice"
    assert payload["exp"] - payload["iat"] == settings.token_expire_minutes * 60
    assert credential_service.authenticate(token) == "alice"


def test_login_failures_are_indistinguishable(credential_service):
    credential_service.register("alice", "s3cret-pass")

    with pytest.raises(UnauthorizedError) as wrong_password:
        credential_service.login("alice", "nope")
    with pytest.raises(UnauthorizedError) as no_user:
        credential_service.login("mallory", "nope")

    assert wrong_password.value.to_dict() == no_user.value.to_dict()


def test_expired_token_rejected(credential_service):
    token = security.build_access_token(
        subject="alice",
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=-1,
    )
    with pytest.raises(UnauthorizedError):
        credential_service.authenticate(token)


def test_token_signed_with_other_key_rejected(credential_service):
    token = security.build_access_token(
        subject="alice",
        secret="another-secret-key-that-is-long-enough-too",
        algorithm=settings.jwt_algorithm,
        expire_minutes=5,
    )
    with pytest.raises(UnauthorizedError):
        credential_service.authenticate(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_garbage_token_rejected(credential_service, token):
    with pytest.raises(UnauthorizedError):
        credential_service.authenticate(token)


def test_non_access_token_rejected(credential_service):
    token = jwt.encode(
        {"sub": "alice", "type": "refresh", "iat": security.now_epoch_s(),
         "exp": security.now_epoch_s() + 60},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(UnauthorizedError):
        credential_service.authenticate(token)


def test_get_user_requires_matching_principal(credential_service):
    credential_service.register("alice", "s3cret-pass")
    credential_service.register("bob", "s3cret-pass")

    assert credential_service.get_user("alice", "alice")["user_id"] == "alice"
    with pytest.raises(ForbiddenError):
        credential_service.get_user("alice", "bob")


def test_get_user_missing_after_authorization(credential_service):
    with pytest.raises(NotFoundError):
        credential_service.get_user("ghost", "ghost")


def test_overlong_password_rejected():
    with pytest.raises(security.AuthSecurityError):
        security.hash_password("x" * 73, 4)
    assert security.verify_password("x" * 73, security.hash_password("x" * 72, 4)) is False
