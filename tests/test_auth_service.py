"""Tests for registration, login and token resolution."""

from datetime import timedelta
from uuid import uuid4

import pytest

from calorie_tracker.adapters.security import JoseTokenCodec, PasslibPasswordHasher
from calorie_tracker.services.auth import (
    AuthService,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from tests.conftest import InMemoryUserRepository


def _service(repository: InMemoryUserRepository | None = None) -> AuthService:
    return AuthService(
        repository=repository or InMemoryUserRepository(),
        password_hasher=PasslibPasswordHasher(),
        token_codec=JoseTokenCodec(secret="test-secret"),
    )


def test_register_normalizes_email_and_hashes_password() -> None:
    repository = InMemoryUserRepository()
    service = _service(repository)

    session = service.register("  Alice@Example.COM ", "secret123", " Alice ")

    assert session.user.email == "alice@example.com"
    assert session.user.name == "Alice"
    assert repository.password_hashes[session.user.id] != "secret123"
    assert service.authenticate(session.token) == session.user


def test_register_rejects_duplicate_email() -> None:
    service = _service()
    service.register("alice@example.com", "secret123", "Alice")

    with pytest.raises(EmailAlreadyRegisteredError):
        service.register("ALICE@example.com", "another1", "Alice again")


def test_login_checks_password() -> None:
    service = _service()
    registered = service.register("alice@example.com", "secret123", "Alice")

    session = service.login("Alice@example.com", "secret123")

    assert session.user.id == registered.user.id
    with pytest.raises(InvalidCredentialsError):
        service.login("alice@example.com", "wrong-password")
    with pytest.raises(InvalidCredentialsError):
        service.login("nobody@example.com", "secret123")


def test_authenticate_rejects_bad_tokens() -> None:
    service = _service()
    session = service.register("alice@example.com", "secret123", "Alice")
    foreign = JoseTokenCodec(secret="other-secret").issue(session.user.id)
    expired = JoseTokenCodec(secret="test-secret", ttl=timedelta(seconds=-1)).issue(
        session.user.id
    )
    orphan = JoseTokenCodec(secret="test-secret").issue(uuid4())

    assert service.authenticate("not-a-token") is None
    assert service.authenticate(foreign) is None
    assert service.authenticate(expired) is None
    assert service.authenticate(orphan) is None


def test_password_hasher_handles_malformed_hash() -> None:
    hasher = PasslibPasswordHasher()

    assert hasher.verify("secret123", hasher.hash("secret123")) is True
    assert hasher.verify("secret123", "not-a-hash") is False
