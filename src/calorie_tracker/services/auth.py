"""Registration, login and bearer token resolution."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(Exception):
    """Raised when registering an email that already has an account."""


class InvalidCredentialsError(Exception):
    """Raised when an email and password do not match an account."""


class PasswordHasher(Protocol):
    """Hashes and verifies passwords."""

    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the hash."""


class TokenCodec(Protocol):
    """Issues and verifies bearer tokens carrying a user id."""

    def issue(self, user_id: UUID) -> str:
        """Return a signed token for the user."""

    def verify(self, token: str) -> UUID | None:
        """Return the user id for a valid token, otherwise None."""


@dataclass(frozen=True)
class AuthSession:
    """An authenticated user and their bearer token."""

    user: UserProfile
    token: str


@dataclass
class AuthService:
    """Application service for account access."""

    repository: UserRepository
    password_hasher: PasswordHasher
    token_codec: TokenCodec

    def register(self, email: str, password: str, name: str) -> AuthSession:
        """Create an account and return a session for it."""
        normalized = normalize_email(email)
        if self.repository.get_credentials(normalized) is not None:
            raise EmailAlreadyRegisteredError("User already exists with this email")
        user = self.repository.create_user(
            email=normalized,
            name=name.strip(),
            password_hash=self.password_hasher.hash(password),
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return AuthSession(user=user, token=self.token_codec.issue(user.id))

    def login(self, email: str, password: str) -> AuthSession:
        """Verify credentials and return a new session."""
        credentials = self.repository.get_credentials(normalize_email(email))
        if credentials is None or not self.password_hasher.verify(
            password, credentials.password_hash
        ):
            raise InvalidCredentialsError("Invalid credentials")
        user = credentials.user
        return AuthSession(user=user, token=self.token_codec.issue(user.id))

    def authenticate(self, token: str) -> UserProfile | None:
        """Resolve a bearer token to its user."""
        user_id = self.token_codec.verify(token)
        if user_id is None:
            return None
        return self.repository.get_by_id(user_id)


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively."""
    return email.strip().lower()
