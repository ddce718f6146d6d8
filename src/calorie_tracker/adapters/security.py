"""Password hashing and JWT bearer tokens."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from calorie_tracker.services.auth import PasswordHasher, TokenCodec


@dataclass
class PasslibPasswordHasher(PasswordHasher):
    """Password hasher backed by a passlib CryptContext."""

    context: CryptContext = field(
        default_factory=lambda: CryptContext(
            schemes=["pbkdf2_sha256"], deprecated="auto"
        )
    )

    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches; malformed hashes never match."""
        try:
            return self.context.verify(password, password_hash)
        except (ValueError, TypeError):
            return False


@dataclass
class JoseTokenCodec(TokenCodec):
    """Signed JWTs whose subject is the user id."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(days=30)

    def issue(self, user_id: UUID) -> str:
        """Return a token for the user that expires after the TTL."""
        now = datetime.now(tz=UTC)
        claims = {"sub": str(user_id), "iat": now, "exp": now + self.ttl}
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> UUID | None:
        """Return the subject of a valid, unexpired token."""
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            return None
        subject = claims.get("sub")
        if not isinstance(subject, str):
            return None
        try:
            return UUID(subject)
        except ValueError:
            return None
