"""Password hashing and session token issue/verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from reviewgate.core.config import settings
from reviewgate.schemas.auth import SessionClaims

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class InvalidTokenError(Exception):
    """Raised for any token that must not be trusted: tampered, expired, or malformed."""

    def __init__(self, message: str = "Invalid token") -> None:
        self.message = message
        super().__init__(message)


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Never raises."""
    try:
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def issue_token(
    claims: SessionClaims,
    secret: str,
    ttl: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Sign claims into a JWT that expires ttl from now."""
    if not secret:
        raise RuntimeError("Token signing secret is not configured")
    now = datetime.now(UTC)
    payload: dict[str, Any] = claims.model_dump(by_alias=True, mode="json")
    payload["iat"] = now
    payload["exp"] = now + ttl
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    secret: str,
    algorithms: tuple[str, ...] = ("HS256",),
) -> SessionClaims:
    """
    Decode a JWT and return its session claims.

    Bad signature, expiry, malformed input and unexpected claim shapes all raise
    the same InvalidTokenError; callers cannot tell them apart.
    """
    if not secret:
        raise RuntimeError("Token signing secret is not configured")
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=list(algorithms),
            options={"require": ["exp", "iat"]},
        )
        return SessionClaims.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as e:
        raise InvalidTokenError() from e


def session_ttl() -> timedelta:
    return timedelta(days=settings.JWT_EXPIRE_DAYS)


def create_session_token(claims: SessionClaims) -> str:
    """Issue a session token with the configured secret, algorithm and lifetime."""
    return issue_token(
        claims,
        settings.JWT_SECRET.get_secret_value(),
        session_ttl(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_session_token(token: str) -> SessionClaims:
    """Verify a session token with the configured secret. Raises InvalidTokenError."""
    return verify_token(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=(settings.JWT_ALGORITHM,),
    )
