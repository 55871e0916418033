"""Login, session verification, admin gating and password change."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from reviewgate.core.config import get_settings
from reviewgate.core.security import (
    InvalidTokenError,
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)
from reviewgate.models import User, UserRole
from reviewgate.schemas.auth import SessionClaims
from reviewgate.services.errors import (
    AdminRequired,
    AuthenticationRequired,
    InvalidCredentials,
    RequestValidationFailed,
    UserNotFound,
)

if TYPE_CHECKING:
    from reviewgate.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid email or password"


@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str


@dataclass(frozen=True)
class AdminContext:
    """What the admin gate hands to privileged handlers."""

    user_id: int


def normalize_email(email: str) -> str:
    return email.strip().lower()


@lru_cache
def _dummy_hash() -> str:
    # Compared against when the email is unknown so both failure paths cost one bcrypt check.
    return hash_password("reviewgate-no-such-user")


def check_password_policy(
    password: str,
    settings: "Settings | None" = None,
    label: str = "Password",
) -> None:
    """Raise RequestValidationFailed if password violates the configured length bounds."""
    settings = settings or get_settings()
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise RequestValidationFailed(
            f"{label} must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password) > settings.PASSWORD_MAX_LENGTH:
        raise RequestValidationFailed(
            f"{label} must be at most {settings.PASSWORD_MAX_LENGTH} characters long"
        )


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def login(db: Session, email: str | None, password: str | None) -> LoginResult:
    """
    Check credentials and issue a session token.

    Unknown email and wrong password raise the same InvalidCredentials so a
    caller cannot probe which emails are registered.
    """
    if not email or not password:
        raise RequestValidationFailed("Email and password are required")

    user = get_user_by_email(db, email)
    if user is None:
        verify_password(password, _dummy_hash())
        raise InvalidCredentials(INVALID_LOGIN_MESSAGE)
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials(INVALID_LOGIN_MESSAGE)

    claims = SessionClaims(user_id=user.id, email=user.email, role=user.role)
    return LoginResult(user=user, token=create_session_token(claims))


def verify_session(db: Session, token: str | None) -> User:
    """Resolve a token to its (still existing) user, for GET /auth/verify."""
    if token is None:
        raise AuthenticationRequired("No token provided")
    try:
        claims = decode_session_token(token)
    except InvalidTokenError:
        raise AuthenticationRequired("Invalid token")
    user = db.get(User, claims.user_id)
    if user is None:
        raise AuthenticationRequired("User not found")
    return user


def authenticate_request(token: str | None) -> SessionClaims:
    """Require a valid session; returns the token's claims without a database lookup."""
    if token is None:
        raise AuthenticationRequired("Authentication required")
    try:
        return decode_session_token(token)
    except InvalidTokenError:
        raise AuthenticationRequired("Invalid or expired token")


def require_admin(token: str | None) -> AdminContext:
    """
    Gate for privileged operations.

    The role is taken from the token claims, not re-read from the database, so
    a demotion only takes effect once the old token expires.
    """
    claims = authenticate_request(token)
    if claims.role != UserRole.ADMIN:
        raise AdminRequired(
            "Admin access required",
            status_code=get_settings().ADMIN_REQUIRED_STATUS,
        )
    return AdminContext(user_id=claims.user_id)


def change_password(
    db: Session,
    claims: SessionClaims,
    current_password: str | None,
    new_password: str | None,
) -> None:
    """Replace the session user's password after checking the current one.

    Tokens issued before the change stay valid until they expire.
    """
    if not current_password or not new_password:
        raise RequestValidationFailed("Current password and new password are required")
    check_password_policy(new_password, label="New password")

    user = db.get(User, claims.user_id)
    if user is None:
        raise UserNotFound("User not found")
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentials("Current password is incorrect")

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed for user id=%s", user.id)
