"""Admin user management: list, create, update and delete accounts."""

import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from reviewgate.core.security import hash_password
from reviewgate.models import User, UserRole
from reviewgate.services.auth import check_password_policy, normalize_email
from reviewgate.services.errors import (
    CannotDeleteSelf,
    EmailAlreadyExists,
    RequestValidationFailed,
    UserNotFound,
)

logger = logging.getLogger(__name__)

# Deliberately loose: something@something.tld, no whitespace.
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 255


def _validate_email(email: str) -> str:
    normalized = normalize_email(email)
    if len(normalized) > MAX_EMAIL_LENGTH or not _EMAIL_PATTERN.match(normalized):
        raise RequestValidationFailed("Invalid email address")
    return normalized


def _parse_role(role: str) -> UserRole:
    try:
        return UserRole(role)
    except ValueError:
        raise RequestValidationFailed('Role must be either "admin" or "user"')


def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    query = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _commit_user(db: Session, user: User, conflict_message: str) -> User:
    """Commit and refresh; a unique-email race that slips past the pre-check becomes a 409."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailAlreadyExists(conflict_message) from e
    db.refresh(user)
    return user


def list_users(db: Session) -> list[User]:
    """All users, newest first."""
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def create_user(db: Session, email: str | None, password: str | None, role: str = "user") -> User:
    if not email or not password:
        raise RequestValidationFailed("Email and password are required")
    user_role = _parse_role(role)
    check_password_policy(password)
    normalized = _validate_email(email)

    if _email_taken(db, normalized):
        raise EmailAlreadyExists("User with this email already exists")

    user = User(email=normalized, password_hash=hash_password(password), role=user_role)
    db.add(user)
    user = _commit_user(db, user, "User with this email already exists")
    logger.info("Created user id=%s role=%s", user.id, user.role.value)
    return user


def update_user(
    db: Session,
    user_id: int,
    *,
    email: str | None = None,
    role: str | None = None,
    password: str | None = None,
) -> User:
    """Apply the provided fields; None means leave unchanged. Validates everything before writing."""
    user = db.get(User, user_id)
    if user is None:
        raise UserNotFound("User not found")

    new_email = None
    if email is not None:
        new_email = _validate_email(email)
        if new_email != user.email and _email_taken(db, new_email, exclude_id=user.id):
            raise EmailAlreadyExists("Email already in use")
    new_role = _parse_role(role) if role is not None else None
    if password is not None:
        check_password_policy(password)

    if new_email is not None:
        user.email = new_email
    if new_role is not None:
        user.role = new_role
    if password is not None:
        user.password_hash = hash_password(password)
    user = _commit_user(db, user, "Email already in use")
    logger.info("Updated user id=%s", user.id)
    return user


def delete_user(db: Session, user_id: int, acting_user_id: int) -> None:
    if user_id == acting_user_id:
        raise CannotDeleteSelf("Cannot delete your own account")
    user = db.get(User, user_id)
    if user is None:
        raise UserNotFound("User not found")
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s", user_id)
