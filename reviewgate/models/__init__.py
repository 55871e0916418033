"""SQLAlchemy ORM models."""

from reviewgate.models.base import Base
from reviewgate.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole"]
