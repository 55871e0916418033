"""Request/response schemas for admin user management."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from reviewgate.models.user import UserRole


class UserCreateRequest(BaseModel):
    """New user; role defaults to 'user'. Role values outside the enum are rejected by the service."""

    email: str | None = None
    password: str | None = None
    role: str = UserRole.USER.value


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    email: str | None = None
    role: str | None = None
    password: str | None = None


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: UserRole
    created_at: datetime | None = None
    updated_at: datetime | None = None
