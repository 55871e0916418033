"""Pydantic request/response schemas."""

from reviewgate.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionClaims,
    UserPublic,
    VerifyResponse,
)
from reviewgate.schemas.health import HealthResponse
from reviewgate.schemas.users import UserCreateRequest, UserListItem, UserUpdateRequest

__all__ = [
    "ChangePasswordRequest",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "SessionClaims",
    "UserCreateRequest",
    "UserListItem",
    "UserPublic",
    "UserUpdateRequest",
    "VerifyResponse",
]
