"""Request/response schemas for auth endpoints and session claims."""

from pydantic import BaseModel, ConfigDict, Field

from reviewgate.models.user import UserRole


class SessionClaims(BaseModel):
    """Claims carried inside a session token. Wire names follow the front end (userId)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: int = Field(..., alias="userId")
    email: str
    role: UserRole


class LoginRequest(BaseModel):
    """Credentials for login. Presence is checked by the service so it can answer 400."""

    email: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    """The user fields safe to hand to a client (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: UserRole


class LoginResponse(BaseModel):
    success: bool = True
    user: UserPublic


class MessageResponse(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
    message: str


class VerifyResponse(BaseModel):
    """Response for GET /auth/verify when the session is valid."""

    authenticated: bool = True
    user: UserPublic


class ChangePasswordRequest(BaseModel):
    """Body for POST /change-password. Field names match the front end."""

    model_config = ConfigDict(populate_by_name=True)

    current_password: str | None = Field(default=None, alias="currentPassword")
    new_password: str | None = Field(default=None, alias="newPassword")
