"""Admin-only user management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from reviewgate.api.deps import get_admin_context
from reviewgate.core.database import get_db
from reviewgate.schemas.auth import MessageResponse
from reviewgate.schemas.users import UserCreateRequest, UserListItem, UserUpdateRequest
from reviewgate.services import users as users_service
from reviewgate.services.auth import AdminContext

router = APIRouter()


@router.get("", response_model=list[UserListItem])
def list_users(
    _admin: Annotated[AdminContext, Depends(get_admin_context)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserListItem]:
    """List all users, newest first."""
    return [UserListItem.model_validate(u) for u in users_service.list_users(db)]


@router.post("", response_model=UserListItem, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateRequest,
    _admin: Annotated[AdminContext, Depends(get_admin_context)],
    db: Annotated[Session, Depends(get_db)],
) -> UserListItem:
    user = users_service.create_user(db, body.email, body.password, role=body.role)
    return UserListItem.model_validate(user)


@router.put("/{user_id}", response_model=UserListItem)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    _admin: Annotated[AdminContext, Depends(get_admin_context)],
    db: Annotated[Session, Depends(get_db)],
) -> UserListItem:
    user = users_service.update_user(
        db,
        user_id,
        email=body.email,
        role=body.role,
        password=body.password,
    )
    return UserListItem.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    admin: Annotated[AdminContext, Depends(get_admin_context)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a user. Admins cannot delete their own account."""
    users_service.delete_user(db, user_id, acting_user_id=admin.user_id)
    return MessageResponse(message="User deleted successfully")
