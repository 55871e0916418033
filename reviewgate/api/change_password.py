"""Password change for the logged-in user."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from reviewgate.api.deps import get_session_claims
from reviewgate.core.database import get_db
from reviewgate.schemas.auth import ChangePasswordRequest, MessageResponse, SessionClaims
from reviewgate.services.auth import change_password as change_user_password
from reviewgate.services.errors import RequestValidationFailed

router = APIRouter()


async def get_change_password_body(
    request: Request,
    claims: Annotated[SessionClaims, Depends(get_session_claims)],
) -> ChangePasswordRequest:
    """Parse the body only once the session is known to be valid, so anonymous callers get 401."""
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise RequestValidationFailed("Invalid request body")
    try:
        return ChangePasswordRequest.model_validate(data)
    except ValidationError:
        raise RequestValidationFailed("Invalid request body")


@router.post("", response_model=MessageResponse)
def change_password(
    body: Annotated[ChangePasswordRequest, Depends(get_change_password_body)],
    claims: Annotated[SessionClaims, Depends(get_session_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    change_user_password(db, claims, body.current_password, body.new_password)
    return MessageResponse(message="Password changed successfully")
