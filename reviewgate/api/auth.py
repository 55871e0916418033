"""Cookie-based login, logout and session verification."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from reviewgate.api.cookies import cleared_session_cookie, session_cookie
from reviewgate.api.deps import get_session_token
from reviewgate.core.database import get_db
from reviewgate.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserPublic,
    VerifyResponse,
)
from reviewgate.services import auth as auth_service
from reviewgate.services.errors import AuthenticationRequired

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password.
    On success the session token is set as an HttpOnly cookie; it is not in the body.
    """
    result = auth_service.login(db, body.email, body.password)
    response.headers.append("Set-Cookie", session_cookie(result.token))
    return LoginResponse(user=UserPublic.model_validate(result.user))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Clear the session cookie. The token itself stays valid until it expires."""
    response.headers.append("Set-Cookie", cleared_session_cookie())
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/verify",
    response_model=VerifyResponse,
    responses={401: {"description": "No token, invalid token, or user no longer exists"}},
)
def verify(
    token: Annotated[str | None, Depends(get_session_token)],
    db: Annotated[Session, Depends(get_db)],
):
    """Report whether the request carries a valid session, and for whom."""
    try:
        user = auth_service.verify_session(db, token)
    except AuthenticationRequired as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"error": e.message, "authenticated": False},
        )
    return VerifyResponse(user=UserPublic.model_validate(user))
