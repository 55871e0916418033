"""Request dependencies: session token extraction and auth gates."""

from typing import Annotated

from fastapi import Depends, Request

from reviewgate.core.config import settings
from reviewgate.core.session import extract_token
from reviewgate.schemas.auth import SessionClaims
from reviewgate.services.auth import AdminContext, authenticate_request, require_admin


def get_session_token(request: Request) -> str | None:
    """Token from the session cookie or Bearer header; None when neither is present."""
    return extract_token(request.headers, cookie_name=settings.AUTH_COOKIE_NAME)


def get_session_claims(
    token: Annotated[str | None, Depends(get_session_token)],
) -> SessionClaims:
    """Dependency: require a valid session. Raises AuthenticationRequired (401)."""
    return authenticate_request(token)


def get_admin_context(
    token: Annotated[str | None, Depends(get_session_token)],
) -> AdminContext:
    """Dependency: require a valid session with role 'admin'."""
    return require_admin(token)
