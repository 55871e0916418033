"""Set-Cookie values for the session cookie."""

from reviewgate.core.config import settings
from reviewgate.core.security import session_ttl

_COOKIE_ATTRIBUTES = "HttpOnly; Secure; SameSite=Strict; Path=/"


def session_cookie(token: str) -> str:
    max_age = int(session_ttl().total_seconds())
    return f"{settings.AUTH_COOKIE_NAME}={token}; {_COOKIE_ATTRIBUTES}; Max-Age={max_age}"


def cleared_session_cookie() -> str:
    """Overwrites the session cookie with an empty, already-expired one."""
    return f"{settings.AUTH_COOKIE_NAME}=; {_COOKIE_ATTRIBUTES}; Max-Age=0"
