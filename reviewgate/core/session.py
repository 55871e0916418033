"""Pull the session token out of inbound request headers."""

from collections.abc import Mapping

BEARER_PREFIX = "Bearer "


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def token_from_cookie(cookie_header: str | None, cookie_name: str = "token") -> str | None:
    """Return the named cookie's value from a raw Cookie header, or None."""
    if not cookie_header:
        return None
    prefix = f"{cookie_name}="
    for part in cookie_header.split(";"):
        part = part.strip()
        if part.startswith(prefix):
            return part[len(prefix):] or None
    return None


def token_from_authorization(authorization: str | None) -> str | None:
    """Return the credential from an 'Authorization: Bearer <token>' header, or None."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip() or None


def extract_token(headers: Mapping[str, str], cookie_name: str = "token") -> str | None:
    """
    Find the session token in request headers.

    The cookie is checked first, then the Authorization header. None means no
    credential was sent, which is not the same as an invalid one.
    """
    token = token_from_cookie(_get_header(headers, "cookie"), cookie_name)
    if token is not None:
        return token
    return token_from_authorization(_get_header(headers, "authorization"))
