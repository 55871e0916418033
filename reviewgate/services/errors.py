"""Errors raised by the auth and user services; each knows its HTTP status."""


class AuthServiceError(Exception):
    """Base for expected, client-facing failures. message is safe to return to the client."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class RequestValidationFailed(AuthServiceError):
    """Missing or malformed request fields. Raised before any side effect."""

    status_code = 400


class InvalidCredentials(AuthServiceError):
    """Wrong email/password, or wrong current password on change."""

    status_code = 401


class AuthenticationRequired(AuthServiceError):
    """No token, or a token that failed verification."""

    status_code = 401


class AdminRequired(AuthServiceError):
    """Valid session without the admin role. Status is configurable (401 or 403)."""

    status_code = 401


class UserNotFound(AuthServiceError):
    status_code = 404


class EmailAlreadyExists(AuthServiceError):
    status_code = 409


class CannotDeleteSelf(AuthServiceError):
    status_code = 400
