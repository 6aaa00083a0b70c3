from __future__ import annotations

"""Centralized, structured exception hierarchy for credforge.

Every error raised by the core derives from `CredforgeError` and carries a
machine-readable `code` next to the human-readable `message`. Callers (and the
HTTP adapter) discriminate on the exception type, never on message text.

The hierarchy maps onto the rejection kinds of the core:
- `ValidationError`: malformed credential input (email/password/username).
- `ConflictError`: duplicate username or email on registration.
- `NotFoundError`: login for an unknown account.
- `UnauthorizedError`: login with a password that does not match.
- `InvalidArgumentError`: bad parameters passed to the key generator.

None of these is retried internally and none is fatal to the process.
"""

from typing import Final

__all__: Final = [
    "CredforgeError",
    "ValidationError",
    "ConflictError",
    "DuplicateUserError",
    "NotFoundError",
    "UserNotFoundError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "InvalidArgumentError",
]


class CredforgeError(Exception):
    """Base exception class for all custom errors in credforge.

    Attributes:
        message (str): A human-readable error message, safe to surface to
                       the caller verbatim.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    # A concise, structured representation used by loggers & FastAPI handlers.
    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Input validation errors (map to 422 Unprocessable Entity)
# ---------------------------------------------------------------------------


class ValidationError(CredforgeError):
    """Raised when credential input fails a shape rule.

    The message names the rule that failed and is always caller-recoverable.
    """

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Business rule errors (map to 409 Conflict)
# ---------------------------------------------------------------------------


class ConflictError(CredforgeError):
    """Raised when an operation collides with existing state."""

    def __init__(self, message: str, code: str = "conflict"):
        super().__init__(message, code)


class DuplicateUserError(ConflictError):
    """Raised when registering a username or email that already exists."""

    def __init__(self, message: str, code: str = "duplicate_user"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Login errors (map to 404 Not Found / 401 Unauthorized)
# ---------------------------------------------------------------------------


class NotFoundError(CredforgeError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, message: str, code: str = "not_found"):
        super().__init__(message, code)


class UserNotFoundError(NotFoundError):
    """Raised when no account exists for the requested username.

    This typically maps to a `404 Not Found` HTTP status code.
    """

    def __init__(self, message: str = "User not found", code: str = "user_not_found"):
        super().__init__(message, code)


class UnauthorizedError(CredforgeError):
    """Raised for general authentication failures.

    It maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "unauthorized"):
        super().__init__(message, code)


class InvalidCredentialsError(UnauthorizedError):
    """Raised when the supplied password does not match the stored hash."""

    def __init__(self, message: str = "Invalid password", code: str = "invalid_credentials"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Programmer errors (map to 400 Bad Request)
# ---------------------------------------------------------------------------


class InvalidArgumentError(CredforgeError, ValueError):
    """Raised when the key generator receives an out-of-range parameter.

    Non-positive lengths, blank prefixes and batch counts outside 1..100 all
    end up here. It also derives from `ValueError` so that plain Python callers
    can treat it like any other bad argument.
    """

    def __init__(self, message: str, code: str = "invalid_argument"):
        super().__init__(message, code)
