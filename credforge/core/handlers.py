from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module translates the credforge exception hierarchy into HTTP
responses. Every body has the shape ``{"detail": <message>, "code": <code>}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from credforge.core.exceptions import (
    ConflictError,
    CredforgeError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "validation_error_handler",
    "invalid_argument_error_handler",
    "conflict_error_handler",
    "not_found_error_handler",
    "unauthorized_error_handler",
    "credforge_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _error_response(status_code: int, exc: CredforgeError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles `ValidationError`, returning a `422 Unprocessable Entity`."""
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)


async def invalid_argument_error_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """Handles `InvalidArgumentError`, returning a `400 Bad Request`.

    Raised by the key generator for non-positive lengths, blank prefixes and
    out-of-range batch counts.
    """
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    """Handles `ConflictError`, returning a `409 Conflict`.

    This is triggered when a registration attempt is made with a username or
    email that already exists.
    """
    return _error_response(status.HTTP_409_CONFLICT, exc)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handles `NotFoundError`, returning a `404 Not Found`."""
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def unauthorized_error_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    """Handles `UnauthorizedError`, returning a `401 Unauthorized`."""
    logger.warning(
        "Authentication failure",
        error=exc.code,
        path=request.url.path,
    )
    return _error_response(status.HTTP_401_UNAUTHORIZED, exc)


async def credforge_error_handler(request: Request, exc: CredforgeError) -> JSONResponse:
    """Catch-all for `CredforgeError` subclasses without a dedicated handler."""
    logger.error("Unhandled application error", error=exc.code, path=request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI app.

    Starlette resolves handlers along the exception's MRO, so the most
    specific registered class wins.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(CredforgeError, credforge_error_handler)
