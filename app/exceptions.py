# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as a flat {"error": "<message>"} body;
# stack traces and internal details stay in the server log.
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class WellnessHubException(Exception):
    """
    Base exception for the WellnessHub API.

    All custom exceptions inherit from this class. The message is what the
    client sees, so it must never contain internal details.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Request Exceptions
# =============================================================================

class FieldValidationError(WellnessHubException):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=400)


class ConflictError(WellnessHubException):
    """Raised when an email is already registered or subscribed."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=400)


class RouteNotFoundError(WellnessHubException):
    """Raised for unmatched routes and unknown resource ids."""

    def __init__(self, message: str = "Route not found"):
        super().__init__(message=message, status_code=404)


class InternalError(WellnessHubException):
    """Raised when persistence or notification fails unexpectedly."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, status_code=500)


# =============================================================================
# Auth Exceptions
# =============================================================================

class AuthError(WellnessHubException):
    """
    Raised for credential and token failures.

    401 when credentials are wrong or no token was sent, 403 when a token
    was sent but is not acceptable.
    """

    def __init__(self, message: str = "Invalid credentials", status_code: int = 401):
        super().__init__(message=message, status_code=status_code)


class MissingTokenError(AuthError):
    def __init__(self):
        super().__init__(message="Access token required", status_code=401)


class InvalidTokenError(AuthError):
    def __init__(self):
        super().__init__(message="Invalid token", status_code=403)


# =============================================================================
# Exception Handlers
# =============================================================================

async def wellnesshub_exception_handler(
    request: Request,
    exc: WellnessHubException
) -> JSONResponse:
    """Convert WellnessHubException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle framework-raised HTTP errors.

    A wrong method on a known path is reported the same way as an unknown
    path.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=RouteNotFoundError().to_dict())
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed JSON and wrongly-typed fields.

    Missing fields never get here: request models make every field optional
    so routes can report them with their own messages.
    """
    logger.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body"}
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!"}
    )


# =============================================================================
# Route Helpers
# =============================================================================

@contextmanager
def internal_errors(message: str) -> Iterator[None]:
    """
    Turn unexpected exceptions inside a route into an InternalError.

    API exceptions pass through untouched; anything else is logged with its
    traceback and replaced by `message` for the client.

    Usage:
        with internal_errors("Failed to book appointment"):
            appointment = service.book(body)
    """
    try:
        yield
    except WellnessHubException:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise InternalError(message) from e
