# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure leaves the app as the shared failure envelope:
#   {"ok": false, "success": false, "kind": ..., "message": ..., "error"?, "details"?}
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import Request
from fastapi.responses import JSONResponse

from core.models.result import ApiFailure, ResultKind

logger = logging.getLogger(__name__)


class FestiFindException(Exception):
    """
    Base exception for the FestiFind API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        kind: ResultKind = ResultKind.UNEXPECTED,
        status_code: int = 500,
        error: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return failure_body(self.kind, self.message, error=self.error, details=self.details)


def failure_body(
    kind: ResultKind,
    message: str,
    error: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Render the failure envelope, leaving out empty optional fields."""
    result = ApiFailure(kind=kind, message=message, error=error, details=details)
    return result.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Validation Exceptions
# =============================================================================

class InvalidInputError(FestiFindException):
    """Raised when a request field is missing or has the wrong type."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            kind=ResultKind.VALIDATION,
            status_code=400,
            details={"field": field} if field else None,
        )


# =============================================================================
# Store Exceptions
# =============================================================================

class FestivalStoreError(FestiFindException):
    """Raised when the festival store reports a failure (including no matching row)."""

    def __init__(
        self,
        message: str,
        error: str,
        code: str,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        details = {"code": code, **(details or {})}
        if suggestion:
            details["suggestion"] = suggestion
        super().__init__(
            message=message,
            kind=ResultKind.STORE,
            status_code=500,
            error=error,
            details=details,
        )


# =============================================================================
# Unexpected Exceptions
# =============================================================================

class UnexpectedError(FestiFindException):
    """Raised for anything thrown while parsing or processing a request that has no other class."""

    def __init__(self, error: str):
        super().__init__(
            message="Error processing request",
            kind=ResultKind.UNEXPECTED,
            status_code=500,
            error=error,
        )


@contextmanager
def request_boundary(action: str) -> Iterator[None]:
    """
    Wrap a route body so every failure becomes a FestiFindException.

    Usage:
        with request_boundary("favorite update"):
            body = await request.json()
            ...
    """
    try:
        yield
    except FestiFindException:
        raise
    except Exception as e:
        logger.exception(f"Error processing {action}: {e}")
        raise UnexpectedError(str(e)) from e


# =============================================================================
# Exception Handlers
# =============================================================================

async def festifind_exception_handler(
    request: Request,
    exc: FestiFindException
) -> JSONResponse:
    """Convert FestiFindException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle FastAPI request validation errors (query and path parameters).

    Reported as 400 like any other invalid input.
    """
    logger.warning(f"Request validation failed for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content=failure_body(ResultKind.VALIDATION, "Invalid input", error=str(exc)),
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle anything not otherwise classified."""
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=failure_body(ResultKind.UNEXPECTED, "Error processing request", error=str(exc)),
    )
