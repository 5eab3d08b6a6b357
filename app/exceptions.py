# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error carries the status code it maps to, so routers only raise and
# the handlers below turn exceptions into JSON responses.
#
# Status mapping:
#   400 - request body / path parameter / field validation failures
#   404 - no person row matches the requested id
#   500 - storage or infrastructure failure (detail logged, never returned)
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PersonApiException(Exception):
    """
    Base exception for the Person API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PERSON_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions (400)
# =============================================================================

class InvalidRequestBodyError(PersonApiException):
    """Raised when the request body is missing or is not a JSON object."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid request body: {reason}",
            code="INVALID_REQUEST_BODY",
            status_code=400,
            suggestion="Send a JSON object with Content-Type: application/json",
        )


class PersonValidationError(PersonApiException):
    """Raised when a decoded body is missing required person fields."""

    def __init__(self, errors: list[dict[str, Any]]):
        fields = sorted({error["field"] for error in errors if error.get("field")})
        super().__init__(
            message="Request validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
            suggestion=(
                f"Provide non-empty values for: {', '.join(fields)}"
                if fields else None
            ),
            details={"errors": errors},
        )
        self.errors = errors


class InvalidPersonIdError(PersonApiException):
    """Raised when the {id} path parameter is not a 64-bit integer."""

    def __init__(self, raw_id: str):
        super().__init__(
            message=f"Invalid person id: {raw_id!r}",
            code="INVALID_PERSON_ID",
            status_code=400,
            suggestion="Use a base-10 integer id, e.g. /api/v1/person/42",
            details={"id": raw_id},
        )


# =============================================================================
# Person Exceptions
# =============================================================================

class PersonNotFoundError(PersonApiException):
    """Raised when no person row matches the given id."""

    def __init__(self, person_id: int):
        super().__init__(
            message=f"Person not found: {person_id}",
            code="PERSON_NOT_FOUND",
            status_code=404,
            suggestion="Check that the id is correct and the person hasn't been deleted",
            details={"id": person_id},
        )
        self.person_id = person_id


class PersonStorageError(PersonApiException):
    """
    Raised when the database fails during a person operation.

    The wrapped error is kept on `cause` for logging; only the generic
    message reaches the client.
    """

    def __init__(self, operation: str, error: Exception):
        super().__init__(
            message=f"Failed to {operation} person",
            code="STORAGE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )
        self.operation = operation
        self.cause = error

    def __str__(self) -> str:
        return f"failed to {self.operation} person: {self.cause}"


# =============================================================================
# Exception Handlers
# =============================================================================

async def person_api_exception_handler(
    request: Request,
    exc: PersonApiException
) -> JSONResponse:
    """
    Convert PersonApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context

    Server-side failures are logged with their cause here, so routers
    don't log the same error twice.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: [{exc.code}] {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    Reported as 400 so every client-caused failure shares one status code.
    """
    logger.info(f"{request.method} {request.url.path} rejected by request validation")
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "details": {"errors": [
                {
                    "field": ".".join(str(part) for part in error.get("loc", ())),
                    "message": error.get("msg", ""),
                }
                for error in exc.errors()
            ]},
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
