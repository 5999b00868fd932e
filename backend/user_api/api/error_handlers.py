"""Error Handlers — global exception handlers for the User API.

Invariants:
    - UserApiError → structured JSON with error code, message, severity
    - Every UserApiError logged exactly once, here: WARNING below 500, ERROR above
    - RequestValidationError → 400 with field-level error details (same shape as
      UserValidationError, so clients parse one format)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UserApiError), validation (Pydantic), catch-all (Exception)
    - 400 (not FastAPI's default 422) for malformed bodies: the published contract
      declares 400 for invalid user data
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_api.core.errors import (
    ErrorSeverity, UserApiError, UserValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register User API domain/infrastructure error handler."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all User API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, UserValidationError):
            extra["field"] = ",".join(v.field.value for v in exc.violations)
        log(f"UserApiError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
