"""Error Handlers — global exception handlers for the devgate API.

Invariants:
    - DevgateError → exc.http_status with the structured envelope (code, message, category, severity)
    - CallerError and auth failures log at WARNING; everything else at ERROR
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from devgate.core.errors import DevgateError, ErrorSeverity

logger = logging.getLogger(__name__)

_QUIET_SEVERITIES = (ErrorSeverity.INFO, ErrorSeverity.WARNING)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_devgate_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_devgate_error_handler(app: FastAPI) -> None:
    """Register devgate domain/infrastructure error handler."""

    @app.exception_handler(DevgateError)
    async def devgate_error_handler(request: Request, exc: DevgateError):
        """Handle all devgate domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.severity in _QUIET_SEVERITIES else logging.ERROR
        )
        logger.log(
            level, f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
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
