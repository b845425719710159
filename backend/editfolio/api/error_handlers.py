"""Error Handlers — global exception handlers for the Editfolio API.

Invariants:
    - EditfolioError < 500 → structured JSON with error code, message, category
    - EditfolioError >= 500 → logged with stack trace, generic INTERNAL_ERROR body
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (EditfolioError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the composition root small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from editfolio.core.errors import EditfolioError, ErrorSeverity

logger = logging.getLogger(__name__)

_INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": "internal",
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_editfolio_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_editfolio_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(EditfolioError)
    async def editfolio_error_handler(request: Request, exc: EditfolioError):
        """Domain errors keep their code; infrastructure errors go generic."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(
                f"EditfolioError: {exc.message}", extra=extra, exc_info=exc,
            )
            return JSONResponse(
                status_code=exc.http_status, content=_INTERNAL_ERROR_BODY,
            )
        logger.warning(f"EditfolioError: {exc.message}", extra=extra)
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
            f"Validation error on {request.url.path}: {len(exc.errors())} field(s)",
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
            f"Unhandled exception on {request.url.path}: {type(exc).__name__}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_INTERNAL_ERROR_BODY,
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response (input values omitted)."""
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
