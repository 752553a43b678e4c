"""Error Handlers: global exception handlers for the User API.

Invariants:
    - UserApiError → structured JSON with error code, message, severity
    - RequestValidationError (bad UUID, malformed JSON) → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - Field-rule failures never come through here; routes render them as a bare list

Design Decisions:
    - Three-layer handler: database family (UserApiError), request shape (Pydantic), catch-all
    - Extracted from main.py so create_app stays a flat wiring list
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from user_api.core.errors import UserApiError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RESPONSE = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": "internal",
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_request_shape_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:
    """Register the handler for the DatabaseError family raised by the repository."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Render a UserApiError with its own status and envelope."""
        logger.error(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_request_shape_error_handler(app: FastAPI) -> None:
    """Register the handler for bodies and path params pydantic cannot parse."""

    @app.exception_handler(RequestValidationError)
    async def request_shape_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Turn FastAPI's 422 into a 400 with per-location details."""
        logger.warning(
            f"Malformed request on {request.method} {request.url.path}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_request_shape_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_RESPONSE,
        )


def _build_request_shape_response(exc: RequestValidationError) -> dict:
    """Build the VALIDATION_ERROR envelope; loc parts are joined with dots."""
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
