"""Error Handlers - global exception handlers for the Student Registry API.

Invariants:
    - StudentApiError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Every error message is localized from the request's Accept-Language header
    - Every error response carries Content-Language

Design Decisions:
    - Three-layer handler: domain (StudentApiError), validation (Pydantic), catch-all (Exception)
    - message_key re-resolved here so errors raised below the controller are localized too
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from student_api.config import get_settings
from student_api.core.domain_types import Locale, MessageKey
from student_api.core.errors import ErrorCategory, ErrorSeverity, StudentApiError
from student_api.core.message_catalog import get_message
from student_api.core.resolve_locale import resolve_locale

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_locale(request: Request) -> Locale:
    return resolve_locale(
        request.headers.get("accept-language"), get_settings().default_locale,
    )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Student Registry domain/infrastructure error handler."""

    @app.exception_handler(StudentApiError)
    async def student_api_error_handler(request: Request, exc: StudentApiError):
        """Handle all Student Registry domain/infrastructure errors."""
        locale = _request_locale(request)
        if exc.message_key is not None:
            exc.message = get_message(exc.message_key, locale)
        exc.context.locale = locale.value
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"StudentApiError: {exc}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "student_id": exc.context.student_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers={"Content-Language": locale.value},
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        locale = _request_locale(request)
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, locale),
            headers={"Content-Language": locale.value},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        locale = _request_locale(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": get_message(MessageKey.INTERNAL_ERROR, locale),
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
            headers={"Content-Language": locale.value},
        )


def _build_validation_error_response(
    exc: RequestValidationError, locale: Locale,
) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": get_message(MessageKey.VALIDATION_FAILED, locale),
            "category": ErrorCategory.VALIDATION.value,
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
