"""Error Handlers — global exception handlers for the Solscribe API.

Invariants:
    - SolscribeError → its http_status + {success: false, error: <message>},
      logged at the level its severity names
    - RequestValidationError → 400; absent fields reported as missing, by name
    - HTTPException (unknown route, wrong method) → same status, same envelope
    - Exception (catch-all) → 500, never leaks internal details
    - Every error response body is a well-formed envelope

Design Decisions:
    - Four-layer handler: domain (SolscribeError), validation (Pydantic),
      routing (Starlette HTTPException), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solscribe.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    MissingFieldError,
    SolscribeError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_solscribe_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_solscribe_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(SolscribeError)
    async def solscribe_error_handler(request: Request, exc: SolscribeError):
        """Handle parse, policy and builder errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"SolscribeError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
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
        """Handle request decoding errors."""
        error = build_validation_error(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={**error.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap framework HTTP errors in the envelope."""
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "An unexpected error occurred"},
        )


def build_validation_error(errors: list[dict]) -> SolscribeError:
    """Collapse pydantic error details into one envelope-ready error."""
    missing = [
        _field_name(e["loc"]) for e in errors if e["type"] == "missing"
    ]
    if missing:
        return MissingFieldError(
            f"Missing required field: {', '.join(missing)}",
            ErrorContext(field=",".join(missing)),
        )

    first = errors[0]
    if first["type"] == "json_invalid":
        message = "Invalid request data: malformed JSON body"
    else:
        message = (
            f"Invalid request data: {_field_name(first['loc'])}: {first['msg']}"
        )
    return SolscribeError(
        message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        severity=ErrorSeverity.WARNING,
        context=ErrorContext(field=_field_name(first["loc"])),
        http_status=status.HTTP_400_BAD_REQUEST,
    )


def _field_name(loc) -> str:
    """('body', 'mint') → 'mint'; a bare ('body',) stays 'body'."""
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"
