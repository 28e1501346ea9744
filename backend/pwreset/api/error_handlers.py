"""Error Handlers — map every failure to the pwreset error envelope.

Invariants:
    - Every error body has the shape {"error": {code, message, category, severity, ...}}
    - PwResetError → its own to_response() (InvalidInputError adds "field")
    - RequestValidationError → VALIDATION_ERROR with the first offending "field"
      (body prefix stripped, same naming as InvalidInputError) plus per-field details
    - Exception (catch-all) → INTERNAL_ERROR, never leaks internal details
    - Neither bodies nor logs echo request input: it may hold a password

Design Decisions:
    - One envelope builder shared by the non-domain handlers so schema errors and
      InvalidInputError look the same to the operator's client
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pwreset.core.errors import ErrorCategory, ErrorSeverity, PwResetError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(PwResetError)
    async def pwreset_error_handler(request: Request, exc: PwResetError):
        logger.error(
            f"PwResetError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "legacy_id": exc.context.legacy_id,
                "username": exc.context.username,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [
            {
                "field": _field_name(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logger.warning(
            f"Validation error on {request.url.path}: {details}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        body = _error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )
        body["error"]["field"] = details[0]["field"] if details else None
        body["error"]["details"] = details
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=body,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def _field_name(loc: tuple) -> str:
    """("body", "password") -> "password"; nested locations keep their dots."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts)


def _error_envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
        },
    }
