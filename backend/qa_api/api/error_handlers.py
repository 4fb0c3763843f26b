"""Response Mapper — the single translation from any failure to an HTTP response.

Invariants:
    - map_failure is total: every exception reaches exactly one branch,
      anything unrecognized falls through to 404 "Route not found"
    - Taxonomy errors answer their own http_status (416, or 422 for DatabaseQueryError)
    - Body/form decode failures → 422; wrong-typed path params → 404 (no route matches)
    - CORS preflight violations → 403 (raised by api/cors.py, mapped here)
    - DatabaseQueryError logged at ERROR; client-caused errors at WARNING
    - Unexpected programming errors → 500 catch-all, never leaks internal details

Design Decisions:
    - One mapping function shared by every registered handler and the CORS layer,
      so all rejections share one envelope: {"error": {code, message, category, severity}}
    - FastAPI answers unparsable form bodies with HTTPException(400); that is a
      decode failure, so it maps to 422 like any other body error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qa_api.core.errors import (
    ErrorCategory, ErrorSeverity, QAError, UNPROCESSABLE_ENTITY,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"


class CorsForbidden(Exception):
    """A CORS preflight asked for an origin, method or header the policy forbids."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"CORS request forbidden: {self.reason}"


def _error_response(
    status_code: int,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity = ErrorSeverity.WARNING,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "category": category.value,
                "severity": severity.value,
            },
        },
    )


def _route_not_found() -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND, "ROUTE_NOT_FOUND", ROUTE_NOT_FOUND,
        ErrorCategory.ROUTING, ErrorSeverity.INFO,
    )


def _decode_failure(detail: str) -> JSONResponse:
    return _error_response(
        UNPROCESSABLE_ENTITY, "BODY_DESERIALIZE_ERROR",
        f"{detail}, Please try again later!", ErrorCategory.VALIDATION,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )


def map_failure(exc: Exception) -> JSONResponse:
    """Translate any failure that reached the boundary into a response."""
    if isinstance(exc, QAError):
        if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            logger.error(
                f"{exc.code}: {exc.message}", extra={"error_code": exc.code},
            )
        else:
            logger.warning(
                f"{exc.code}: {exc.message}", extra={"error_code": exc.code},
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    if isinstance(exc, CorsForbidden):
        logger.warning(str(exc), extra={"error_code": "CORS_FORBIDDEN"})
        return _error_response(
            status.HTTP_403_FORBIDDEN, "CORS_FORBIDDEN", str(exc), ErrorCategory.CORS,
        )

    if isinstance(exc, RequestValidationError):
        if any(e["loc"] and e["loc"][0] == "path" for e in exc.errors()):
            return _route_not_found()
        logger.warning(f"Request body rejected: {exc.errors()}")
        return _decode_failure(_describe_validation_errors(exc))

    if (
        isinstance(exc, StarletteHTTPException)
        and exc.status_code == status.HTTP_400_BAD_REQUEST
    ):
        logger.warning(f"Request body rejected: {exc.detail}")
        return _decode_failure(str(exc.detail))

    return _route_not_found()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(QAError)
    async def qa_error_handler(request: Request, exc: QAError):
        return map_failure(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return map_failure(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return map_failure(exc)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
            "An unexpected error occurred", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
        )
