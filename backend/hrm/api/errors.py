"""
Centralized error handlers.

Maps service errors to HTTP responses. Every error body carries
``error`` and ``message`` keys; validation failures add ``details``.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hrm.services.errors import (
    DuplicateEmployeeIdError,
    EmployeeNotFoundError,
    EmployeeServiceError,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

_HTTP_ERRORS = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[list[dict[str, str]]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    body: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "skillLevel") -> "skillLevel"; ("path", "pk") -> "pk"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Unknown routes, wrong methods and other framework-raised errors."""
        return _error_response(
            exc.status_code,
            _HTTP_ERRORS.get(exc.status_code, "http_error"),
            str(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(ValidationFailure)
    async def handle_validation_failure(
        _request: Request, exc: ValidationFailure
    ) -> JSONResponse:
        logger.warning(
            "Validation failed for fields: %s",
            ", ".join(v.field for v in exc.violations),
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "validation_failed",
            exc.message,
            [{"field": v.field, "message": v.message} for v in exc.violations],
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.warning("Malformed request: %d error(s)", len(details))
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "validation_failed",
            "Request is malformed",
            details,
        )

    @app.exception_handler(EmployeeNotFoundError)
    async def handle_not_found(
        _request: Request, exc: EmployeeNotFoundError
    ) -> JSONResponse:
        logger.warning("Employee not found: %s", exc.identifier)
        return _error_response(status.HTTP_404_NOT_FOUND, "not_found", exc.message)

    @app.exception_handler(DuplicateEmployeeIdError)
    async def handle_duplicate_employee_id(
        _request: Request, exc: DuplicateEmployeeIdError
    ) -> JSONResponse:
        logger.warning("Duplicate employee id: %s", exc.employee_id)
        return _error_response(
            status.HTTP_409_CONFLICT, "duplicate_employee_id", exc.message
        )

    @app.exception_handler(EmployeeServiceError)
    async def handle_service_error(
        _request: Request, exc: EmployeeServiceError
    ) -> JSONResponse:
        """Catch-all for service errors without a dedicated handler."""
        logger.error("Unhandled service error: %s", exc.message)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
        )
