"""Error Handlers - global exception handlers for the peaks API.

Invariants:
    - PeaksError -> exc.to_response() with exc.http_status (a bare message list
      for coordinate failures, the error envelope otherwise)
    - RequestValidationError (bad query params, path index, body shape) -> 400
      envelope listing the offending fields
    - Any other exception -> 500 envelope, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from peaks.core.errors import ErrorCategory, ErrorSeverity, PeaksError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(PeaksError, _handle_peaks_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)


def _request_extra(request: Request, code: str) -> dict:
    return {
        "error_code": code,
        "path": request.url.path,
        "method": request.method,
    }


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}


async def _handle_peaks_error(request: Request, exc: PeaksError):
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level, f"PeaksError: {exc.message}",
        extra=_request_extra(request, exc.code),
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_request_validation(request: Request, exc: RequestValidationError):
    # loc is ("query", "minHeight") / ("path", "index") / ("body", "name")
    details = [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Malformed request: {[d['field'] for d in details]}",
        extra=_request_extra(request, "REQUEST_VALIDATION_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "REQUEST_VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details,
        ),
    )


async def _handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra=_request_extra(request, "INTERNAL_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
