"""
exception_handlers.py
- Purpose: Convert AppError (and generic exceptions) into the callable error envelope.

Also logs errors with request context so failures are diagnosable.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prompt_relay.core import AppError, ErrorCode, ErrorReason
from prompt_relay.core.errors import invalid_argument

logger = logging.getLogger("prompt_relay.exceptions")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        extra={
            "path": str(getattr(request.url, "path", "")),
            "method": request.method,
            "status_code": exc.status_code,
            "code": getattr(exc, "code", None),
            "reason": getattr(exc, "reason", None),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only field locations go back to the caller, never the submitted values.
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    return await app_error_handler(request, invalid_argument(details={"fields": fields}))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": str(getattr(request.url, "path", "")), "method": request.method},
    )
    return JSONResponse(
        status_code=500,
        content={"error": {"status": ErrorCode.INTERNAL.value, "message": ErrorReason.INTERNAL_ERROR.value}},
    )
