"""
Per-request access log.

One line per invocation: which callable operation ran, how it ended
(ok / invalid_argument / internal) and how long it took. Bodies carry
caller prompts, so only their size is recorded.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.responses import Response

from prompt_relay.core.request_context import clear_context, set_context

logger = logging.getLogger("prompt_relay.http")

OPERATIONS = {
    "/api/generateTemplate": "generateTemplate",
    "/api/reviseText": "reviseText",
}


def outcome_for(status_code: int) -> str:
    if status_code < 400:
        return "ok"
    if status_code < 500:
        return "invalid_argument"
    return "internal"


async def log_requests(request: Request, call_next) -> Response:
    # Accept upstream request id if present, else create one
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    operation = OPERATIONS.get(request.url.path)
    clear_context()
    set_context(request_id=rid, operation=operation)

    started = time.perf_counter()
    response = await call_next(request)
    outcome = outcome_for(response.status_code)

    logger.info(
        "http.%s",
        outcome,
        extra={
            "method": request.method,
            "path": request.url.path,
            "operation": operation,
            "outcome": outcome,
            "status_code": response.status_code,
            "content_length": request.headers.get("content-length"),
            "duration_ms": int((time.perf_counter() - started) * 1000),
        },
    )
    response.headers["x-request-id"] = rid
    return response
