"""
Request context helpers.

We keep a small context (request_id, operation) in ContextVars. The HTTP
middleware and the forwarder set these values so every log line of one
invocation can be correlated.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_operation: ContextVar[Optional[str]] = ContextVar("operation", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    operation: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if operation is not None:
        _operation.set(operation)


def clear_context() -> None:
    _request_id.set(None)
    _operation.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    op = _operation.get()

    if rid:
        ctx["request_id"] = rid
    if op:
        ctx["operation"] = op
    return ctx
