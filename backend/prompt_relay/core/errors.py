"""
errors.py
- Purpose: AppError used across services/validators for consistent errors.
- Pattern: raise AppError(...) in service/validator, handler converts to the
  callable error envelope: {"error": {"status": ..., "message": ...}}.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from prompt_relay.core.error_codes import ErrorCode
from prompt_relay.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional override for the caller-facing text

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message or self.reason}"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "status": self.code.value,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


def invalid_argument(reason: str = ErrorReason.INVALID_INPUT, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.INVALID_ARGUMENT,
        reason=str(getattr(reason, "value", reason)),
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
    )


def internal_error(reason: str = ErrorReason.INTERNAL_ERROR) -> AppError:
    # No details: internal failures never carry upstream data back to the caller.
    return AppError(
        code=ErrorCode.INTERNAL,
        reason=str(getattr(reason, "value", reason)),
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
