"""
forward_validators.py
- Purpose: Boundary checks for forwarded invocations.
- Design: Everything here runs before any network activity. Failures are
  InvalidArgument; nothing is trimmed or rewritten, the caller's text is
  forwarded byte for byte.
"""

import json
from typing import Any

from prompt_relay.core import ErrorReason
from prompt_relay.core.errors import invalid_argument
from prompt_relay.llm.types import UNSET


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def require_text_fields(fields: dict[str, Any], reason: ErrorReason) -> None:
    missing = [name for name, value in fields.items() if not _is_present(value)]
    if missing:
        raise invalid_argument(reason, details={"fields": missing})


def enforce_text_limit(fields: dict[str, str], max_chars: int) -> None:
    too_long = [name for name, value in fields.items() if len(value) > max_chars]
    if too_long:
        raise invalid_argument(
            ErrorReason.INPUT_TOO_LARGE,
            details={"fields": too_long, "max_chars": max_chars},
        )


def enforce_schema_limit(schema: Any, max_bytes: int) -> None:
    if schema is UNSET:
        return
    try:
        size = len(json.dumps(schema))
    except (TypeError, ValueError) as e:
        raise invalid_argument(ErrorReason.INVALID_INPUT, details={"fields": ["schema"]}) from e
    if size > max_bytes:
        raise invalid_argument(
            ErrorReason.INPUT_TOO_LARGE,
            details={"fields": ["schema"], "max_bytes": max_bytes},
        )
