# prompt_relay/core/__init__.py
from prompt_relay.core.errors import AppError
from prompt_relay.core.error_codes import ErrorCode
from prompt_relay.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
