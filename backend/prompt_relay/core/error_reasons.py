"""
error_reasons.py
- Purpose: Human-friendly "reason" strings returned to callers.
- Keep these stable; client apps may match on them.
"""

from enum import Enum


class ErrorReason(str, Enum):
    INVALID_INPUT = "Invalid input"
    MISSING_PROMPT = "The function must be called with a 'prompt' and 'systemPrompt'."
    MISSING_REVISION_TEXT = "The function must be called with a 'systemPrompt' and 'textToRevise'."
    INPUT_TOO_LARGE = "Input exceeds the maximum allowed size."

    TEMPLATE_FAILED = "An error occurred while generating the template."
    REVISION_FAILED = "An error occurred while revising the text."
    INTERNAL_ERROR = "Internal server error"
