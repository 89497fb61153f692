"""
forwarder.py
- Purpose: The request forwarder behind both callable operations.
- Flow per invocation: validate -> build payload -> call upstream -> map error.
- Every failure leaves here as an AppError (INVALID_ARGUMENT or INTERNAL);
  upstream bodies and transport errors are logged, never returned.
"""

from __future__ import annotations

import logging
from typing import Any

from prompt_relay.core import ErrorReason
from prompt_relay.core.errors import internal_error
from prompt_relay.core.request_context import set_context
from prompt_relay.llm.errors import LLMError, UpstreamRejectedError
from prompt_relay.llm.prompts.registry import build_request
from prompt_relay.llm.providers.gemini import GeminiProvider
from prompt_relay.llm.types import UNSET, JsonValue, Operation
from prompt_relay.validations.forward_validators import (
    enforce_schema_limit,
    enforce_text_limit,
    require_text_fields,
)

logger = logging.getLogger("prompt_relay.forwarder")


class RequestForwarder:
    def __init__(self, provider: GeminiProvider, *, max_text_chars: int, max_schema_bytes: int):
        self.provider = provider
        self.max_text_chars = max_text_chars
        self.max_schema_bytes = max_schema_bytes

    def generate_template(self, prompt: Any, system_prompt: Any, schema: JsonValue = UNSET) -> JsonValue:
        set_context(operation="generateTemplate")
        fields = {"prompt": prompt, "systemPrompt": system_prompt}
        require_text_fields(fields, ErrorReason.MISSING_PROMPT)
        enforce_text_limit(fields, self.max_text_chars)
        enforce_schema_limit(schema, self.max_schema_bytes)

        return self._forward(
            "generateTemplate",
            system_prompt,
            prompt,
            schema=schema,
            failure_reason=ErrorReason.TEMPLATE_FAILED,
        )

    def revise_text(self, system_prompt: Any, text_to_revise: Any) -> JsonValue:
        set_context(operation="reviseText")
        fields = {"systemPrompt": system_prompt, "textToRevise": text_to_revise}
        require_text_fields(fields, ErrorReason.MISSING_REVISION_TEXT)
        enforce_text_limit(fields, self.max_text_chars)

        return self._forward(
            "reviseText",
            system_prompt,
            text_to_revise,
            failure_reason=ErrorReason.REVISION_FAILED,
        )

    def _forward(
        self,
        operation: Operation,
        system_prompt: str,
        content: str,
        *,
        failure_reason: ErrorReason,
        schema: JsonValue = UNSET,
    ) -> JsonValue:
        try:
            req = build_request(operation, system_prompt, content, schema)
            return self.provider.generate_content(req)
        except UpstreamRejectedError as e:
            logger.error(
                "Gemini API Error",
                extra={"upstream_status": e.status_code, "upstream_body": e.body},
            )
            raise internal_error(failure_reason) from e
        except LLMError as e:
            logger.error("Error calling Gemini API", extra={"error": str(e)})
            raise internal_error(failure_reason) from e
        except Exception as e:
            logger.exception("Unexpected error while forwarding")
            raise internal_error(failure_reason) from e
