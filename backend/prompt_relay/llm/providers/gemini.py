# prompt_relay/llm/providers/gemini.py
from __future__ import annotations

import json
from dataclasses import dataclass

import httpx
from pydantic import SecretStr

from prompt_relay.llm.errors import MissingCredentialError, UpstreamRejectedError, UpstreamTransportError
from prompt_relay.llm.telemetry import LLMCallLog, log_llm_call, now_ms, redact
from prompt_relay.llm.types import JsonValue, UpstreamRequest


@dataclass
class GeminiProvider:
    """
    Gemini generateContent over plain REST (httpx).
    Single attempt, no retries. The decoded body is returned untouched.
    """
    api_key: SecretStr | None
    http: httpx.Client
    url: str
    model: str

    def _key(self) -> str:
        key = self.api_key.get_secret_value() if self.api_key is not None else ""
        if not key:
            raise MissingCredentialError("GEMINI_API_KEY is missing")
        return key

    def generate_content(self, req: UpstreamRequest) -> JsonValue:
        key = self._key()
        start_ms = now_ms()
        status_code: int | None = None

        try:
            # ASCII escapes: lone surrogates stay encodable
            body = json.dumps(req.to_payload()).encode("ascii")
            resp = self.http.post(
                self.url,
                params={"key": key},
                headers={"Content-Type": "application/json"},
                content=body,
            )
            status_code = resp.status_code

            if not resp.is_success:
                raise UpstreamRejectedError(resp.status_code, redact(resp.text, key))

            result = resp.json()

        except UpstreamRejectedError as e:
            self._log(req, start_ms, ok=False, status_code=status_code, error=e)
            raise
        # ---- everything else on the call path is a transport/encoding failure ----
        except (httpx.HTTPError, TypeError, ValueError) as e:
            self._log(req, start_ms, ok=False, status_code=status_code, error=e)
            raise UpstreamTransportError(redact(f"Gemini call failed: {type(e).__name__}: {e}", key)) from e

        self._log(req, start_ms, ok=True, status_code=status_code)
        return result

    def _log(
        self,
        req: UpstreamRequest,
        start_ms: int,
        *,
        ok: bool,
        status_code: int | None,
        error: Exception | None = None,
    ) -> None:
        log_llm_call(
            LLMCallLog(
                provider="gemini",
                model=self.model,
                operation=req.operation,
                latency_ms=(now_ms() - start_ms),
                ok=ok,
                status_code=status_code,
                error_type=type(error).__name__ if error else None,
            )
        )
