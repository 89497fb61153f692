from typing import Generator

import httpx
from fastapi import Depends

from prompt_relay.core.config import settings
from prompt_relay.llm.providers.gemini import GeminiProvider
from prompt_relay.services.forwarder import RequestForwarder


def get_http_client() -> Generator[httpx.Client, None, None]:
    """
    Yields an outbound HTTP client per request.
    Closed even on exceptions. Override in tests to stub the upstream.
    """
    with httpx.Client(timeout=settings.LLM_TIMEOUT_SECONDS) as client:
        yield client


def get_gemini_provider(http: httpx.Client = Depends(get_http_client)) -> GeminiProvider:
    """
    The credential is read from settings here and injected, so tests can
    substitute a fake key without touching the environment.
    """
    return GeminiProvider(
        api_key=settings.GEMINI_API_KEY,
        http=http,
        url=settings.generate_content_url,
        model=settings.GEMINI_MODEL,
    )


def get_forwarder(provider: GeminiProvider = Depends(get_gemini_provider)) -> RequestForwarder:
    return RequestForwarder(
        provider,
        max_text_chars=settings.MAX_TEXT_CHARS,
        max_schema_bytes=settings.MAX_SCHEMA_BYTES,
    )
