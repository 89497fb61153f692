# prompt_relay/llm/telemetry.py

import logging
import time
from dataclasses import dataclass

logger = logging.getLogger("llm")

@dataclass
class LLMCallLog:
    provider: str
    model: str
    operation: str
    latency_ms: int
    ok: bool
    status_code: int | None = None
    error_type: str | None = None

def now_ms() -> int:
    return int(time.time() * 1000)

def redact(text: str, secret: str | None) -> str:
    """Strip the credential from a diagnostic string before it is logged."""
    if not secret:
        return text
    return text.replace(secret, "***")

def log_llm_call(item: LLMCallLog) -> None:
    logger.info(
        "llm_call provider=%s model=%s operation=%s latency_ms=%s status=%s ok=%s error=%s",
        item.provider,
        item.model,
        item.operation,
        item.latency_ms,
        item.status_code,
        item.ok,
        item.error_type,
    )
