# prompt_relay/llm/errors.py
class LLMError(Exception):
    """Base upstream error (wrapped)."""

class UpstreamRejectedError(LLMError):
    """Upstream answered with a non-success status. Body kept for operators only."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Gemini API responded with HTTP {status_code}")
        self.status_code = status_code
        self.body = body

class UpstreamTransportError(LLMError):
    """Network failure, timeout, or JSON encode/decode failure."""

class MissingCredentialError(LLMError):
    """GEMINI_API_KEY was not provisioned."""
