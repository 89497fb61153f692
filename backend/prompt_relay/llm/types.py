# prompt_relay/llm/types.py
from dataclasses import dataclass
from typing import Any, Literal

# Arbitrary decoded JSON (object, array or scalar). Never inspected locally.
JsonValue = Any
JsonDict = dict[str, Any]

Operation = Literal["generateTemplate", "reviseText"]


class _Unset:
    """Marks a schema the caller never sent (distinct from JSON null)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

@dataclass(frozen=True)
class UpstreamRequest:
    operation: Operation
    text: str                       # the single user-turn text part

    # Only generateTemplate asks for JSON output
    response_mime_type: str | None = None   # e.g. "application/json"
    response_schema: JsonValue = UNSET      # opaque, passed through verbatim (null included)

    def to_payload(self) -> JsonDict:
        payload: JsonDict = {
            "contents": [{"role": "user", "parts": [{"text": self.text}]}],
        }
        if self.response_mime_type is not None:
            config: JsonDict = {"responseMimeType": self.response_mime_type}
            if self.response_schema is not UNSET:
                config["responseSchema"] = self.response_schema
            payload["generationConfig"] = config
        return payload
