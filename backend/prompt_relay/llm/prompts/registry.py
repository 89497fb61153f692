# prompt_relay/llm/prompts/registry.py

from dataclasses import dataclass

from prompt_relay.llm.prompts import templates
from prompt_relay.llm.types import UNSET, JsonValue, Operation, UpstreamRequest

@dataclass(frozen=True)
class PromptLayout:
    operation: Operation
    separator: str
    response_mime_type: str | None = None

    def compose(self, system_prompt: str, content: str) -> str:
        # Plain concatenation: caller text may contain anything, including braces.
        return system_prompt + self.separator + content

LAYOUTS: dict[str, PromptLayout] = {
    "generateTemplate": PromptLayout("generateTemplate", templates.USER_PROMPT_SEPARATOR, templates.JSON_MIME_TYPE),
    "reviseText": PromptLayout("reviseText", templates.TEXT_TO_REVISE_SEPARATOR),
}

def get_layout(operation: str) -> PromptLayout:
    if operation not in LAYOUTS:
        raise KeyError(f"Unknown operation: {operation}")
    return LAYOUTS[operation]

def build_request(operation: str, system_prompt: str, content: str, schema: JsonValue = UNSET) -> UpstreamRequest:
    layout = get_layout(operation)
    return UpstreamRequest(
        operation=layout.operation,
        text=layout.compose(system_prompt, content),
        response_mime_type=layout.response_mime_type,
        # Text completions never carry a schema, even if one slipped through.
        response_schema=schema if layout.response_mime_type else UNSET,
    )
