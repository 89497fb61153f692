"""
forward.py (schemas)
- Purpose: Request/response DTOs for the two callable operations.
- Design: Bodies use the callable envelope ({"data": {...}} in,
  {"result": ...} out). Required fields are declared optional here so the
  service can report a missing field as InvalidArgument with a stable message.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateTemplateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    system_prompt: Optional[str] = Field(default=None, alias="systemPrompt")
    # Opaque response schema, forwarded verbatim
    response_schema: Any = Field(default=None, alias="schema")


class ReviseTextRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: Optional[str] = Field(default=None, alias="systemPrompt")
    text_to_revise: Optional[str] = Field(default=None, alias="textToRevise")


class GenerateTemplateCall(BaseModel):
    data: GenerateTemplateRequest


class ReviseTextCall(BaseModel):
    data: ReviseTextRequest


class CallableResult(BaseModel):
    """
    Success envelope. `result` is the upstream body, untouched.
    """
    result: Any
