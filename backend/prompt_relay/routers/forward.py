"""
forward.py
- Purpose: The two callable operations.
- Design: Keep router thin. Delegate validation and forwarding to RequestForwarder.
  Results are rendered here, not by response_model, so the upstream body
  goes back without a second serialization pass.
"""

from fastapi import APIRouter, Depends

from prompt_relay.api.deps import get_forwarder
from prompt_relay.core.responses import RelayJSONResponse
from prompt_relay.llm.types import UNSET
from prompt_relay.schemas.forward import CallableResult, GenerateTemplateCall, ReviseTextCall
from prompt_relay.services.forwarder import RequestForwarder

router = APIRouter(prefix="/api", tags=["Forward"])


@router.post("/generateTemplate", response_model=CallableResult, response_class=RelayJSONResponse)
def generate_template(call: GenerateTemplateCall, svc: RequestForwarder = Depends(get_forwarder)):
    data = call.data
    # An explicit "schema": null is forwarded; an omitted one is not.
    schema = data.response_schema if "response_schema" in data.model_fields_set else UNSET
    result = svc.generate_template(
        prompt=data.prompt,
        system_prompt=data.system_prompt,
        schema=schema,
    )
    return RelayJSONResponse({"result": result})


@router.post("/reviseText", response_model=CallableResult, response_class=RelayJSONResponse)
def revise_text(call: ReviseTextCall, svc: RequestForwarder = Depends(get_forwarder)):
    data = call.data
    result = svc.revise_text(system_prompt=data.system_prompt, text_to_revise=data.text_to_revise)
    return RelayJSONResponse({"result": result})
