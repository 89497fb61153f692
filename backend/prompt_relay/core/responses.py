"""
responses.py
- Purpose: JSON response used for relayed upstream bodies.
- Upstream text may hold lone UTF-16 surrogates (valid JSON escapes), which
  the default UTF-8 rendering cannot encode. Rendering with ASCII escapes
  sends them back exactly as they arrived.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class RelayJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, separators=(",", ":")).encode("ascii")
