"""
JSON response class that strips sensitive fields before rendering.

Used as the application's default response class, so every JSON body,
including error bodies, passes through the sanitizer exactly once.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from common.utils.sanitize import sanitize_payload


class SanitizedJSONResponse(JSONResponse):
    """JSONResponse that sanitizes its content, then JSON-encodes it."""

    def render(self, content: Any) -> bytes:
        return super().render(jsonable_encoder(sanitize_payload(content)))
