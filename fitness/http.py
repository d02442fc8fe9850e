"""
Response building for route handlers.

Every endpoint answers with ``{"data": ..., "message": ...}`` where the
message is the catalog translation of a message key in the request
language.

Example:
    @router.get("")
    async def list_programs(request: Request, service: ...):
        programs = await service.list_programs()
        return json_response(request, programs, "List of programs")
"""

from typing import Any, Dict, Mapping, Optional

from starlette.requests import HTTPConnection

from common.utils.responses import envelope
from fitness.i18n.catalog import translate
from fitness.i18n.language import get_request_language
from fitness.middleware.sanitize import SanitizedJSONResponse


def build_response(
    request: HTTPConnection,
    data: Any = None,
    message: str = "",
    params: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the response envelope with a translated message.

    Args:
        request: Current request (its resolved language is used)
        data: Payload; None becomes an empty object
        message: Message key
        params: Placeholder values for the translated template

    Returns:
        {"data": ..., "message": ...}
    """
    language = get_request_language(request)
    return envelope(data, translate(message, language, params))


def json_response(
    request: HTTPConnection,
    data: Any = None,
    message: str = "",
    status_code: int = 200,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> SanitizedJSONResponse:
    """
    Build a sanitized JSON response.

    The body is rendered immediately, so ORM objects in ``data`` are read
    while their session is still open.
    """
    return SanitizedJSONResponse(
        build_response(request, data, message, params),
        status_code=status_code,
        headers=dict(headers) if headers else None,
    )
