"""
i18n middleware for request-scoped language detection.

Attaches the resolved language to ``request.state.language`` before any
route logic runs.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fitness.i18n.language import resolve_language


class LanguageMiddleware(BaseHTTPMiddleware):
    """
    Resolves the ``language`` header once per request.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if getattr(request.state, "language", None) is None:
            request.state.language = resolve_language(request.headers)
        return await call_next(request)
