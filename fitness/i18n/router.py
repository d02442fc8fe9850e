"""
FastAPI router for i18n endpoints.
"""

from fastapi import APIRouter, Request

from fitness.http import json_response
from fitness.i18n.language import get_supported_languages

router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get("/languages")
async def get_languages(request: Request):
    """
    Get list of supported languages.

    Returns every language the ``language`` header accepts, with the
    default flagged.
    """
    return json_response(request, get_supported_languages(), "List of supported languages")
