"""
Request language resolution.

The client picks a language with the ``language`` header. Anything that is
not a supported code (compared case-insensitively) resolves to English.
"""

from enum import Enum
from typing import List, Mapping, Optional

from starlette.requests import HTTPConnection

LANGUAGE_HEADER = "language"


class SupportedLanguage(str, Enum):
    EN = "en"
    SK = "sk"


DEFAULT_LANGUAGE = SupportedLanguage.EN

LANGUAGE_NAMES = {
    SupportedLanguage.EN: ("English", "English"),
    SupportedLanguage.SK: ("Slovak", "Slovenčina"),
}


def resolve_language(headers: Mapping[str, str]) -> SupportedLanguage:
    """
    Resolve the requested language from request headers.

    Args:
        headers: Request headers. Starlette headers are case-insensitive;
            plain dicts must use the lowercase header name.

    Returns:
        The matching SupportedLanguage, or DEFAULT_LANGUAGE
    """
    raw: Optional[str] = headers.get(LANGUAGE_HEADER)
    if not raw:
        return DEFAULT_LANGUAGE

    candidate = raw.strip().lower()
    for language in SupportedLanguage:
        if language.value == candidate:
            return language
    return DEFAULT_LANGUAGE


def get_request_language(request: HTTPConnection) -> SupportedLanguage:
    """Language resolved for this request, or the default when unset."""
    return getattr(request.state, "language", None) or DEFAULT_LANGUAGE


def get_supported_languages() -> List[dict]:
    """
    Get list of supported languages with metadata.

    Returns:
        List of language dicts:
            [
                { "code": "en", "name": "English", "nativeName": "English", "isDefault": True },
                { "code": "sk", "name": "Slovak", "nativeName": "Slovenčina", "isDefault": False }
            ]
    """
    return [
        {
            "code": language.value,
            "name": LANGUAGE_NAMES[language][0],
            "nativeName": LANGUAGE_NAMES[language][1],
            "isDefault": language is DEFAULT_LANGUAGE,
        }
        for language in SupportedLanguage
    ]
