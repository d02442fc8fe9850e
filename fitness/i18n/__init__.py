"""
i18n for the fitness API - request language, catalog and validation messages.
"""

from fitness.i18n.language import (
    SupportedLanguage,
    DEFAULT_LANGUAGE,
    LANGUAGE_HEADER,
    resolve_language,
    get_request_language,
)
from fitness.i18n.catalog import get_catalog, translate
from fitness.i18n.validation_messages import ValidationFailure, localize_failure

__all__ = [
    "SupportedLanguage",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_HEADER",
    "resolve_language",
    "get_request_language",
    "get_catalog",
    "translate",
    "ValidationFailure",
    "localize_failure",
]
