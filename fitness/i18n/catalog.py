"""
Process-wide translation catalog for the fitness API.

The locale files ship inside the package and are loaded once on first use.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from common.i18n import TranslationCatalog

from fitness.i18n.language import DEFAULT_LANGUAGE, SupportedLanguage

LOCALES_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=1)
def get_catalog() -> TranslationCatalog:
    """Load the catalog for every supported language (cached)."""
    return TranslationCatalog.from_directory(
        LOCALES_DIR,
        [language.value for language in SupportedLanguage],
        default_language=DEFAULT_LANGUAGE.value,
    )


def translate(
    key: str,
    language: Union[SupportedLanguage, str] = DEFAULT_LANGUAGE,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Translate and render a message key.

    Args:
        key: Message key (the English text)
        language: Target language
        params: Placeholder values

    Returns:
        Localized message; the rendered key when no translation exists
    """
    code = language.value if isinstance(language, SupportedLanguage) else language
    return get_catalog().t(key, code, params)
