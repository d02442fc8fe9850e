"""
Translation catalog with placeholder rendering.

Loads one flat JSON table per language at startup and serves lookups from
read-only mappings. Keys are the English message text, so a key with no
translation still reads as a usable message.

Example:
    # Directory structure:
    # locales/
    #   en.json
    #   sk.json

    from common.i18n import TranslationCatalog

    catalog = TranslationCatalog.from_directory("./locales", ["en", "sk"])

    # Simple lookup
    catalog.lookup("sk", "Exercise created")

    # With interpolation
    catalog.t("{fieldName} is required", "sk", {"fieldName": "Meno"})
"""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

# A placeholder is any brace-delimited name without nested braces.
_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def render(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute ``{name}`` placeholders with values from ``params``.

    Every occurrence of a known placeholder is replaced by ``str(value)``.
    Placeholders without a matching parameter are left as they are, and
    unused parameters are ignored. Names are compared literally, so names
    containing regex metacharacters are safe.

    Args:
        template: Text containing zero or more ``{name}`` placeholders
        params: Placeholder values

    Returns:
        Rendered text
    """
    if not params or "{" not in template:
        return template

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


class TranslationCatalog:
    """
    Immutable per-language message tables.

    Built once at startup and never mutated, so it can be shared freely
    across concurrent requests.
    """

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, str]],
        default_language: str = "en",
    ):
        """
        Initialize the catalog.

        Args:
            tables: Mapping of language code to {message key: template}
            default_language: Language used when an unsupported code is given
        """
        self.default_language = default_language
        self._tables: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {lang: MappingProxyType(dict(table)) for lang, table in tables.items()}
        )

    @classmethod
    def from_directory(
        cls,
        locales_dir: str | Path,
        languages: Iterable[str],
        default_language: str = "en",
    ) -> "TranslationCatalog":
        """
        Load ``<locales_dir>/<lang>.json`` for every requested language.

        Unreadable or malformed files are logged and produce an empty table,
        which degrades every lookup in that language to the raw key.
        """
        locales_path = Path(locales_dir)
        tables: Dict[str, Dict[str, str]] = {}

        for lang in languages:
            file_path = locales_path / f"{lang}.json"
            tables[lang] = cls._load_table(file_path)

        logger.info(
            f"Loaded translations for {len(tables)} languages, "
            f"{sum(len(t) for t in tables.values())} messages"
        )
        return cls(tables, default_language=default_language)

    @staticmethod
    def _load_table(file_path: Path) -> Dict[str, str]:
        """Read one flat JSON translation table."""
        if not file_path.exists():
            logger.warning(f"Translation file not found: {file_path}")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse {file_path}: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Failed to read {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Translation file {file_path} is not a JSON object")
            return {}

        return {str(key): str(value) for key, value in data.items()}

    def lookup(self, language: str, key: str) -> str:
        """
        Return the template for ``key`` in ``language``.

        Falls back to the key itself when the language or key is unknown,
        or when the stored template is empty.
        """
        table = self._tables.get(language)
        if table is None:
            table = self._tables.get(self.default_language, {})
        return table.get(key) or key

    def has(self, language: str, key: str) -> bool:
        """Check if a non-empty translation exists for ``key``."""
        return bool(self._tables.get(language, {}).get(key))

    def t(
        self,
        key: str,
        language: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Translate a key and render its placeholders.

        Args:
            key: Message key
            language: Target language code
            params: Placeholder values such as fieldName, min, max

        Returns:
            Rendered translation, or the rendered key if untranslated
        """
        return render(self.lookup(language, key), params)

    def get_languages(self) -> List[str]:
        """Get list of languages with a loaded table."""
        return list(self._tables.keys())

    def keys(self, language: str) -> List[str]:
        """Get all message keys for a language."""
        return list(self._tables.get(language, {}).keys())
