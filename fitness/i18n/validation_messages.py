"""
Localization of field validation failures.

Validation rules report English phrases such as
"Password must be at least 6 characters long". This module turns the first
failure of a request into a message in the request language:

1. the field's display name is looked up in the catalog;
2. the phrase is classified and rewritten to its canonical template key,
   with numeric bounds read back out of the phrase;
3. the localized template is rendered with the display name and bounds.

Messages that already are templates pass through step 2 untouched.
Anything unrecognised is translated as a flat key.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Pattern, Tuple, Union

from fitness.i18n.catalog import get_catalog, translate
from fitness.i18n.language import SupportedLanguage

FIELD_NAME_PLACEHOLDER = "{fieldName}"
TEMPLATE_MARKERS = (FIELD_NAME_PLACEHOLDER, "{min}", "{max}")

REQUIRED = "{fieldName} is required"
CANNOT_BE_EMPTY = "{fieldName} cannot be empty"
POSITIVE_INTEGER = "{fieldName} must be a positive integer"
NON_NEGATIVE_INTEGER = "{fieldName} must be a non-negative integer"
VALID_EMAIL = "{fieldName} must be a valid email"
MIN_LENGTH = "{fieldName} must be at least {min} characters long"
BETWEEN = "{fieldName} must be between {min} and {max}"
ISO8601_DATE = "{fieldName} must be a valid ISO8601 date"
INVALID = "Invalid {fieldName}"

# Ordered; the first matching phrase wins.
PHRASE_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"^.+ is required$"), REQUIRED),
    (re.compile(r"^.+ cannot be empty$"), CANNOT_BE_EMPTY),
    (re.compile(r"^.+ must be a positive integer$"), POSITIVE_INTEGER),
    (re.compile(r"^.+ must be a non-negative integer$"), NON_NEGATIVE_INTEGER),
    (re.compile(r"^.+ must be a valid email$"), VALID_EMAIL),
    (re.compile(r"^.+ must be at least (?P<min>-?\d+) characters long$"), MIN_LENGTH),
    (re.compile(r"^.+ must be between (?P<min>-?\d+) and (?P<max>-?\d+)$"), BETWEEN),
    (re.compile(r"^.+ must be a valid ISO8601 date$"), ISO8601_DATE),
    (re.compile(r"^Invalid .+$"), INVALID),
)


@dataclass(frozen=True)
class ValidationFailure:
    """First field-level failure of a request."""

    field: Optional[str]
    message: str


def capitalize(name: str) -> str:
    """Upper-case the first letter only; the rest is kept as is."""
    return name[:1].upper() + name[1:]


def _code(language: Union[SupportedLanguage, str]) -> str:
    return language.value if isinstance(language, SupportedLanguage) else language


def resolve_display_name(field: str, language: Union[SupportedLanguage, str]) -> str:
    """
    Localized display name for a field.

    Tries the raw name, then the capitalized name. A lookup only counts
    when it yields something other than the key itself.
    """
    catalog = get_catalog()
    code = _code(language)

    translated = catalog.lookup(code, field)
    if translated != field:
        return translated

    capitalized = capitalize(field)
    translated = catalog.lookup(code, capitalized)
    if translated != capitalized:
        return translated

    return capitalized


def is_template(message: str) -> bool:
    return any(marker in message for marker in TEMPLATE_MARKERS)


def classify(message: str) -> Optional[Tuple[str, Dict[str, Any]]]:
    """
    Map an English rule phrase to its canonical template key.

    Returns:
        (template key, bound params) or None when no phrase rule matches
    """
    for pattern, template in PHRASE_RULES:
        match = pattern.match(message)
        if match:
            bounds = {name: int(value) for name, value in match.groupdict().items() if value is not None}
            return template, bounds
    return None


def localize_failure(
    failure: ValidationFailure,
    language: Union[SupportedLanguage, str],
) -> str:
    """
    Produce the final localized message for a validation failure.

    Args:
        failure: Field name plus English phrase or template key
        language: Request language

    Returns:
        Fully rendered message; never raises
    """
    message = failure.message

    if not failure.field:
        return translate(message, language)

    if is_template(message):
        template, params = message, {}
    else:
        classified = classify(message)
        if classified is None:
            return translate(message, language)
        template, params = classified

    params["fieldName"] = resolve_display_name(failure.field, language)
    return translate(template, language, params)
