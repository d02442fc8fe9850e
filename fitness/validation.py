"""
Reusable field validation rules.

Each factory returns a pydantic ``BeforeValidator`` that raises a
``field_rule`` error carrying an English phrase (e.g. "Age must be a
non-negative integer") and the field's label. The error handler turns the
first such error into a localized message.

Example:
    class TrackRequest(BaseModel):
        durationSeconds: Annotated[int, positive_int("durationSeconds")]

    @router.get("/{exercise_id}")
    async def get_exercise(exercise_id: Annotated[int, Path(), param_id("Exercise id")]):
        ...
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, NoReturn, Optional, Type, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

FIELD_RULE_ERROR = "field_rule"

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")


def fail(label: str, phrase: str) -> NoReturn:
    """Raise a rule violation for ``label``."""
    raise PydanticCustomError(FIELD_RULE_ERROR, phrase, {"field": label})


def _as_int(value: Any) -> Optional[int]:
    """Lenient integer coercion; None when the value is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_TEXT.match(value.strip()):
        return int(value.strip())
    return None


def required_string(label: str, strip: bool = True) -> BeforeValidator:
    """Non-empty string; whitespace is trimmed unless ``strip`` is False."""

    def validate(value: Any) -> str:
        if isinstance(value, str):
            cleaned = value.strip()
            if cleaned:
                return cleaned if strip else value
        fail(label, f"{label} is required")

    return BeforeValidator(validate)


def optional_string(label: str) -> BeforeValidator:
    """May be omitted, but if present must be a non-empty string (trimmed)."""

    def validate(value: Any) -> str:
        if isinstance(value, str) and value.strip():
            return value.strip()
        fail(label, f"{label} cannot be empty")

    return BeforeValidator(validate)


def email_address(label: str = "Email") -> BeforeValidator:
    """Syntactically valid email address (no DNS lookups)."""

    def validate(value: Any) -> str:
        if isinstance(value, str):
            candidate = value.strip()
            try:
                validate_email(candidate, check_deliverability=False)
                return candidate
            except EmailNotValidError:
                pass
        fail(label, f"{label} must be a valid email")

    return BeforeValidator(validate)


def positive_int(label: str) -> BeforeValidator:
    """Integer >= 1; digit strings are accepted."""

    def validate(value: Any) -> int:
        number = _as_int(value)
        if number is None or number < 1:
            fail(label, f"{label} must be a positive integer")
        return number

    return BeforeValidator(validate)


def non_negative_int(label: str) -> BeforeValidator:
    """Integer >= 0; digit strings are accepted."""

    def validate(value: Any) -> int:
        number = _as_int(value)
        if number is None or number < 0:
            fail(label, f"{label} must be a non-negative integer")
        return number

    return BeforeValidator(validate)


def int_between(label: str, minimum: int, maximum: int) -> BeforeValidator:
    """Integer in the inclusive range [minimum, maximum]."""

    def validate(value: Any) -> int:
        number = _as_int(value)
        if number is None or not minimum <= number <= maximum:
            fail(label, f"{label} must be between {minimum} and {maximum}")
        return number

    return BeforeValidator(validate)


def min_length(label: str, length: int) -> BeforeValidator:
    """String of at least ``length`` characters, taken as is."""

    def validate(value: Any) -> str:
        if not isinstance(value, str) or len(value) < length:
            fail(label, f"{label} must be at least {length} characters long")
        return value

    return BeforeValidator(validate)


def one_of(label: str, allowed: Union[Type[Enum], Iterable[str]]) -> BeforeValidator:
    """Value must be one of ``allowed`` (an Enum class or plain strings)."""
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        values = frozenset(member.value for member in allowed)
    else:
        values = frozenset(allowed)

    def validate(value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str) or value not in values:
            fail(label, f"Invalid {label}")
        return value

    return BeforeValidator(validate)


def iso8601_date(label: str) -> BeforeValidator:
    """ISO 8601 date or datetime string; naive values are taken as UTC."""

    def validate(value: Any) -> datetime:
        parsed: Optional[datetime] = None
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, str) and value.strip():
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                parsed = None
        if parsed is None:
            fail(label, f"{label} must be a valid ISO8601 date")
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    return BeforeValidator(validate)


def param_id(label: str) -> BeforeValidator:
    """Path identifier: a positive integer."""
    return positive_int(label)
