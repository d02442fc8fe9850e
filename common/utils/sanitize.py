"""
Outgoing payload sanitization.

Walks a JSON-bound payload and returns a copy without sensitive keys.
Domain objects that know how to flatten themselves (ORM models) implement
the ``Serializable`` capability and are converted before filtering.

Example:
    from common.utils.sanitize import sanitize_payload

    sanitize_payload({"data": {"user": {"passwordHash": "x", "name": "A"}}})
    # {"data": {"user": {"name": "A"}}}
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Iterable, Protocol, runtime_checkable

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SENSITIVE_KEYS: FrozenSet[str] = frozenset({"password", "passwordHash"})

# Payloads are serialized database results, so this is far beyond any real nesting.
MAX_DEPTH = 64


@runtime_checkable
class Serializable(Protocol):
    """Capability for objects that can flatten themselves to plain data."""

    def to_dict(self) -> Dict[str, Any]:
        ...


def sanitize_payload(
    value: Any,
    sensitive_keys: Iterable[str] = SENSITIVE_KEYS,
    max_depth: int = MAX_DEPTH,
) -> Any:
    """
    Return a deep copy of ``value`` with sensitive keys removed at every depth.

    Args:
        value: Payload to sanitize (primitives, sequences, mappings, models)
        sensitive_keys: Keys to drop wherever they appear
        max_depth: Nesting limit; deeper values are replaced with None

    Returns:
        Sanitized plain data, key order preserved
    """
    denylist = sensitive_keys if isinstance(sensitive_keys, frozenset) else frozenset(sensitive_keys)
    return _sanitize(value, denylist, 0, max_depth)


def _sanitize(value: Any, denylist: FrozenSet[str], depth: int, max_depth: int) -> Any:
    if depth > max_depth:
        logger.warning(f"Payload nesting exceeded {max_depth} levels, value dropped")
        return None

    if isinstance(value, (list, tuple)):
        return [_sanitize(item, denylist, depth + 1, max_depth) for item in value]

    if isinstance(value, Serializable):
        value = value.to_dict()
    elif isinstance(value, BaseModel):
        value = value.model_dump()

    if isinstance(value, Mapping):
        return {
            key: _sanitize(item, denylist, depth + 1, max_depth)
            for key, item in value.items()
            if key not in denylist
        }

    return value
