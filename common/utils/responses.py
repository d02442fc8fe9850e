"""
Standard API response envelope.

Every endpoint answers with the same two-key shape:

    {"data": <any>, "message": <str>}

Example:
    from common.utils import envelope

    @app.get("/programs")
    async def list_programs():
        programs = await service.list_programs()
        return envelope(programs, "List of programs")
"""

from typing import Any, Dict, Optional


def envelope(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard response envelope.

    Args:
        data: The response payload. None becomes an empty object so error
            responses still carry ``data: {}``.
        message: Human-readable message, already translated

    Returns:
        Dictionary with ``data`` and ``message`` keys
    """
    return {
        "data": {} if data is None else data,
        "message": message or "",
    }


def error_envelope(message: str) -> Dict[str, Any]:
    """Envelope used on every error path: empty data plus a message."""
    return envelope({}, message)
