"""
Bearer token helpers for FastAPI dependencies.

Example:
    from common.auth.dependencies import extract_bearer_token

    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise UnauthorizedException("Authentication token missing")
"""

from typing import Optional


def extract_bearer_token(authorization: Optional[str], scheme: str = "Bearer") -> Optional[str]:
    """
    Extract the token from an Authorization header value.

    Args:
        authorization: Raw header value, e.g. "Bearer <token>"
        scheme: Expected scheme, compared case-insensitively

    Returns:
        Token string if present and well-formed, None otherwise
    """
    if not authorization:
        return None

    parts = authorization.split()

    if len(parts) != 2:
        return None

    header_scheme, token = parts

    if header_scheme.lower() != scheme.lower():
        return None

    return token
