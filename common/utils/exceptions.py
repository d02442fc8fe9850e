"""
Custom HTTP exceptions carrying translatable messages.

Extends FastAPI's HTTPException so every error raised by a service holds a
message key (looked up in the translation catalog when the response is
built) plus optional render parameters for its placeholders.

Example:
    from common.utils import NotFoundException

    @app.get("/exercises/{id}")
    async def get_exercise(id: int):
        exercise = await service.get(id)
        if not exercise:
            raise NotFoundException("Exercise not found")
        return exercise
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with a translatable message key.

    The key doubles as the English text, so an untranslated key still
    reads correctly.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Message key (English text) for the translation catalog
            params: Values for placeholders in the translated template
            headers: Optional response headers
        """
        self.message = message
        self.params = dict(params) if params else {}

        super().__init__(
            status_code=status_code,
            detail={"message": message, "params": self.params},
            headers=headers,
        )


class BadRequestException(APIException):
    """400 Bad Request - Invalid input or malformed request."""

    def __init__(
        self,
        message: str = "Bad request",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(400, message, params)


class UnauthorizedException(APIException):
    """401 Unauthorized - Missing or invalid authentication."""

    def __init__(
        self,
        message: str = "Authentication required",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(401, message, params, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenException(APIException):
    """403 Forbidden - Valid auth but insufficient permissions."""

    def __init__(
        self,
        message: str = "Forbidden",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(403, message, params)


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(404, message, params)


class ConflictException(APIException):
    """409 Conflict - Resource already exists or state conflict."""

    def __init__(
        self,
        message: str = "Conflict",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(409, message, params)


class InternalServerException(APIException):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(
        self,
        message: str = "Something went wrong",
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(500, message, params)
