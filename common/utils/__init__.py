"""
Utilities module - Common helpers for API responses, exceptions, sanitization and logging.
"""

from common.utils.responses import envelope, error_envelope
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
)
from common.utils.sanitize import Serializable, sanitize_payload, SENSITIVE_KEYS
from common.utils.logger import configure_logging, log_error

__all__ = [
    "envelope",
    "error_envelope",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "Serializable",
    "sanitize_payload",
    "SENSITIVE_KEYS",
    "configure_logging",
    "log_error",
]
