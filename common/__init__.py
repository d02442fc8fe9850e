"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across multiple
projects:

- database: Async SQL connection with SQLAlchemy
- auth: Pluggable authentication (JWT + bcrypt)
- i18n: Translation catalog and template rendering
- utils: Response envelope, exceptions, payload sanitization, logging
- config: Base settings class
"""

from common.database import SQLDatabase, Base, TimestampMixin
from common.auth import AuthProvider, JWTAuth, extract_bearer_token
from common.i18n import TranslationCatalog, render
from common.utils import (
    envelope,
    error_envelope,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    sanitize_payload,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "SQLDatabase",
    "Base",
    "TimestampMixin",
    # Auth
    "AuthProvider",
    "JWTAuth",
    "extract_bearer_token",
    # i18n
    "TranslationCatalog",
    "render",
    # Utils
    "envelope",
    "error_envelope",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "sanitize_payload",
    # Config
    "BaseAppSettings",
]
