"""
Middleware and exception handling for the fitness API.
"""

from fitness.middleware.i18n import LanguageMiddleware
from fitness.middleware.sanitize import SanitizedJSONResponse

__all__ = ["LanguageMiddleware", "SanitizedJSONResponse"]
