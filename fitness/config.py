"""
Application settings for the fitness API.

Extends the common base settings with app-specific options.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Fitness API settings, loaded from environment variables or .env."""

    APP_NAME: str = "Fitness API"
    APP_VERSION: str = "1.0.0"

    # Validation
    PASSWORD_MIN_LENGTH: int = 6

    # Auth
    BCRYPT_ROUNDS: int = 10

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 100


settings = Settings()
