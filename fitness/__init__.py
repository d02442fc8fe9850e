"""
Fitness application-specific code.

This package contains all fitness-specific implementations:
- models: SQLAlchemy tables (User, Program, Exercise, UserExercise)
- services: Business logic per resource
- routers: HTTP endpoints
- i18n: Language resolution, locale files (en, sk) and validation messages
- config: Application settings

Uses generic infrastructure from the common/ package.
"""

from fitness.config import settings

__all__ = ["settings"]
