"""
API routers for the fitness application.
"""

from fitness.routers.auth import router as auth_router
from fitness.routers.users import router as users_router
from fitness.routers.exercises import router as exercises_router
from fitness.routers.programs import router as programs_router
from fitness.routers.user_exercises import router as user_exercises_router
from fitness.i18n.router import router as i18n_router

__all__ = [
    "auth_router",
    "users_router",
    "exercises_router",
    "programs_router",
    "user_exercises_router",
    "i18n_router",
]
