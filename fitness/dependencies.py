"""
FastAPI dependencies for the fitness application.

Provides dependency injection for the database session, the auth provider,
request-scoped services and the authentication / role guards.
"""

import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from common.auth import AuthProvider, JWTAuth, extract_bearer_token
from common.database import get_main_database
from common.utils.exceptions import ForbiddenException, UnauthorizedException
from fitness.config import Settings, settings
from fitness.enums import UserRole
from fitness.services import (
    AuthService,
    ExerciseService,
    ProgramService,
    UserExerciseService,
    UserService,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_jwt_auth: Optional[JWTAuth] = None


def init_all_services(app_settings: Settings = settings) -> None:
    """Create process-wide services. Called once from the app lifespan."""
    global _jwt_auth
    _jwt_auth = JWTAuth(
        secret=app_settings.JWT_SECRET,
        algorithm=app_settings.JWT_ALGORITHM,
        access_token_expire_minutes=app_settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        bcrypt_rounds=app_settings.BCRYPT_ROUNDS,
    )
    logger.info("Auth services initialized")


def get_jwt_auth() -> AuthProvider:
    """Get auth provider instance."""
    if _jwt_auth is None:
        raise RuntimeError("Auth services not initialized.")
    return _jwt_auth


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits when the request succeeds."""
    async with get_main_database().session() as session:
        yield session


# ─────────────────────────────────────────────────────────────────
# Service getters
# ─────────────────────────────────────────────────────────────────

def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    auth: Annotated[AuthProvider, Depends(get_jwt_auth)],
) -> AuthService:
    return AuthService(session, auth)


def get_user_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserService:
    return UserService(session)


def get_exercise_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ExerciseService:
    return ExerciseService(session, default_page_limit=settings.DEFAULT_PAGE_LIMIT)


def get_program_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ProgramService:
    return ProgramService(session)


def get_user_exercise_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserExerciseService:
    return UserExerciseService(session)


# ─────────────────────────────────────────────────────────────────
# Authentication
# ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity carried by a verified access token."""

    id: int
    role: UserRole
    email: str


async def require_auth(
    request: Request,
    auth: Annotated[AuthProvider, Depends(get_jwt_auth)],
) -> AuthenticatedUser:
    """
    Dependency that requires a valid bearer token.

    Raises:
        UnauthorizedException: Header missing or token invalid / expired

    Side Effects:
        Attaches the user to request.state.user
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise UnauthorizedException("Authentication token missing")

    try:
        claims = await auth.verify_token(token)
        user = AuthenticatedUser(
            id=int(claims["sub"]),
            role=UserRole(claims.get("role")),
            email=claims.get("email", ""),
        )
    except (ValueError, KeyError) as e:
        logger.info(f"JWT verification failed: {e}")
        raise UnauthorizedException("Invalid or expired token")

    request.state.user = user
    return user


def require_roles(*roles: UserRole):
    """
    Factory for a dependency that admits only the given roles.

    Returns:
        Dependency returning the authenticated user

    Raises:
        ForbiddenException: If the user's role is not allowed
    """
    allowed = frozenset(roles)

    async def check_role(
        user: Annotated[AuthenticatedUser, Depends(require_auth)],
    ) -> AuthenticatedUser:
        if user.role not in allowed:
            raise ForbiddenException()
        return user

    return check_role


CurrentUser = Annotated[AuthenticatedUser, Depends(require_auth)]
AdminUser = Annotated[AuthenticatedUser, Depends(require_roles(UserRole.ADMIN))]
RegularUser = Annotated[AuthenticatedUser, Depends(require_roles(UserRole.USER))]
