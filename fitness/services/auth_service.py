"""
Auth service for registration and login.

Password hashing and token signing are delegated to the auth provider;
this service owns the user lookups around them.
"""

import logging
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from common.auth import AuthProvider
from common.utils.exceptions import BadRequestException, ConflictException, UnauthorizedException
from fitness.enums import UserRole
from fitness.models import User

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registers users and issues access tokens.
    """

    def __init__(self, session: AsyncSession, auth: AuthProvider):
        """
        Initialize AuthService.

        Args:
            session: Request-scoped database session
            auth: Provider for password hashing and tokens
        """
        self._session = session
        self._auth = auth

    async def _find_by(self, **criteria) -> Optional[User]:
        result = await self._session.execute(select(User).filter_by(**criteria))
        return result.scalars().first()

    async def register(
        self,
        name: str,
        surname: str,
        nick_name: str,
        email: str,
        age: int,
        role: UserRole,
        password: str,
    ) -> User:
        """
        Create a new user account.

        Returns:
            The created user

        Raises:
            BadRequestException: If the email is already registered
            ConflictException: If the nickName is already taken
        """
        if await self._find_by(email=email):
            logger.info("Registration rejected: email already registered")
            raise BadRequestException("User with given email already exists")

        if await self._find_by(nick_name=nick_name):
            logger.info("Registration rejected: nickName already taken")
            raise ConflictException("User with given nickName already exists")

        # bcrypt is CPU bound
        password_hash = await run_in_threadpool(self._auth.hash_password, password)

        user = User(
            name=name,
            surname=surname,
            nick_name=nick_name,
            email=email,
            age=age,
            role=role,
            password_hash=password_hash,
        )
        self._session.add(user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            logger.info(f"Registration rejected by unique constraint: {e.orig}")
            raise BadRequestException("User with given email already exists")

        logger.info(f"Registered user {user.id} ({role.value})")
        return user

    async def login(self, email: str, password: str) -> Dict[str, str]:
        """
        Verify credentials and issue a token.

        Returns:
            dict with the signed access token

        Raises:
            UnauthorizedException: If the email is unknown or the password is wrong
        """
        user = await self._find_by(email=email, deleted_at=None)
        if not user:
            raise UnauthorizedException("Invalid credentials")

        is_valid = await run_in_threadpool(self._auth.verify_password, password, user.password_hash)
        if not is_valid:
            raise UnauthorizedException("Invalid credentials")

        token = await self._auth.create_token(
            str(user.id),
            role=user.role.value,
            email=user.email,
        )
        logger.info(f"User {user.id} logged in")
        return {"token": token}
