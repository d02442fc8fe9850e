"""
User service for account lookup and admin updates.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from common.utils.exceptions import ConflictException, NotFoundException
from fitness.models import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Manages user records.
    """

    # Wire name -> model attribute for fields an admin may change.
    EDITABLE_FIELDS = {
        "name": "name",
        "surname": "surname",
        "nickName": "nick_name",
        "age": "age",
        "role": "role",
    }

    def __init__(self, session: AsyncSession):
        """
        Initialize UserService.

        Args:
            session: Request-scoped database session
        """
        self._session = session

    async def list_users(self) -> List[User]:
        """All active users with every column (admin view)."""
        result = await self._session.execute(
            select(User).where(User.deleted_at.is_(None)).order_by(User.id)
        )
        return list(result.scalars().all())

    async def list_nicknames(self) -> List[User]:
        """All active users with only id and nickName loaded."""
        result = await self._session.execute(
            select(User)
            .options(load_only(User.id, User.nick_name))
            .where(User.deleted_at.is_(None))
            .order_by(User.id)
        )
        return list(result.scalars().all())

    async def find_user(self, user_id: int) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.id == user_id, User.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_user(self, user_id: int) -> User:
        """
        Get an active user by ID.

        Raises:
            NotFoundException: If no active user has this ID
        """
        user = await self.find_user(user_id)
        if not user:
            raise NotFoundException("User not found")
        return user

    async def get_profile(self, user_id: int) -> Dict[str, Any]:
        """
        Get the public profile fields of a user.

        Returns:
            dict with name, surname, age and nickName
        """
        user = await self.get_user(user_id)
        return {
            "name": user.name,
            "surname": user.surname,
            "age": user.age,
            "nickName": user.nick_name,
        }

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> User:
        """
        Apply a partial update.

        Args:
            user_id: ID of the user to change
            updates: Wire-named fields; None values and unknown keys are ignored

        Returns:
            The updated user

        Raises:
            NotFoundException: If the user does not exist
            ConflictException: If the new nickName is taken
        """
        user = await self.get_user(user_id)

        for field, attribute in self.EDITABLE_FIELDS.items():
            value = updates.get(field)
            if value is not None:
                setattr(user, attribute, value)

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.info(f"Update of user {user_id} rejected: {e.orig}")
            raise ConflictException("User with given nickName already exists")

        logger.info(f"Updated user {user_id}: {sorted(k for k, v in updates.items() if v is not None)}")
        return user
