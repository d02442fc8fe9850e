"""
User exercise service: the log of exercises a user has completed.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from common.database import utcnow
from common.utils.exceptions import ForbiddenException, NotFoundException
from fitness.models import Exercise, UserExercise

logger = logging.getLogger(__name__)


class UserExerciseService:
    """
    Tracks completed exercises per user.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_completed(self, user_id: int) -> List[UserExercise]:
        """Active log entries of one user, with the exercise included."""
        result = await self._session.execute(
            select(UserExercise)
            .options(selectinload(UserExercise.exercise))
            .where(UserExercise.user_id == user_id, UserExercise.deleted_at.is_(None))
            .order_by(UserExercise.id)
        )
        return list(result.scalars().all())

    async def track(
        self,
        user_id: int,
        exercise_id: int,
        duration_seconds: int,
        completed_at: Optional[datetime] = None,
    ) -> UserExercise:
        """
        Record a completed exercise.

        Args:
            user_id: Owner of the entry
            exercise_id: Completed exercise
            duration_seconds: Time spent
            completed_at: Completion time; defaults to now

        Raises:
            NotFoundException: If the exercise does not exist
        """
        result = await self._session.execute(
            select(Exercise.id).where(Exercise.id == exercise_id, Exercise.deleted_at.is_(None))
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundException("Exercise not found")

        entry = UserExercise(
            user_id=user_id,
            exercise_id=exercise_id,
            duration_seconds=duration_seconds,
            completed_at=completed_at or utcnow(),
        )
        self._session.add(entry)
        await self._session.flush()

        logger.info(f"User {user_id} completed exercise {exercise_id}")
        return entry

    async def delete(self, user_id: int, user_exercise_id: int) -> None:
        """
        Soft-delete one of the user's own log entries.

        Raises:
            NotFoundException: If the entry does not exist
            ForbiddenException: If the entry belongs to another user
        """
        result = await self._session.execute(
            select(UserExercise).where(
                UserExercise.id == user_exercise_id,
                UserExercise.deleted_at.is_(None),
            )
        )
        entry = result.scalar_one_or_none()

        if not entry:
            raise NotFoundException("User completed exercise not found")
        if entry.user_id != user_id:
            raise ForbiddenException("User can remove only his own completed exercises")

        entry.soft_delete()
        await self._session.flush()
        logger.info(f"User {user_id} deleted completed exercise {user_exercise_id}")
