"""
Exercise service: listing with filters, and admin CRUD.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from common.utils.exceptions import NotFoundException
from fitness.enums import ExerciseDifficulty
from fitness.models import Exercise, Program

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ExerciseService:
    """
    Manages exercises and their program membership.
    """

    def __init__(self, session: AsyncSession, default_page_limit: int = 100):
        """
        Initialize ExerciseService.

        Args:
            session: Request-scoped database session
            default_page_limit: Page size used when only a page number is given
        """
        self._session = session
        self._default_page_limit = default_page_limit

    async def list_exercises(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        program_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Exercise]:
        """
        List active exercises with their program.

        Args:
            page: 1-based page number; enables pagination
            limit: Page size; enables pagination
            program_id: Only exercises in this program
            search: Case-insensitive substring of the name

        Returns:
            Exercises ordered by ID
        """
        query = (
            select(Exercise)
            .options(selectinload(Exercise.program))
            .where(Exercise.deleted_at.is_(None))
            .order_by(Exercise.id)
        )

        if program_id is not None:
            query = query.where(Exercise.program_id == program_id)

        if search:
            query = query.where(Exercise.name.ilike(f"%{_escape_like(search)}%", escape="\\"))

        if page is not None or limit is not None:
            page_size = limit or self._default_page_limit
            query = query.offset(((page or 1) - 1) * page_size).limit(page_size)

        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def find_exercise(self, exercise_id: int) -> Optional[Exercise]:
        result = await self._session.execute(
            select(Exercise).where(Exercise.id == exercise_id, Exercise.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_exercise(self, exercise_id: int) -> Exercise:
        """
        Raises:
            NotFoundException: If no active exercise has this ID
        """
        exercise = await self.find_exercise(exercise_id)
        if not exercise:
            raise NotFoundException("Exercise not found")
        return exercise

    async def _ensure_program(self, program_id: int) -> Program:
        result = await self._session.execute(
            select(Program).where(Program.id == program_id, Program.deleted_at.is_(None))
        )
        program = result.scalar_one_or_none()
        if not program:
            raise NotFoundException("Program not found")
        return program

    async def create_exercise(
        self,
        name: str,
        difficulty: ExerciseDifficulty,
        program_id: Optional[int] = None,
    ) -> Exercise:
        """
        Create an exercise, optionally inside a program.

        Raises:
            NotFoundException: If the program does not exist
        """
        if program_id:
            await self._ensure_program(program_id)

        exercise = Exercise(name=name, difficulty=difficulty, program_id=program_id)
        self._session.add(exercise)
        await self._session.flush()

        logger.info(f"Created exercise {exercise.id}")
        return exercise

    async def update_exercise(
        self,
        exercise_id: int,
        name: Optional[str] = None,
        difficulty: Optional[ExerciseDifficulty] = None,
        program_id: Optional[int] = None,
    ) -> Exercise:
        """
        Partially update an exercise. None means "keep the current value".

        Raises:
            NotFoundException: If the exercise or the new program does not exist
        """
        exercise = await self.get_exercise(exercise_id)

        if program_id:
            await self._ensure_program(program_id)
            exercise.program_id = program_id
        if name is not None:
            exercise.name = name
        if difficulty is not None:
            exercise.difficulty = difficulty

        await self._session.flush()
        logger.info(f"Updated exercise {exercise_id}")
        return exercise

    async def delete_exercise(self, exercise_id: int) -> None:
        """
        Soft-delete an exercise.

        Raises:
            NotFoundException: If the exercise does not exist
        """
        exercise = await self.get_exercise(exercise_id)
        exercise.soft_delete()
        await self._session.flush()
        logger.info(f"Deleted exercise {exercise_id}")
