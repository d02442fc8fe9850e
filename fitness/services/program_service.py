"""
Program service: listing programs and managing which exercises they hold.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from common.utils.exceptions import NotFoundException
from fitness.models import Exercise, Program

logger = logging.getLogger(__name__)


class ProgramService:
    """
    Manages training programs.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_programs(self) -> List[Program]:
        result = await self._session.execute(
            select(Program).where(Program.deleted_at.is_(None)).order_by(Program.id)
        )
        return list(result.scalars().all())

    async def get_program(self, program_id: int) -> Program:
        """
        Raises:
            NotFoundException: If no active program has this ID
        """
        result = await self._session.execute(
            select(Program).where(Program.id == program_id, Program.deleted_at.is_(None))
        )
        program = result.scalar_one_or_none()
        if not program:
            raise NotFoundException("Program not found")
        return program

    async def _find_exercise(self, exercise_id: int):
        result = await self._session.execute(
            select(Exercise).where(Exercise.id == exercise_id, Exercise.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def add_exercise(self, program_id: int, exercise_id: int) -> Exercise:
        """
        Move an exercise into a program.

        Returns:
            The updated exercise

        Raises:
            NotFoundException: If the program or the exercise does not exist
        """
        await self.get_program(program_id)

        exercise = await self._find_exercise(exercise_id)
        if not exercise:
            raise NotFoundException("Exercise not found")

        exercise.program_id = program_id
        await self._session.flush()

        logger.info(f"Added exercise {exercise_id} to program {program_id}")
        return exercise

    async def remove_exercise(self, program_id: int, exercise_id: int) -> Exercise:
        """
        Detach an exercise from a program.

        Raises:
            NotFoundException: If the exercise is not in this program
        """
        exercise = await self._find_exercise(exercise_id)
        if not exercise or exercise.program_id != program_id:
            raise NotFoundException("Exercise not found in given program")

        exercise.program_id = None
        await self._session.flush()

        logger.info(f"Removed exercise {exercise_id} from program {program_id}")
        return exercise
