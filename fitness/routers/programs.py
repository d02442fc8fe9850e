"""
FastAPI router for program endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from fitness.dependencies import AdminUser, get_program_service
from fitness.http import json_response
from fitness.services import ProgramService
from fitness.validation import param_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs", tags=["programs"])

ProgramId = Annotated[int, Path(), param_id("Program id")]
ExerciseId = Annotated[int, Path(), param_id("Exercise id")]


@router.get("")
async def list_programs(
    request: Request,
    program_service: Annotated[ProgramService, Depends(get_program_service)],
):
    """List all programs."""
    programs = await program_service.list_programs()
    return json_response(request, programs, "List of programs")


@router.post("/{program_id}/exercises/{exercise_id}")
async def add_exercise_to_program(
    request: Request,
    program_id: ProgramId,
    exercise_id: ExerciseId,
    _admin: AdminUser,
    program_service: Annotated[ProgramService, Depends(get_program_service)],
):
    """Move an exercise into a program."""
    exercise = await program_service.add_exercise(program_id, exercise_id)
    return json_response(request, exercise, "Exercise added to program")


@router.delete("/{program_id}/exercises/{exercise_id}")
async def remove_exercise_from_program(
    request: Request,
    program_id: ProgramId,
    exercise_id: ExerciseId,
    _admin: AdminUser,
    program_service: Annotated[ProgramService, Depends(get_program_service)],
):
    """Detach an exercise from a program."""
    exercise = await program_service.remove_exercise(program_id, exercise_id)
    return json_response(request, exercise, "Exercise removed from program")
