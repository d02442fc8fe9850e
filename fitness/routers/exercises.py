"""
FastAPI router for exercise endpoints.

Listing is public; changes require the admin role.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Request

from fitness.dependencies import AdminUser, get_exercise_service
from fitness.http import json_response
from fitness.schemas.exercise import CreateExerciseRequest, UpdateExerciseRequest
from fitness.services import ExerciseService
from fitness.validation import int_between, optional_string, param_id, positive_int

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exercises", tags=["exercises"])

ExerciseId = Annotated[int, Path(), param_id("Exercise id")]


@router.get("")
async def list_exercises(
    request: Request,
    exercise_service: Annotated[ExerciseService, Depends(get_exercise_service)],
    page: Annotated[Optional[int], Query(), positive_int("page")] = None,
    limit: Annotated[Optional[int], Query(), int_between("limit", 1, 100)] = None,
    program_id: Annotated[Optional[int], Query(alias="programID"), positive_int("programID")] = None,
    search: Annotated[Optional[str], Query(), optional_string("Search")] = None,
):
    """
    List exercises with their program.

    Supports pagination (page, limit), filtering by programID and a
    case-insensitive name search.
    """
    exercises = await exercise_service.list_exercises(
        page=page,
        limit=limit,
        program_id=program_id,
        search=search,
    )
    return json_response(request, exercises, "List of exercises")


@router.post("", status_code=201)
async def create_exercise(
    request: Request,
    body: CreateExerciseRequest,
    _admin: AdminUser,
    exercise_service: Annotated[ExerciseService, Depends(get_exercise_service)],
):
    """Create an exercise, optionally inside a program."""
    exercise = await exercise_service.create_exercise(
        name=body.name,
        difficulty=body.difficulty,
        program_id=body.programID,
    )
    return json_response(request, exercise, "Exercise created", status_code=201)


@router.put("/{exercise_id}")
async def update_exercise(
    request: Request,
    exercise_id: ExerciseId,
    body: UpdateExerciseRequest,
    _admin: AdminUser,
    exercise_service: Annotated[ExerciseService, Depends(get_exercise_service)],
):
    """Partially update an exercise."""
    exercise = await exercise_service.update_exercise(
        exercise_id,
        name=body.name,
        difficulty=body.difficulty,
        program_id=body.programID,
    )
    return json_response(request, exercise, "Exercise updated")


@router.delete("/{exercise_id}")
async def delete_exercise(
    request: Request,
    exercise_id: ExerciseId,
    _admin: AdminUser,
    exercise_service: Annotated[ExerciseService, Depends(get_exercise_service)],
):
    """Soft-delete an exercise."""
    await exercise_service.delete_exercise(exercise_id)
    return json_response(request, None, "Exercise deleted")
