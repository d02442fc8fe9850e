"""
FastAPI router for the caller's completed exercises.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from fitness.dependencies import RegularUser, get_user_exercise_service
from fitness.http import json_response
from fitness.schemas.user_exercise import TrackUserExerciseRequest
from fitness.services import UserExerciseService
from fitness.validation import param_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user-exercises", tags=["user-exercises"])


@router.get("")
async def list_completed_exercises(
    request: Request,
    current_user: RegularUser,
    service: Annotated[UserExerciseService, Depends(get_user_exercise_service)],
):
    """List the caller's completed exercises with exercise details."""
    completed = await service.list_completed(current_user.id)
    return json_response(request, completed, "List of completed exercises")


@router.post("", status_code=201)
async def track_exercise(
    request: Request,
    body: TrackUserExerciseRequest,
    current_user: RegularUser,
    service: Annotated[UserExerciseService, Depends(get_user_exercise_service)],
):
    """Log a completed exercise; completedAt defaults to now."""
    entry = await service.track(
        current_user.id,
        exercise_id=body.exerciseId,
        duration_seconds=body.durationSeconds,
        completed_at=body.completedAt,
    )
    return json_response(request, entry, "Exercise tracked as completed", status_code=201)


@router.delete("/{user_exercise_id}")
async def delete_completed_exercise(
    request: Request,
    user_exercise_id: Annotated[int, Path(), param_id("User exercise id")],
    current_user: RegularUser,
    service: Annotated[UserExerciseService, Depends(get_user_exercise_service)],
):
    """Delete one of the caller's own log entries."""
    await service.delete(current_user.id, user_exercise_id)
    return json_response(request, None, "User exercise deleted")
