from fitness.schemas.auth import RegisterRequest, LoginRequest
from fitness.schemas.user import UpdateUserRequest
from fitness.schemas.exercise import CreateExerciseRequest, UpdateExerciseRequest
from fitness.schemas.user_exercise import TrackUserExerciseRequest

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UpdateUserRequest",
    "CreateExerciseRequest",
    "UpdateExerciseRequest",
    "TrackUserExerciseRequest",
]
