from fitness.services.auth_service import AuthService
from fitness.services.user_service import UserService
from fitness.services.exercise_service import ExerciseService
from fitness.services.program_service import ProgramService
from fitness.services.user_exercise_service import UserExerciseService

__all__ = [
    "AuthService",
    "UserService",
    "ExerciseService",
    "ProgramService",
    "UserExerciseService",
]
