"""
Pydantic models for exercise management.
"""

from typing import Annotated, Optional

from pydantic import BaseModel

from fitness.enums import ExerciseDifficulty
from fitness.validation import one_of, optional_string, positive_int, required_string


class CreateExerciseRequest(BaseModel):
    """Request body for creating an exercise."""
    name: Annotated[str, required_string("Name")]
    difficulty: Annotated[ExerciseDifficulty, one_of("difficulty", ExerciseDifficulty)]
    programID: Annotated[Optional[int], positive_int("programID")] = None


class UpdateExerciseRequest(BaseModel):
    """Partial update of an exercise. Omitted fields are kept."""
    name: Annotated[Optional[str], optional_string("Name")] = None
    difficulty: Annotated[Optional[ExerciseDifficulty], one_of("difficulty", ExerciseDifficulty)] = None
    programID: Annotated[Optional[int], positive_int("programID")] = None
