"""
Pydantic models for tracking completed exercises.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel

from fitness.validation import iso8601_date, positive_int


class TrackUserExerciseRequest(BaseModel):
    """Request body for logging a completed exercise."""
    exerciseId: Annotated[int, positive_int("exerciseId")]
    durationSeconds: Annotated[int, positive_int("durationSeconds")]
    completedAt: Annotated[Optional[datetime], iso8601_date("completedAt")] = None
