"""
SQLAlchemy models for the fitness API.

Importing this package registers every table on ``Base.metadata``.
"""

from common.database import Base
from fitness.models.user import User
from fitness.models.program import Program
from fitness.models.exercise import Exercise
from fitness.models.user_exercise import UserExercise

__all__ = ["Base", "User", "Program", "Exercise", "UserExercise"]
