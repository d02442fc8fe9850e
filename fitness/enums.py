"""Closed value sets shared by models, schemas and routes."""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class ExerciseDifficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
