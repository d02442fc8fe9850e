"""Completed exercise log entries."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from common.database import Base, TimestampMixin, ID_TYPE, utcnow
from fitness.models.exercise import Exercise
from fitness.models.user import User


class UserExercise(TimestampMixin, Base):
    __tablename__ = "user_exercises"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        "userID", ID_TYPE, ForeignKey("users.id"), nullable=False, index=True
    )
    exercise_id: Mapped[int] = mapped_column(
        "exerciseID", ID_TYPE, ForeignKey("exercises.id"), nullable=False, index=True
    )
    completed_at: Mapped[datetime] = mapped_column(
        "completedAt", DateTime(timezone=True), nullable=False, default=utcnow
    )
    duration_seconds: Mapped[int] = mapped_column("durationSeconds", Integer, nullable=False)

    user: Mapped[Optional[User]] = relationship(
        User,
        primaryjoin="and_(UserExercise.user_id == User.id, User.deleted_at.is_(None))",
        viewonly=True,
        lazy="raise",
    )
    exercise: Mapped[Optional[Exercise]] = relationship(
        Exercise,
        primaryjoin="and_(UserExercise.exercise_id == Exercise.id, Exercise.deleted_at.is_(None))",
        viewonly=True,
        lazy="raise",
    )
