"""Exercise table; an exercise belongs to at most one program."""

from typing import Optional

from sqlalchemy import Enum as SAEnum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from common.database import Base, TimestampMixin, ID_TYPE
from fitness.enums import ExerciseDifficulty
from fitness.models.program import Program


class Exercise(TimestampMixin, Base):
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_name", "name"),
    )

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    difficulty: Mapped[ExerciseDifficulty] = mapped_column(
        SAEnum(
            ExerciseDifficulty,
            name="exercise_difficulty",
            values_callable=lambda levels: [level.value for level in levels],
        ),
        nullable=False,
    )
    program_id: Mapped[Optional[int]] = mapped_column(
        "programID", ID_TYPE, ForeignKey("programs.id"), nullable=True, index=True
    )

    # Read side only; writes go through program_id. Soft-deleted programs read as null.
    program: Mapped[Optional[Program]] = relationship(
        Program,
        primaryjoin="and_(Exercise.program_id == Program.id, Program.deleted_at.is_(None))",
        viewonly=True,
        lazy="raise",
    )
