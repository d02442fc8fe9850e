"""Training program table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from common.database import Base, TimestampMixin, ID_TYPE


class Program(TimestampMixin, Base):
    __tablename__ = "programs"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
