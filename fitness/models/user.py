"""User account table."""

from sqlalchemy import CheckConstraint, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from common.database import Base, TimestampMixin, ID_TYPE
from fitness.enums import UserRole


class User(TimestampMixin, Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("age >= 0", name="ck_users_age_non_negative"),
    )

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    nick_name: Mapped[str] = mapped_column("nickName", String(255), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=UserRole.USER,
    )
    password_hash: Mapped[str] = mapped_column("passwordHash", String(255), nullable=False)
