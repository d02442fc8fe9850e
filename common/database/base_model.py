"""
Base model classes with common fields for all tables.

Provides createdAt / updatedAt timestamps that are automatically managed,
a soft-delete marker, and ``to_dict()`` for JSON serialization. Extend
``Base`` (and ``TimestampMixin``) for application-specific models.

Example:
    from common.database import Base, TimestampMixin

    class Program(TimestampMixin, Base):
        __tablename__ = "programs"

        id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
        name: Mapped[str] = mapped_column(String(200))
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import BigInteger, DateTime, Integer, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

logger = logging.getLogger(__name__)

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


def utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Declarative base with a serialization hook.

    ``to_dict`` only reads attributes that are already loaded, so it never
    triggers lazy loading (which is not allowed on async sessions). Keys are
    the database column names, which are also the wire names.
    """

    def to_dict(self) -> Dict[str, Any]:
        state = inspect(self)
        unloaded = state.unloaded
        data: Dict[str, Any] = {}

        for attr in state.mapper.column_attrs:
            if attr.key in unloaded:
                continue
            data[attr.columns[0].name] = getattr(self, attr.key)

        for relationship in state.mapper.relationships:
            if relationship.key in unloaded:
                continue
            data[relationship.key] = getattr(self, relationship.key)

        return data

    def __repr__(self) -> str:
        identity = inspect(self).identity
        return f"<{self.__class__.__name__} {identity[0] if identity else 'transient'}>"


class TimestampMixin:
    """
    Timestamps plus paranoid (soft) deletion.

    Rows with ``deletedAt`` set are treated as gone; services filter them out.
    """

    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        "deletedAt", DateTime(timezone=True), nullable=True, default=None
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Mark the row as deleted without removing it."""
        self.deleted_at = utcnow()
        logger.debug(f"Soft-deleted {self!r}")
