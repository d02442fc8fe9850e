"""
Database module - Generic async SQL connection using SQLAlchemy.

Provides reusable relational connectivity for any project.

Usage:
    from common.database import SQLDatabase, set_main_database, get_main_database

    # Set up singleton
    db = SQLDatabase()
    await db.connect(url)
    set_main_database(db)

    # Access anywhere
    async with get_main_database().session() as session:
        ...
"""

from common.database.sql import (
    SQLDatabase,
    # Singleton management
    set_main_database,
    get_main_database,
)
from common.database.base_model import Base, TimestampMixin, ID_TYPE, utcnow

__all__ = [
    "SQLDatabase",
    "Base",
    "TimestampMixin",
    "ID_TYPE",
    "utcnow",
    # Singleton management
    "set_main_database",
    "get_main_database",
]
