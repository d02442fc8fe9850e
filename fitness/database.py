"""
Schema setup for the fitness database.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from common.database import SQLDatabase
from fitness.models import Base

logger = logging.getLogger(__name__)

TRIGRAM_INDEX_STATEMENTS = (
    "CREATE EXTENSION IF NOT EXISTS pg_trgm",
    "CREATE INDEX IF NOT EXISTS ix_exercises_name_trgm ON exercises USING gin (name gin_trgm_ops)",
)


async def create_search_indexes(db: SQLDatabase) -> bool:
    """
    Create the trigram index used by exercise name search (PostgreSQL only).

    The extension may not be installable for the connecting role, in which
    case search falls back to the plain B-tree index.

    Returns:
        True if the index exists afterwards
    """
    if db.dialect_name != "postgresql":
        return False

    try:
        async with db.engine.begin() as conn:
            for statement in TRIGRAM_INDEX_STATEMENTS:
                await conn.execute(text(statement))
    except SQLAlchemyError as e:
        logger.warning(f"Could not create pg_trgm search index, using B-tree only: {e}")
        return False

    logger.info("pg_trgm search index ready")
    return True


async def init_database(db: SQLDatabase) -> None:
    """Create missing tables and search indexes."""
    await db.create_all(Base.metadata)
    await create_search_indexes(db)
