"""
Generic async SQL connection manager using SQLAlchemy.

This module provides async relational connectivity that works with any
database SQLAlchemy has an async driver for (asyncpg, aiosqlite).
Models register on their own declarative metadata, which is passed in
when the schema is created.

Example:
    from common.database import SQLDatabase
    from fitness.models import Base

    db = SQLDatabase()
    await db.connect(url="postgresql+asyncpg://localhost/fitness_app")
    await db.create_all(Base.metadata)

Singleton access:
    from common.database.sql import get_main_database

    async with get_main_database().session() as session:
        ...
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Singleton database instance
# ─────────────────────────────────────────────────────────────────

_main_database: Optional["SQLDatabase"] = None


class SQLDatabase:
    """Generic async SQL connection manager - works with any SQLAlchemy URL."""

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._url: Optional[str] = None

    async def connect(self, url: str, echo: bool = False) -> None:
        """
        Create the engine and session factory.

        Args:
            url: SQLAlchemy async connection URL
            echo: Log every SQL statement
        """
        # Mask the URL for logging (hide credentials)
        masked_url = url.split("@")[-1] if "@" in url else url
        logger.info(f"Connecting to database: {masked_url}")

        engine_kwargs = {"echo": echo, "future": True}
        if url.startswith("sqlite") and ":memory:" in url:
            # One shared connection, otherwise each checkout sees an empty database.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        try:
            self._engine = create_async_engine(url, **engine_kwargs)
            self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)
            self._url = url
            logger.info(f"Successfully created database engine: {masked_url}")
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise

    async def disconnect(self) -> None:
        """Dispose the engine and its connection pool."""
        if self._engine:
            logger.info("Disconnecting from database")
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._url = None
            logger.debug("Database connection closed")

    async def create_all(self, metadata: MetaData) -> None:
        """Create every table registered on ``metadata`` that does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info(f"Database schema synchronized ({len(metadata.tables)} tables)")

    async def drop_all(self, metadata: MetaData) -> None:
        """Drop every table registered on ``metadata``."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
        logger.info("Database schema dropped")

    @property
    def is_connected(self) -> bool:
        """Check if the engine has been created."""
        return self._engine is not None

    @property
    def dialect_name(self) -> Optional[str]:
        """Name of the connected dialect (e.g. 'postgresql', 'sqlite')."""
        return self._engine.dialect.name if self._engine else None

    @property
    def engine(self) -> AsyncEngine:
        """Get the underlying async engine."""
        if not self._engine:
            raise RuntimeError("Database not connected")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get the session factory."""
        if not self._session_factory:
            raise RuntimeError("Database not connected")
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session that commits on success and rolls back on error.

        Yields:
            AsyncSession bound to this database
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ─────────────────────────────────────────────────────────────────
# Singleton initialization and getters
# ─────────────────────────────────────────────────────────────────

def set_main_database(db: "SQLDatabase") -> None:
    """
    Set the main database singleton from an existing SQLDatabase instance.

    Args:
        db: SQLDatabase instance to use as main database
    """
    global _main_database
    _main_database = db
    logger.info("Main database singleton set")


def get_main_database() -> "SQLDatabase":
    """
    Get the main application database singleton.

    Returns:
        SQLDatabase instance

    Raises:
        RuntimeError: If database not initialized
    """
    if _main_database is None:
        raise RuntimeError("Main database not initialized. Call set_main_database() first.")
    return _main_database
