"""Tests for the connection manager, schema setup and the seed script."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from common.database import SQLDatabase
from fitness.database import create_search_indexes, init_database
from fitness.models import Exercise, Program
from scripts.seed_db import SEED_EXERCISES, SEED_PROGRAMS, seed_database


@pytest_asyncio.fixture
async def memory_db():
    db = SQLDatabase()
    await db.connect(url="sqlite+aiosqlite:///:memory:")
    yield db
    await db.disconnect()


class TestSQLDatabase:

    @pytest.mark.asyncio
    async def test_session_before_connect_fails(self):
        db = SQLDatabase()

        assert not db.is_connected
        with pytest.raises(RuntimeError):
            async with db.session():
                pass

    @pytest.mark.asyncio
    async def test_session_commits_on_success(self, memory_db):
        await init_database(memory_db)

        async with memory_db.session() as session:
            session.add(Program(name="Core"))

        async with memory_db.session() as session:
            names = (await session.execute(select(Program.name))).scalars().all()

        assert names == ["Core"]

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, memory_db):
        await init_database(memory_db)

        with pytest.raises(ValueError):
            async with memory_db.session() as session:
                session.add(Program(name="Core"))
                await session.flush()
                raise ValueError("abort")

        async with memory_db.session() as session:
            count = (await session.execute(select(func.count(Program.id)))).scalar_one()

        assert count == 0

    @pytest.mark.asyncio
    async def test_trigram_index_is_postgres_only(self, memory_db):
        assert memory_db.dialect_name == "sqlite"
        assert await create_search_indexes(memory_db) is False


class TestSeed:

    @pytest.mark.asyncio
    async def test_seed_loads_programs_and_exercises(self, memory_db):
        await seed_database(memory_db)

        async with memory_db.session() as session:
            programs = (await session.execute(select(Program).order_by(Program.id))).scalars().all()
            exercises = (await session.execute(select(Exercise).order_by(Exercise.id))).scalars().all()

        assert [p.name for p in programs] == SEED_PROGRAMS
        assert len(exercises) == len(SEED_EXERCISES)
        assert {e.program_id for e in exercises} == {programs[0].id, programs[1].id}

    @pytest.mark.asyncio
    async def test_seed_is_repeatable(self, memory_db):
        await seed_database(memory_db)
        await seed_database(memory_db)

        async with memory_db.session() as session:
            count = (await session.execute(select(func.count(Exercise.id)))).scalar_one()

        assert count == len(SEED_EXERCISES)
