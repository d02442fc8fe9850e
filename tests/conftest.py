"""Shared test fixtures for the fitness API tests."""

import asyncio
import os

# Settings are read at import time, so the test environment must be in place first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_DIR"] = ""
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "unit-test-secret"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from common.auth import JWTAuth
from fitness.config import settings
from fitness.enums import ExerciseDifficulty, UserRole
from fitness.models import Base, Exercise, Program, User


# ─────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Isolated in-memory database session with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def sample_user(db_session):
    user = User(
        name="Jane",
        surname="Doe",
        nick_name="jane",
        email="jane@example.com",
        age=30,
        role=UserRole.USER,
        password_hash="not-a-real-hash",
    )
    db_session.add(user)
    await db_session.flush()
    return user


@pytest_asyncio.fixture
async def sample_programs(db_session):
    programs = [Program(name="Program 1"), Program(name="Program 2")]
    db_session.add_all(programs)
    await db_session.flush()
    return programs


@pytest_asyncio.fixture
async def sample_exercises(db_session, sample_programs):
    exercises = [
        Exercise(name="Push Up", difficulty=ExerciseDifficulty.EASY, program_id=sample_programs[0].id),
        Exercise(name="Pull Up", difficulty=ExerciseDifficulty.HARD, program_id=sample_programs[1].id),
        Exercise(name="Squat 50%", difficulty=ExerciseDifficulty.MEDIUM, program_id=sample_programs[0].id),
        Exercise(name="Plank", difficulty=ExerciseDifficulty.EASY, program_id=None),
    ]
    db_session.add_all(exercises)
    await db_session.flush()
    return exercises


# ─────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────

@pytest.fixture
def jwt_auth():
    return JWTAuth(secret=settings.JWT_SECRET, bcrypt_rounds=settings.BCRYPT_ROUNDS)


@pytest.fixture
def auth_headers():
    """Factory for an Authorization header the running app accepts."""
    auth = JWTAuth(secret=settings.JWT_SECRET)

    def _headers(user_id: int, role: UserRole, **extra) -> dict:
        token = asyncio.run(auth.create_token(str(user_id), role=role.value, email="someone@example.com"))
        return {"Authorization": f"Bearer {token}", **extra}

    return _headers


# ─────────────────────────────────────────────────────────────────
# Application
# ─────────────────────────────────────────────────────────────────

@pytest.fixture
def app():
    """Fresh application bound to its own in-memory database."""
    from api import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
