#!/usr/bin/env python3
"""
Seed script that recreates the schema and loads sample programs and exercises.

This script:
1. Drops and recreates every table
2. Creates 3 programs
3. Creates 6 exercises spread over the first two programs

Usage:
    python scripts/seed_db.py

Environment variables:
    DATABASE_URL - SQLAlchemy async connection URL
"""

import asyncio
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from common.database import SQLDatabase
from common.utils import configure_logging, log_error
from fitness.config import settings
from fitness.database import create_search_indexes
from fitness.enums import ExerciseDifficulty
from fitness.models import Base, Exercise, Program

logger = logging.getLogger("seed_db")

SEED_PROGRAMS = ["Program 1", "Program 2", "Program 3"]

# (name, difficulty, index into SEED_PROGRAMS)
SEED_EXERCISES = [
    ("Exercise 1", ExerciseDifficulty.EASY, 0),
    ("Exercise 2", ExerciseDifficulty.EASY, 1),
    ("Exercise 3", ExerciseDifficulty.MEDIUM, 0),
    ("Exercise 4", ExerciseDifficulty.MEDIUM, 1),
    ("Exercise 5", ExerciseDifficulty.HARD, 0),
    ("Exercise 6", ExerciseDifficulty.HARD, 1),
]


async def seed_database(db: SQLDatabase) -> None:
    """Recreate the schema and insert the seed rows."""
    await db.drop_all(Base.metadata)
    await db.create_all(Base.metadata)
    await create_search_indexes(db)

    async with db.session() as session:
        programs = [Program(name=name) for name in SEED_PROGRAMS]
        session.add_all(programs)
        await session.flush()

        session.add_all([
            Exercise(name=name, difficulty=difficulty, program_id=programs[index].id)
            for name, difficulty, index in SEED_EXERCISES
        ])

    logger.info(f"Seeded {len(SEED_PROGRAMS)} programs and {len(SEED_EXERCISES)} exercises")


async def main() -> int:
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    db = SQLDatabase()
    await db.connect(url=settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await seed_database(db)
    except Exception as e:
        log_error(logger, e, "Error in seed, check your data and model")
        return 1
    finally:
        await db.disconnect()

    print("DB seed done")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
