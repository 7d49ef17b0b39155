"""
Database initialization.

Creates all tables and seeds the exercise catalog.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from sqlmodel import Session, SQLModel

from app.core.config import settings
from app.db.session import engine
from app.schemas.exercise import ExerciseSeed
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "seed" / "exercises.json"


def load_exercise_seed(path: Optional[Path] = None) -> list[ExerciseSeed]:
    """Read and validate the exercise seed file."""
    path = Path(path or settings.EXERCISE_SEED_FILE or DEFAULT_SEED_FILE)
    with path.open(encoding="utf-8") as f:
        entries = json.load(f)
    return [ExerciseSeed.model_validate(entry) for entry in entries]


def seed_exercises(session: Session, path: Optional[Path] = None) -> int:
    """Populate the catalog if it is empty; returns the number of inserted rows."""
    return ExerciseService(session).seed(load_exercise_seed(path))


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds the exercise catalog when it is empty
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        seed_exercises(session)

    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
