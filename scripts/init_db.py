"""
Database initialization script.

Creates the tables and seeds the exercise catalog (only when it is empty).
For managed schemas prefer ``alembic upgrade head``.

Usage:
    python scripts/init_db.py [path/to/exercises.json]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.init_db import init_db, seed_exercises
from app.db.session import engine

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)

    print("=" * 50)
    print("Workout Tracker Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        if len(sys.argv) > 1:
            with Session(engine) as session:
                inserted = seed_exercises(session, Path(sys.argv[1]))
            print(f"Seeded {inserted} exercises from {sys.argv[1]}")
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
