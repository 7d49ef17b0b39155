"""
Database session management.

Provides SQLModel engine and session creation.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlmodel import Session, create_engine

from app.core.config import settings

logger = logging.getLogger(__name__)

# Create database engine
engine = create_engine(
    settings.database_url,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,   # Verify connections before using
    pool_size=5,          # Connection pool size
    max_overflow=10       # Max connections beyond pool_size
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance, one per request
    """
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Commit everything done inside the block, or roll all of it back.

    Example:
        with transaction(session):
            session.add(plan)
            session.flush()
            session.add_all(exercise_plans)
    """
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        logger.debug("Transaction rolled back", exc_info=True)
        raise
