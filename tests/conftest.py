"""Shared fixtures.

Every test gets its own in-memory SQLite database and an in-process fake
Redis, so nothing here needs a running server.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import datetime

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.api.dependencies import get_cache
from app.core.cache import RedisCache
from app.core.config import settings
from app.core.security import TokenService, get_password_hash
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models import Exercise, ExercisePlan, MuscleGroup, User, WeightUnit
from app.db.repositories.workout_plan import WorkoutPlanRepository

PASSWORD = "s3cret-password"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def cache():
    return RedisCache(fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def token_service(cache):
    return TokenService(cache, secret_key=settings.SECRET_KEY)


@pytest.fixture
def client(engine, cache):
    def _get_db():
        with Session(engine) as db:
            yield db

    fastapi_app.dependency_overrides[get_db] = _get_db
    fastapi_app.dependency_overrides[get_cache] = lambda: cache
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


# ======================================================================
# Data helpers
# ======================================================================


def make_user(session: Session, email: str, name: str = "Test User") -> User:
    user = User(name=name, email=email, password_hash=get_password_hash(PASSWORD))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def user(session):
    return make_user(session, "alice@example.com", "Alice")


@pytest.fixture
def other_user(session):
    return make_user(session, "bob@example.com", "Bob")


@pytest.fixture
def exercises(session):
    rows = [
        Exercise(name="Bench Press", description="Flat barbell press", muscle_group=MuscleGroup.CHEST.value),
        Exercise(name="Back Squat", description=None, muscle_group=MuscleGroup.LEGS.value),
        Exercise(name="Pull-Up", description="Bodyweight pull", muscle_group=MuscleGroup.BACK.value),
    ]
    session.add_all(rows)
    session.commit()
    for row in rows:
        session.refresh(row)
    return rows


@pytest.fixture
def make_plan(session, exercises):
    """Factory creating a workout plan with one exercise plan per catalog exercise."""
    repo = WorkoutPlanRepository(session)

    def _make(owner: User, scheduled_date: datetime.datetime = datetime.datetime(2026, 11, 2, 18, 0),
              comment=None):
        exercise_plans = [ExercisePlan(exercise_id=e.id, sets=3, repetitions=10, weights=50.0,
                                       weight_unit=WeightUnit.KG.value) for e in exercises]
        return repo.create(owner.id, scheduled_date, comment, exercise_plans)

    return _make


@pytest.fixture
def auth_headers(token_service):
    def _headers(owner: User) -> dict:
        token = token_service.create_access_token(owner.id, owner.email, owner.name)
        return {"Authorization": f"Bearer {token}"}

    return _headers
