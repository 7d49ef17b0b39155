"""
Exercise repository.

Handles database operations for the exercise catalog.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.models.exercise import Exercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create_many(self, exercises: list[Exercise]) -> list[Exercise]:
        """Insert several exercises in one commit."""
        self.session.add_all(exercises)
        self.session.commit()
        for exercise in exercises:
            self.session.refresh(exercise)
        return exercises

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def list_all(self) -> list[Exercise]:
        statement = select(Exercise).order_by(Exercise.id)
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        statement = select(func.count()).select_from(Exercise)
        return self.session.exec(statement).one()

    def existing_ids(self, exercise_ids: set[int]) -> set[int]:
        """Return the subset of *exercise_ids* present in the catalog."""
        if not exercise_ids:
            return set()
        statement = select(Exercise.id).where(Exercise.id.in_(exercise_ids))
        return set(self.session.exec(statement).all())

    def delete(self, exercise_id: int) -> None:
        exercise = self.get_by_id(exercise_id)
        if exercise is None:
            raise NotFoundError(f"exercise {exercise_id} not found")
        self.session.delete(exercise)
        self.session.commit()
