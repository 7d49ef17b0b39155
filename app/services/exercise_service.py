"""
Exercise catalog service.
"""

import logging

from sqlmodel import Session

from app.core.errors import NotFoundError
from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseResponse, ExerciseSeed

logger = logging.getLogger(__name__)


class ExerciseService:
    """Read access to the exercise catalog, plus seeding."""

    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)

    def list_exercises(self) -> list[ExerciseResponse]:
        return [ExerciseResponse.model_validate(e) for e in self.repository.list_all()]

    def get_exercise(self, exercise_id: int) -> ExerciseResponse:
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None:
            raise NotFoundError(f"exercise {exercise_id} not found")
        return ExerciseResponse.model_validate(exercise)

    def seed(self, entries: list[ExerciseSeed]) -> int:
        """Load *entries* into an empty catalog.

        Returns:
            Number of inserted exercises (0 when the catalog already has rows)
        """
        if self.repository.count() > 0:
            logger.info("Exercise catalog already populated, skipping seed")
            return 0

        exercises = [Exercise(name=e.name, description=e.description, muscle_group=e.muscle_group.value)
                     for e in entries]
        self.repository.create_many(exercises)
        logger.info("Seeded %d exercises", len(exercises))
        return len(exercises)
