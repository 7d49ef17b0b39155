"""
Report service.

Progress is two counts over the user's workout plans.
"""

from sqlmodel import Session

from app.db.repositories.workout_plan import WorkoutPlanRepository
from app.models.workout_plan import WorkoutStatus
from app.schemas.report import Progress


class ReportService:
    """Service for progress reports."""

    def __init__(self, session: Session):
        self.repository = WorkoutPlanRepository(session)

    def progress(self, user_id: int) -> Progress:
        completed = self.repository.count_by_user(user_id, WorkoutStatus.COMPLETED)
        total = self.repository.count_by_user(user_id)
        return Progress(completed_workouts=completed, total_workouts=total)
