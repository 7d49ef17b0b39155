"""Business logic services."""

from app.services.user_service import UserService
from app.services.exercise_service import ExerciseService
from app.services.workout_plan_service import WorkoutPlanService
from app.services.report_service import ReportService

__all__ = [
    "UserService",
    "ExerciseService",
    "WorkoutPlanService",
    "ReportService",
]
