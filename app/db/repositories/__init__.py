"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout_plan import WorkoutPlanRepository
from app.db.repositories.exercise_plan import ExercisePlanChanges, ExercisePlanRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "WorkoutPlanRepository",
    "ExercisePlanChanges",
    "ExercisePlanRepository",
]
