"""SQLModel database models."""

from app.models.user import User
from app.models.exercise import Exercise, MuscleGroup
from app.models.workout_plan import WorkoutPlan, WorkoutStatus
from app.models.exercise_plan import ExercisePlan, WeightUnit

__all__ = [
    "User",
    "Exercise",
    "MuscleGroup",
    "WorkoutPlan",
    "WorkoutStatus",
    "ExercisePlan",
    "WeightUnit",
]
