"""
Exercise catalog API schemas.
"""

from typing import Optional

from app.models.exercise import MuscleGroup
from app.schemas.common import CamelModel


class ExerciseResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    muscle_group: MuscleGroup


class ExerciseSeed(CamelModel):
    """One entry of the static seed file."""
    name: str
    description: Optional[str] = None
    muscle_group: MuscleGroup


class ExercisePayload(CamelModel):
    exercise: ExerciseResponse


class ExerciseListPayload(CamelModel):
    exercises: list[ExerciseResponse]
