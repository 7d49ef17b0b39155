"""
Workout plan API schemas.

Update schemas use ``None`` for "not supplied": the repository layer keeps
the stored value for every ``None`` field.
"""

import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from app.models.exercise_plan import WeightUnit
from app.models.workout_plan import WorkoutStatus
from app.schemas.common import CamelModel, as_utc

MAX_SETS = 999


# ----------------------------------------------------------------------
# Exercise plans
# ----------------------------------------------------------------------

class ExercisePlanCreate(CamelModel):
    """One exercise inside a new workout plan."""

    exercise_id: int = Field(..., gt=0, description="Catalog exercise id")
    sets: int = Field(..., ge=1, le=MAX_SETS)
    repetitions: int = Field(..., ge=0)
    weights: float = Field(..., ge=0, allow_inf_nan=False)
    weight_unit: WeightUnit


class ExercisePlanUpdate(CamelModel):
    """Partial update of an exercise plan; omitted fields stay unchanged."""

    id: int = Field(..., gt=0, description="Exercise plan id")
    sets: Optional[int] = Field(None, ge=1, le=MAX_SETS)
    repetitions: Optional[int] = Field(None, ge=0)
    weights: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    weight_unit: Optional[WeightUnit] = None

    def has_changes(self) -> bool:
        return any(value is not None for value in (self.sets, self.repetitions, self.weights, self.weight_unit))


class ExercisePlanResponse(CamelModel):
    id: int
    exercise_id: int
    workout_plan_id: int
    sets: int
    repetitions: int
    weights: float
    weight_unit: WeightUnit


# ----------------------------------------------------------------------
# Workout plans
# ----------------------------------------------------------------------

class WorkoutPlanCreate(CamelModel):
    """Schema for creating a workout plan."""

    scheduled_date: datetime.datetime = Field(..., description="When the workout is planned (ISO 8601)")
    comment: Optional[str] = Field(None, description="Optional note; empty string is stored as null")
    exercise_plans: list[ExercisePlanCreate] = Field(default_factory=list)

    @field_validator("scheduled_date")
    @classmethod
    def _to_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)


class WorkoutPlanComplete(CamelModel):
    """Body of the complete endpoint."""

    comment: Optional[str] = None


class WorkoutPlanSchedule(CamelModel):
    """Body of the schedule endpoint."""

    scheduled_date: Optional[datetime.datetime] = None

    @field_validator("scheduled_date")
    @classmethod
    def _to_utc(cls, value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        return as_utc(value)


class ExercisePlansUpdate(CamelModel):
    """Body of the bulk exercise plan update endpoint."""

    exercise_plans: list[ExercisePlanUpdate] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _unique_ids(self) -> "ExercisePlansUpdate":
        ids = [item.id for item in self.exercise_plans]
        if len(ids) != len(set(ids)):
            raise ValueError("exercise plan ids must be unique")
        return self


class WorkoutPlanResponse(CamelModel):
    """Schema for a workout plan (with its exercise plans) in API responses."""

    id: int
    user_id: int
    status: WorkoutStatus
    scheduled_date: datetime.datetime
    comment: Optional[str] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime
    exercise_plans: list[ExercisePlanResponse] = []

    @field_validator("scheduled_date", "created_at", "updated_at")
    @classmethod
    def _to_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)


class WorkoutPlanPayload(CamelModel):
    workout_plan: WorkoutPlanResponse


class WorkoutPlanListPayload(CamelModel):
    workout_plans: list[WorkoutPlanResponse]
