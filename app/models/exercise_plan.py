"""
Exercise plan database model.

Sets / repetitions / weight for one exercise inside a workout plan.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from app.models.exercise import _in_enum


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"
    OTHER = "other"


class ExercisePlan(SQLModel, table=True):
    __tablename__ = "exercise_plans"
    __table_args__ = (CheckConstraint(_in_enum("weight_unit", WeightUnit), name="ck_exercise_plans_weight_unit"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False)
    workout_plan_id: int = Field(foreign_key="workout_plans.id", nullable=False, index=True)
    sets: int = Field(nullable=False)
    repetitions: int = Field(nullable=False)
    weights: float = Field(nullable=False)
    weight_unit: str = Field(max_length=20, nullable=False)
