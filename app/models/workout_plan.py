"""
Workout plan database model.

A workout plan is owned by exactly one user and groups the exercise plans
scheduled for one session.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Text
from sqlmodel import Field, SQLModel

from app.models.exercise import _in_enum
from app.models.user import utcnow


class WorkoutStatus(str, Enum):
    """Lifecycle status of a workout plan.

    No transition graph is enforced: completing always writes ``completed``
    and (re)scheduling always writes ``pending``.  ``missed`` is accepted as a
    value and a filter but nothing assigns it.
    """
    PENDING = "pending"
    COMPLETED = "completed"
    MISSED = "missed"


class WorkoutPlan(SQLModel, table=True):
    __tablename__ = "workout_plans"
    __table_args__ = (CheckConstraint(_in_enum("status", WorkoutStatus), name="ck_workout_plans_status"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    status: str = Field(default=WorkoutStatus.PENDING.value, max_length=20, nullable=False)
    scheduled_date: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    comment: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
