"""
Exercise catalog model.

Read-only through the API; rows come from the seed file loaded by
:func:`app.db.init_db.seed_exercises`.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Column, Text
from sqlmodel import Field, SQLModel


class MuscleGroup(str, Enum):
    """Primary muscle group trained by an exercise."""
    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    CORE = "core"
    ARMS = "arms"
    SHOULDERS = "shoulders"
    GLUTES = "glutes"


def _in_enum(column: str, enum_cls: type[Enum]) -> str:
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"


class Exercise(SQLModel, table=True):
    __tablename__ = "exercises"
    __table_args__ = (CheckConstraint(_in_enum("muscle_group", MuscleGroup), name="ck_exercises_muscle_group"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    muscle_group: str = Field(max_length=20, nullable=False)
