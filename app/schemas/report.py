"""
Report API schemas.
"""

from app.schemas.common import CamelModel


class Progress(CamelModel):
    """Completed vs. total workout plans of a user."""
    completed_workouts: int = 0
    total_workouts: int = 0


class ProgressPayload(CamelModel):
    progress: Progress
