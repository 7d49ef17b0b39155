"""
Workout plan repository.

Handles database operations for :class:`WorkoutPlan`.

Updates are partial: :meth:`WorkoutPlanRepository.update` issues a single
``UPDATE ... SET col = COALESCE(:new, col)`` so that any argument left as
``None`` keeps the stored value, without a read-modify-write round trip.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import ColumnElement, delete, func, literal, update
from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.db.session import transaction
from app.models.exercise_plan import ExercisePlan
from app.models.user import utcnow
from app.models.workout_plan import WorkoutPlan, WorkoutStatus


def coalesce(value: Any, column) -> ColumnElement:
    """``COALESCE(:value, column)`` with *value* bound using the column's type."""
    return func.coalesce(literal(value, type_=column.type), column)


class WorkoutPlanRepository:
    """Repository for WorkoutPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: int, scheduled_date: datetime.datetime, comment: Optional[str] = None,
               exercise_plans: Optional[list[ExercisePlan]] = None) -> WorkoutPlan:
        """Insert a ``pending`` plan and its exercise plans in one transaction.

        An empty comment is stored as NULL.
        """
        plan = WorkoutPlan(user_id=user_id, status=WorkoutStatus.PENDING.value, scheduled_date=scheduled_date,
                           comment=comment or None)
        with transaction(self.session):
            self.session.add(plan)
            self.session.flush()
            for exercise_plan in exercise_plans or []:
                exercise_plan.workout_plan_id = plan.id
                self.session.add(exercise_plan)
        self.session.refresh(plan)
        return plan

    def get_by_id(self, plan_id: int) -> Optional[WorkoutPlan]:
        return self.session.get(WorkoutPlan, plan_id)

    def update(self, plan_id: int, status: Optional[WorkoutStatus] = None,
               scheduled_date: Optional[datetime.datetime] = None, comment: Optional[str] = None) -> WorkoutPlan:
        """Overwrite only the supplied fields and bump ``updated_at``.

        Raises:
            NotFoundError: If no plan has this id
        """
        columns = WorkoutPlan.__table__.c
        statement = (update(WorkoutPlan)
                     .where(WorkoutPlan.id == plan_id)
                     .values(status=coalesce(status.value if status else None, columns.status),
                             scheduled_date=coalesce(scheduled_date, columns.scheduled_date),
                             comment=coalesce(comment, columns.comment),
                             updated_at=utcnow())
                     .returning(WorkoutPlan.id)
                     .execution_options(synchronize_session=False))
        with transaction(self.session):
            updated_id = self.session.execute(statement).scalar_one_or_none()
            if updated_id is None:
                raise NotFoundError(f"workout plan {plan_id} not found")

        plan = self.get_by_id(plan_id)
        self.session.refresh(plan)
        return plan

    def delete(self, plan_id: int) -> None:
        """Delete the plan and every exercise plan it owns, atomically.

        Raises:
            NotFoundError: If no plan has this id
        """
        with transaction(self.session):
            self.session.execute(delete(ExercisePlan).where(ExercisePlan.workout_plan_id == plan_id))
            result = self.session.execute(delete(WorkoutPlan).where(WorkoutPlan.id == plan_id))
            if result.rowcount == 0:
                raise NotFoundError(f"workout plan {plan_id} not found")

    def list_by_user(self, user_id: int, status: Optional[WorkoutStatus] = None,
                     ascending: bool = True) -> list[WorkoutPlan]:
        """User's plans ordered by scheduled date, optionally filtered by status."""
        order = WorkoutPlan.scheduled_date.asc() if ascending else WorkoutPlan.scheduled_date.desc()
        statement = select(WorkoutPlan).where(WorkoutPlan.user_id == user_id)
        if status is not None:
            statement = statement.where(WorkoutPlan.status == status.value)
        statement = statement.order_by(order, WorkoutPlan.id)
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int, status: Optional[WorkoutStatus] = None) -> int:
        statement = select(func.count()).select_from(WorkoutPlan).where(WorkoutPlan.user_id == user_id)
        if status is not None:
            statement = statement.where(WorkoutPlan.status == status.value)
        return self.session.exec(statement).one()
