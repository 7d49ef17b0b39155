"""
Workout plan service.

Every operation on an existing plan goes through :meth:`_get_owned_plan`
first: the plan is resolved by id (``NotFoundError`` when absent) and its
owner compared with the caller (``ForbiddenError`` on mismatch).  The check
runs on each call; nothing about a previous grant is remembered.

Status is written by two operations only: :meth:`complete` forces
``completed`` and :meth:`schedule` forces ``pending``.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.errors import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError, ValidationField
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.exercise_plan import ExercisePlanChanges, ExercisePlanRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.workout_plan import WorkoutPlanRepository
from app.models.exercise_plan import ExercisePlan
from app.models.workout_plan import WorkoutPlan, WorkoutStatus
from app.schemas.workout_plan import (ExercisePlanResponse, ExercisePlanUpdate, WorkoutPlanCreate,
                                      WorkoutPlanResponse, )

logger = logging.getLogger(__name__)


class WorkoutPlanService:
    """Service for workout plan business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutPlanRepository(session)
        self.exercise_plan_repo = ExercisePlanRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.user_repo = UserRepository(session)

    def create(self, user_id: int, data: WorkoutPlanCreate) -> WorkoutPlanResponse:
        if user_id <= 0:
            raise ValidationError(ValidationField.INVALID_ID, "not a valid user id")

        # 1. The owner must still exist; tokens issued before an account deletion stay signed
        if self.user_repo.get_by_id(user_id) is None:
            logger.warning("Workout plan create for deleted user %d rejected", user_id)
            raise UnauthorizedError("user no longer exists")

        # 2. Every referenced exercise must exist in the catalog
        requested = {ep.exercise_id for ep in data.exercise_plans}
        missing = requested - self.exercise_repo.existing_ids(requested)
        if missing:
            raise ValidationError(ValidationField.INVALID_ID, f"unknown exercise id(s): {sorted(missing)}")

        # 3. Insert plan + exercise plans in one transaction
        exercise_plans = [ExercisePlan(exercise_id=ep.exercise_id, sets=ep.sets, repetitions=ep.repetitions,
                                       weights=ep.weights, weight_unit=ep.weight_unit.value)
                          for ep in data.exercise_plans]
        plan = self.repository.create(user_id, data.scheduled_date, data.comment, exercise_plans)
        logger.info("User %d created workout plan %d with %d exercise plan(s)", user_id, plan.id,
                    len(exercise_plans))
        return self._to_response(plan)

    def get(self, user_id: int, plan_id: int) -> WorkoutPlanResponse:
        plan = self._get_owned_plan(user_id, plan_id)
        return self._to_response(plan)

    def list_plans(self, user_id: int, status: Optional[WorkoutStatus] = None,
             ascending: bool = True) -> list[WorkoutPlanResponse]:
        plans = self.repository.list_by_user(user_id, status, ascending)
        grouped = self.exercise_plan_repo.list_by_workout_plans([p.id for p in plans])
        return [self._to_response(p, grouped[p.id]) for p in plans]

    def complete(self, user_id: int, plan_id: int, comment: Optional[str] = None) -> None:
        """Mark the plan ``completed``; a blank comment keeps the existing one."""
        self._get_owned_plan(user_id, plan_id)
        if comment is not None and not comment.strip():
            comment = None
        self.repository.update(plan_id, status=WorkoutStatus.COMPLETED, comment=comment)

    def schedule(self, user_id: int, plan_id: int,
                 scheduled_date: Optional[datetime.datetime] = None) -> WorkoutPlanResponse:
        """Reset the plan to ``pending``, moving it to *scheduled_date* when given."""
        self._get_owned_plan(user_id, plan_id)
        plan = self.repository.update(plan_id, status=WorkoutStatus.PENDING, scheduled_date=scheduled_date)
        return self._to_response(plan)

    def update_exercise_plans(self, user_id: int, plan_id: int,
                              items: list[ExercisePlanUpdate]) -> WorkoutPlanResponse:
        """Partially update exercise plans of one workout plan, all or nothing."""
        plan = self._get_owned_plan(user_id, plan_id)

        if not items:
            raise ValidationError(ValidationField.INVALID_INPUT, "no exercise plans to update")
        for item in items:
            if not item.has_changes():
                raise ValidationError(ValidationField.INVALID_SETTING,
                                      f"exercise plan {item.id} has no fields to update")

        changes = [ExercisePlanChanges(id=item.id, sets=item.sets, repetitions=item.repetitions,
                                       weights=item.weights, weight_unit=item.weight_unit) for item in items]
        self.exercise_plan_repo.update_many(plan.id, changes)
        return self._to_response(plan)

    def delete(self, user_id: int, plan_id: int) -> None:
        self._get_owned_plan(user_id, plan_id)
        self.repository.delete(plan_id)
        logger.info("User %d deleted workout plan %d", user_id, plan_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_plan(self, user_id: int, plan_id: int) -> WorkoutPlan:
        plan = self.repository.get_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"workout plan {plan_id} not found")
        if plan.user_id != user_id:
            logger.warning("User %d tried to operate on workout plan %d owned by user %d", user_id, plan_id,
                           plan.user_id)
            raise ForbiddenError(f"workout plan {plan_id} belongs to another user")
        return plan

    def _to_response(self, plan: WorkoutPlan,
                     exercise_plans: Optional[list[ExercisePlan]] = None) -> WorkoutPlanResponse:
        if exercise_plans is None:
            exercise_plans = self.exercise_plan_repo.list_by_workout_plan(plan.id)

        return WorkoutPlanResponse(id=plan.id, user_id=plan.user_id, status=plan.status,
                                   scheduled_date=plan.scheduled_date, comment=plan.comment,
                                   created_at=plan.created_at, updated_at=plan.updated_at,
                                   exercise_plans=[ExercisePlanResponse.model_validate(ep) for ep in exercise_plans], )
