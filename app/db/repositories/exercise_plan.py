"""
Exercise plan repository.

Handles database operations for :class:`ExercisePlan`.  Partial updates use
the same ``COALESCE`` pattern as workout plans and are always scoped to the
owning workout plan.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import update
from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.db.repositories.workout_plan import coalesce
from app.db.session import transaction
from app.models.exercise_plan import ExercisePlan, WeightUnit
from app.models.workout_plan import WorkoutPlan


@dataclass
class ExercisePlanChanges:
    """Fields to overwrite on one exercise plan; ``None`` keeps the stored value."""
    id: int
    sets: Optional[int] = None
    repetitions: Optional[int] = None
    weights: Optional[float] = None
    weight_unit: Optional[WeightUnit] = None


class ExercisePlanRepository:
    """Repository for ExercisePlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, workout_plan_id: int, exercise_plan: ExercisePlan) -> ExercisePlan:
        """Attach a new exercise plan to an existing workout plan.

        Raises:
            NotFoundError: If the workout plan does not exist
        """
        if self.session.get(WorkoutPlan, workout_plan_id) is None:
            raise NotFoundError(f"workout plan {workout_plan_id} not found")

        exercise_plan.workout_plan_id = workout_plan_id
        with transaction(self.session):
            self.session.add(exercise_plan)
        self.session.refresh(exercise_plan)
        return exercise_plan

    def get_by_id(self, exercise_plan_id: int) -> Optional[ExercisePlan]:
        return self.session.get(ExercisePlan, exercise_plan_id)

    def list_by_workout_plan(self, workout_plan_id: int) -> list[ExercisePlan]:
        statement = (select(ExercisePlan).where(ExercisePlan.workout_plan_id == workout_plan_id)
                     .order_by(ExercisePlan.id))
        return list(self.session.exec(statement).all())

    def list_by_workout_plans(self, workout_plan_ids: list[int]) -> dict[int, list[ExercisePlan]]:
        """Exercise plans of several workout plans, grouped by workout plan id."""
        grouped: dict[int, list[ExercisePlan]] = {plan_id: [] for plan_id in workout_plan_ids}
        if not workout_plan_ids:
            return grouped
        statement = (select(ExercisePlan).where(ExercisePlan.workout_plan_id.in_(workout_plan_ids))
                     .order_by(ExercisePlan.id))
        for exercise_plan in self.session.exec(statement).all():
            grouped[exercise_plan.workout_plan_id].append(exercise_plan)
        return grouped

    def update(self, workout_plan_id: int, changes: ExercisePlanChanges) -> ExercisePlan:
        """Apply one partial update.

        Raises:
            NotFoundError: If the exercise plan does not exist in this workout plan
        """
        return self.update_many(workout_plan_id, [changes])[0]

    def update_many(self, workout_plan_id: int, items: list[ExercisePlanChanges]) -> list[ExercisePlan]:
        """Apply partial updates to several exercise plans, all or nothing.

        Raises:
            NotFoundError: If any id does not belong to the workout plan; nothing is written
        """
        with transaction(self.session):
            for changes in items:
                self._execute_update(workout_plan_id, changes)

        updated = []
        for changes in items:
            exercise_plan = self.get_by_id(changes.id)
            self.session.refresh(exercise_plan)
            updated.append(exercise_plan)
        return updated

    def delete(self, exercise_plan_id: int) -> None:
        exercise_plan = self.get_by_id(exercise_plan_id)
        if exercise_plan is None:
            raise NotFoundError(f"exercise plan {exercise_plan_id} not found")
        self.session.delete(exercise_plan)
        self.session.commit()

    def _execute_update(self, workout_plan_id: int, changes: ExercisePlanChanges) -> None:
        columns = ExercisePlan.__table__.c
        weight_unit = changes.weight_unit.value if changes.weight_unit else None
        statement = (update(ExercisePlan)
                     .where(ExercisePlan.id == changes.id, ExercisePlan.workout_plan_id == workout_plan_id)
                     .values(sets=coalesce(changes.sets, columns.sets),
                             repetitions=coalesce(changes.repetitions, columns.repetitions),
                             weights=coalesce(changes.weights, columns.weights),
                             weight_unit=coalesce(weight_unit, columns.weight_unit))
                     .returning(ExercisePlan.id)
                     .execution_options(synchronize_session=False))
        if self.session.execute(statement).scalar_one_or_none() is None:
            raise NotFoundError(f"exercise plan {changes.id} not found in workout plan {workout_plan_id}")
