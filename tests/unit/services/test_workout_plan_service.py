"""Tests for workout plan business rules, ownership checks included."""

import datetime

import pytest

from app.core.errors import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from app.db.repositories.user import UserRepository
from app.models import WeightUnit, WorkoutStatus
from app.schemas.workout_plan import ExercisePlanCreate, ExercisePlanUpdate, WorkoutPlanCreate
from app.services.report_service import ReportService
from app.services.workout_plan_service import WorkoutPlanService


@pytest.fixture
def service(session):
    return WorkoutPlanService(session)


def _create_payload(exercises, when=datetime.datetime(2026, 11, 3, 7, 0, tzinfo=datetime.timezone.utc), comment=None):
    return WorkoutPlanCreate(scheduled_date=when, comment=comment,
                             exercise_plans=[ExercisePlanCreate(exercise_id=e.id, sets=4, repetitions=8, weights=40,
                                                                weight_unit=WeightUnit.KG) for e in exercises])


# ======================================================================
# Create / get / list
# ======================================================================


class TestCreate:
    def test_create_returns_full_plan(self, service, user, exercises):
        plan = service.create(user.id, _create_payload(exercises, comment="push day"))

        assert plan.user_id == user.id
        assert plan.status == WorkoutStatus.PENDING
        assert plan.comment == "push day"
        assert plan.scheduled_date.tzinfo is not None
        assert [ep.exercise_id for ep in plan.exercise_plans] == [e.id for e in exercises]
        assert all(ep.workout_plan_id == plan.id for ep in plan.exercise_plans)

    def test_create_without_exercise_plans(self, service, user):
        plan = service.create(user.id, WorkoutPlanCreate(scheduled_date=datetime.datetime(2026, 11, 3)))
        assert plan.exercise_plans == []

    def test_unknown_exercise_rejected(self, service, user, exercises):
        payload = _create_payload(exercises)
        payload.exercise_plans[0].exercise_id = 9999

        with pytest.raises(ValidationError) as exc_info:
            service.create(user.id, payload)

        assert exc_info.value.code == "INVALID_ID"
        assert service.list_plans(user.id) == []

    def test_invalid_user_id(self, service, exercises):
        with pytest.raises(ValidationError):
            service.create(0, _create_payload(exercises))

    def test_deleted_owner_is_unauthorized(self, session, service, user, exercises):
        user_id = user.id
        UserRepository(session).delete_by_email(user.email)

        with pytest.raises(UnauthorizedError):
            service.create(user_id, _create_payload(exercises))
        assert service.list_plans(user_id) == []


class TestGetAndList:
    def test_get_own_plan(self, service, user, make_plan):
        plan = make_plan(user)
        assert service.get(user.id, plan.id).id == plan.id

    def test_get_missing_is_not_found(self, service, user):
        with pytest.raises(NotFoundError):
            service.get(user.id, 12345)

    def test_get_foreign_is_forbidden(self, service, user, other_user, make_plan):
        plan = make_plan(other_user)
        with pytest.raises(ForbiddenError):
            service.get(user.id, plan.id)

    def test_list_only_own_plans(self, service, user, other_user, make_plan):
        mine = make_plan(user)
        make_plan(other_user)
        assert [p.id for p in service.list_plans(user.id)] == [mine.id]

    def test_list_sort_applies_with_status_filter(self, service, user, make_plan):
        a = make_plan(user, scheduled_date=datetime.datetime(2026, 11, 1))
        b = make_plan(user, scheduled_date=datetime.datetime(2026, 11, 2))
        c = make_plan(user, scheduled_date=datetime.datetime(2026, 11, 3))
        service.complete(user.id, b.id)

        pending_desc = service.list_plans(user.id, WorkoutStatus.PENDING, ascending=False)
        assert [p.id for p in pending_desc] == [c.id, a.id]
        assert [p.id for p in service.list_plans(user.id, WorkoutStatus.COMPLETED)] == [b.id]


# ======================================================================
# Status transitions
# ======================================================================


class TestCompleteAndSchedule:
    def test_complete_sets_status_and_comment(self, service, user, make_plan):
        plan = make_plan(user)
        service.complete(user.id, plan.id, "felt strong")

        fetched = service.get(user.id, plan.id)
        assert fetched.status == WorkoutStatus.COMPLETED
        assert fetched.comment == "felt strong"

    @pytest.mark.parametrize("comment", [None, "", "   "])
    def test_complete_keeps_comment_when_blank(self, service, user, make_plan, comment):
        plan = make_plan(user, comment="original")
        service.complete(user.id, plan.id, comment)
        assert service.get(user.id, plan.id).comment == "original"

    def test_complete_is_idempotent(self, service, user, make_plan):
        plan = make_plan(user)
        service.complete(user.id, plan.id)
        service.complete(user.id, plan.id)
        assert service.get(user.id, plan.id).status == WorkoutStatus.COMPLETED

    def test_schedule_resets_to_pending(self, service, user, make_plan):
        plan = make_plan(user)
        service.complete(user.id, plan.id)
        new_date = datetime.datetime(2027, 1, 5, 6, 0, tzinfo=datetime.timezone.utc)

        rescheduled = service.schedule(user.id, plan.id, new_date)

        assert rescheduled.status == WorkoutStatus.PENDING
        assert rescheduled.scheduled_date == new_date

    def test_schedule_without_date_keeps_date(self, service, user, make_plan):
        plan = make_plan(user, scheduled_date=datetime.datetime(2026, 11, 2, 18, 0))
        service.complete(user.id, plan.id)

        rescheduled = service.schedule(user.id, plan.id)

        assert rescheduled.status == WorkoutStatus.PENDING
        assert rescheduled.scheduled_date == datetime.datetime(2026, 11, 2, 18, 0, tzinfo=datetime.timezone.utc)

    def test_foreign_plan_is_forbidden_and_untouched(self, service, user, other_user, make_plan):
        plan = make_plan(other_user)

        with pytest.raises(ForbiddenError):
            service.complete(user.id, plan.id, "not mine")
        with pytest.raises(ForbiddenError):
            service.schedule(user.id, plan.id)
        with pytest.raises(ForbiddenError):
            service.delete(user.id, plan.id)

        untouched = service.get(other_user.id, plan.id)
        assert untouched.status == WorkoutStatus.PENDING
        assert untouched.comment is None

    def test_missing_plan_is_not_found(self, service, user):
        with pytest.raises(NotFoundError):
            service.complete(user.id, 404)
        with pytest.raises(NotFoundError):
            service.schedule(user.id, 404)
        with pytest.raises(NotFoundError):
            service.delete(user.id, 404)


# ======================================================================
# Exercise plan bulk update
# ======================================================================


class TestUpdateExercisePlans:
    def test_partial_updates(self, service, user, make_plan):
        plan = make_plan(user)
        first, second, _ = service.get(user.id, plan.id).exercise_plans

        result = service.update_exercise_plans(user.id, plan.id, [
            ExercisePlanUpdate(id=first.id, sets=5),
            ExercisePlanUpdate(id=second.id, weights=80, weight_unit=WeightUnit.LBS),
        ])

        updated = {ep.id: ep for ep in result.exercise_plans}
        assert (updated[first.id].sets, updated[first.id].weights) == (5, 50.0)
        assert (updated[second.id].sets, updated[second.id].weights) == (3, 80.0)
        assert updated[second.id].weight_unit == WeightUnit.LBS

    def test_item_without_changes_rejected(self, service, user, make_plan):
        plan = make_plan(user)
        first = service.get(user.id, plan.id).exercise_plans[0]

        with pytest.raises(ValidationError) as exc_info:
            service.update_exercise_plans(user.id, plan.id, [ExercisePlanUpdate(id=first.id)])
        assert exc_info.value.code == "INVALID_SETTING"

    def test_exercise_plan_of_other_workout_is_not_found(self, service, user, make_plan):
        plan = make_plan(user)
        other = make_plan(user)
        foreign = service.get(user.id, other.id).exercise_plans[0]

        with pytest.raises(NotFoundError):
            service.update_exercise_plans(user.id, plan.id, [ExercisePlanUpdate(id=foreign.id, sets=9)])

    def test_foreign_workout_is_forbidden(self, service, user, other_user, make_plan):
        plan = make_plan(other_user)
        target = service.get(other_user.id, plan.id).exercise_plans[0]

        with pytest.raises(ForbiddenError):
            service.update_exercise_plans(user.id, plan.id, [ExercisePlanUpdate(id=target.id, sets=9)])
        assert service.get(other_user.id, plan.id).exercise_plans[0].sets == 3


# ======================================================================
# Delete + progress
# ======================================================================


class TestDeleteAndProgress:
    def test_delete(self, service, user, make_plan):
        plan = make_plan(user)
        service.delete(user.id, plan.id)
        with pytest.raises(NotFoundError):
            service.get(user.id, plan.id)

    def test_progress_counts(self, session, service, user, other_user, make_plan):
        reports = ReportService(session)
        progress = reports.progress(user.id)
        assert (progress.completed_workouts, progress.total_workouts) == (0, 0)

        first = make_plan(user)
        make_plan(user)
        make_plan(other_user)
        service.complete(user.id, first.id)

        progress = reports.progress(user.id)
        assert (progress.completed_workouts, progress.total_workouts) == (1, 2)
