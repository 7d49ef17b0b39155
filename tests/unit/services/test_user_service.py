"""Tests for signup, login, status and account deletion."""

import pytest

from app.core.errors import AlreadyExistsError, NotFoundError, ValidationError
from app.models import MuscleGroup
from app.schemas.exercise import ExerciseSeed
from app.schemas.user import UserLogin, UserSignup
from app.services.exercise_service import ExerciseService
from app.services.user_service import UserService


@pytest.fixture
def service(session):
    return UserService(session)


class TestSignupAndLogin:
    def test_signup_hashes_password(self, service):
        user = service.signup(UserSignup(name="Eve", email="eve@example.com", password="longenough"))
        assert user.id is not None
        assert user.password_hash != "longenough"

    def test_duplicate_signup(self, service, user):
        with pytest.raises(AlreadyExistsError):
            service.signup(UserSignup(name="Again", email=user.email, password="longenough"))

    def test_login(self, service, user, password):
        assert service.login(UserLogin(email=user.email, password=password)).id == user.id

    def test_login_unknown_email(self, service, password):
        with pytest.raises(ValidationError) as exc_info:
            service.login(UserLogin(email="ghost@example.com", password=password))
        assert exc_info.value.code == "INVALID_EMAIL"

    def test_login_wrong_password(self, service, user):
        with pytest.raises(ValidationError) as exc_info:
            service.login(UserLogin(email=user.email, password="wrong-password"))
        assert exc_info.value.code == "INVALID_PASSWORD"


class TestStatusAndDelete:
    def test_status_lists_own_plans(self, service, user, other_user, make_plan):
        plan = make_plan(user)
        make_plan(other_user)

        status = service.get_status(user.email)

        assert (status.id, status.email, status.name) == (user.id, user.email, user.name)
        assert [p.id for p in status.workout_plans] == [plan.id]
        assert len(status.workout_plans[0].exercise_plans) == 3

    def test_delete_user(self, service, user, make_plan):
        make_plan(user)
        service.delete_user(user.email)
        with pytest.raises(NotFoundError):
            service.get_user(user.email)


class TestExerciseService:
    def test_get_missing_exercise(self, session):
        with pytest.raises(NotFoundError):
            ExerciseService(session).get_exercise(1)

    def test_seed_only_when_empty(self, session):
        service = ExerciseService(session)
        entries = [ExerciseSeed(name="Plank", muscle_group=MuscleGroup.CORE),
                   ExerciseSeed(name="Dip", description="Parallel bars", muscle_group=MuscleGroup.CHEST)]

        assert service.seed(entries) == 2
        assert service.seed(entries) == 0
        assert [e.name for e in service.list_exercises()] == ["Plank", "Dip"]
