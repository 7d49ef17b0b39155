"""Tests for settings and schema conventions shared by every endpoint."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.schemas.user import LoginPayload
from app.schemas.workout_plan import ExercisePlanUpdate


class TestDatabaseUrl:
    def test_built_from_parts_uses_psycopg2(self):
        cfg = Settings(SECRET_KEY="k", DATABASE_URL=None, DATABASE_USER="u", DATABASE_PASSWORD="p",
                       DATABASE_HOST="db", DATABASE_PORT=5433, DATABASE_DBNAME="wt")
        assert cfg.database_url == "postgresql+psycopg2://u:p@db:5433/wt"

    def test_explicit_url_wins(self):
        cfg = Settings(SECRET_KEY="k", DATABASE_URL="sqlite:///local.db")
        assert cfg.database_url == "sqlite:///local.db"


class TestCamelCaseSchemas:
    def test_dump_uses_lower_camel_keys(self):
        assert LoginPayload(access_token="t").model_dump(by_alias=True) == {"accessToken": "t"}

    def test_accepts_camel_and_snake_input(self):
        assert ExercisePlanUpdate.model_validate({"id": 1, "weightUnit": "kg"}).weight_unit.value == "kg"
        assert ExercisePlanUpdate.model_validate({"id": 1, "weight_unit": "lbs"}).weight_unit.value == "lbs"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_weights_rejected(self, value):
        with pytest.raises(ValidationError):
            ExercisePlanUpdate(id=1, weights=value)
