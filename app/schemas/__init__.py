"""Pydantic schemas for request/response validation."""

from app.schemas.common import CamelModel, ErrorResponse, SuccessCode, SuccessResponse
from app.schemas.user import (
    LoginPayload,
    Token,
    UserLogin,
    UserSignup,
    UserStatus,
    UserStatusPayload,
)
from app.schemas.exercise import ExerciseListPayload, ExercisePayload, ExerciseResponse, ExerciseSeed
from app.schemas.workout_plan import (
    ExercisePlanCreate,
    ExercisePlanResponse,
    ExercisePlansUpdate,
    ExercisePlanUpdate,
    WorkoutPlanComplete,
    WorkoutPlanCreate,
    WorkoutPlanListPayload,
    WorkoutPlanPayload,
    WorkoutPlanResponse,
    WorkoutPlanSchedule,
)
from app.schemas.report import Progress, ProgressPayload

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "SuccessCode",
    "SuccessResponse",
    "LoginPayload",
    "Token",
    "UserLogin",
    "UserSignup",
    "UserStatus",
    "UserStatusPayload",
    "ExerciseListPayload",
    "ExercisePayload",
    "ExerciseResponse",
    "ExerciseSeed",
    "ExercisePlanCreate",
    "ExercisePlanResponse",
    "ExercisePlansUpdate",
    "ExercisePlanUpdate",
    "WorkoutPlanComplete",
    "WorkoutPlanCreate",
    "WorkoutPlanListPayload",
    "WorkoutPlanPayload",
    "WorkoutPlanResponse",
    "WorkoutPlanSchedule",
    "Progress",
    "ProgressPayload",
]
