"""
Workout plan endpoints.

All routes act on the caller's own plans; touching another user's plan
answers 403, a plan that does not exist answers 404.
"""

from enum import Enum
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.errors import ValidationError, ValidationField
from app.core.security import AuthContext
from app.db.session import get_db
from app.models.workout_plan import WorkoutStatus
from app.schemas.common import SuccessCode, SuccessResponse
from app.schemas.workout_plan import (ExercisePlansUpdate, WorkoutPlanComplete, WorkoutPlanCreate,
                                      WorkoutPlanListPayload, WorkoutPlanPayload, WorkoutPlanSchedule, )
from app.services.workout_plan_service import WorkoutPlanService

router = APIRouter()


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _parse_status(value: Optional[str]) -> Optional[WorkoutStatus]:
    if value is None or value == "":
        return None
    try:
        return WorkoutStatus(value)
    except ValueError:
        raise ValidationError(ValidationField.INVALID_INPUT, f"unknown workout status '{value}'")


@router.get("", summary="List own workout plans.", response_model=SuccessResponse[WorkoutPlanListPayload])
def list_workouts(workout_status: Optional[str] = Query(None, alias="status",
                                                        description="pending, completed or missed"),
                  sort: SortOrder = Query(SortOrder.ASC, description="Order by scheduled date"),
                  db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user), ):
    plans = WorkoutPlanService(db).list_plans(user.id, _parse_status(workout_status), sort == SortOrder.ASC)
    return SuccessResponse[WorkoutPlanListPayload](code=SuccessCode.FETCH, message="workout plans",
                                                   payload=WorkoutPlanListPayload(workout_plans=plans))


@router.post("", summary="Create a workout plan.", response_model=SuccessResponse[WorkoutPlanPayload],
             status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutPlanCreate, db: Session = Depends(get_db),
                   user: AuthContext = Depends(get_current_user), ):
    plan = WorkoutPlanService(db).create(user.id, data)
    return SuccessResponse[WorkoutPlanPayload](code=SuccessCode.CREATED, message="workout plan created",
                                               payload=WorkoutPlanPayload(workout_plan=plan))


@router.get("/{workout_id}", summary="Get one workout plan.", response_model=SuccessResponse[WorkoutPlanPayload])
def get_workout(workout_id: int = Path(..., gt=0), db: Session = Depends(get_db),
                user: AuthContext = Depends(get_current_user), ):
    plan = WorkoutPlanService(db).get(user.id, workout_id)
    return SuccessResponse[WorkoutPlanPayload](code=SuccessCode.FETCH, message="workout plan",
                                               payload=WorkoutPlanPayload(workout_plan=plan))


@router.delete("/{workout_id}", summary="Delete a workout plan.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_workout(workout_id: int = Path(..., gt=0), db: Session = Depends(get_db),
                   user: AuthContext = Depends(get_current_user), ):
    WorkoutPlanService(db).delete(user.id, workout_id)


@router.put("/{workout_id}/complete", summary="Mark a workout plan completed.",
            status_code=status.HTTP_204_NO_CONTENT, )
def complete_workout(data: Optional[WorkoutPlanComplete] = None,
                     workout_id: int = Path(..., gt=0), db: Session = Depends(get_db),
                     user: AuthContext = Depends(get_current_user), ):
    WorkoutPlanService(db).complete(user.id, workout_id, data.comment if data else None)


@router.put("/{workout_id}/schedule", summary="Reschedule a workout plan (resets it to pending).",
            response_model=SuccessResponse[WorkoutPlanPayload])
def schedule_workout(data: Optional[WorkoutPlanSchedule] = None,
                     workout_id: int = Path(..., gt=0), db: Session = Depends(get_db),
                     user: AuthContext = Depends(get_current_user), ):
    plan = WorkoutPlanService(db).schedule(user.id, workout_id, data.scheduled_date if data else None)
    return SuccessResponse[WorkoutPlanPayload](code=SuccessCode.UPDATE, message="workout plan scheduled",
                                               payload=WorkoutPlanPayload(workout_plan=plan))


@router.put("/{workout_id}/update-exercise-plans", summary="Partially update exercise plans of a workout plan.",
            response_model=SuccessResponse[WorkoutPlanPayload])
def update_exercise_plans(data: ExercisePlansUpdate, workout_id: int = Path(..., gt=0),
                          db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user), ):
    plan = WorkoutPlanService(db).update_exercise_plans(user.id, workout_id, data.exercise_plans)
    return SuccessResponse[WorkoutPlanPayload](code=SuccessCode.UPDATE, message="exercise plans updated",
                                               payload=WorkoutPlanPayload(workout_plan=plan))
