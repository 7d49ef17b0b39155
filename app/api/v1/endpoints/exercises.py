"""
Exercise catalog endpoints (read only).
"""

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.security import AuthContext
from app.db.session import get_db
from app.schemas.common import SuccessCode, SuccessResponse
from app.schemas.exercise import ExerciseListPayload, ExercisePayload
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="List the exercise catalog.", response_model=SuccessResponse[ExerciseListPayload])
def list_exercises(db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user), ):
    exercises = ExerciseService(db).list_exercises()
    return SuccessResponse[ExerciseListPayload](code=SuccessCode.FETCH, message="exercises",
                                                payload=ExerciseListPayload(exercises=exercises))


@router.get("/{exercise_id}", summary="Get one exercise.", response_model=SuccessResponse[ExercisePayload])
def get_exercise(exercise_id: int = Path(..., gt=0), db: Session = Depends(get_db),
                 user: AuthContext = Depends(get_current_user), ):
    exercise = ExerciseService(db).get_exercise(exercise_id)
    return SuccessResponse[ExercisePayload](code=SuccessCode.FETCH, message="exercise",
                                            payload=ExercisePayload(exercise=exercise))
