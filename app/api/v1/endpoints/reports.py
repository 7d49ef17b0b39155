"""
Report endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.security import AuthContext
from app.db.session import get_db
from app.schemas.common import SuccessCode, SuccessResponse
from app.schemas.report import ProgressPayload
from app.services.report_service import ReportService

router = APIRouter()


@router.get("/progress", summary="Completed vs total workout plans.", response_model=SuccessResponse[ProgressPayload])
def progress(db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user), ):
    result = ReportService(db).progress(user.id)
    return SuccessResponse[ProgressPayload](code=SuccessCode.FETCH, message="progress report",
                                            payload=ProgressPayload(progress=result))
