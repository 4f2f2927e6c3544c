"""
CV screening routes
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from jia.core.database import get_db
from jia.screening.schemas import ScreenCVRequest
from jia.screening.service import cv_screening_service

router = APIRouter(prefix="/api/v1/screening", tags=["Screening"])


@router.post("/cv")
def screen_cv(
    request: ScreenCVRequest,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Screen an applicant's CV and record the outcome on their interview"""
    return cv_screening_service.screen(
        db,
        request.interview_id,
        request.user_email,
        test_mode=request.test_mode,
        test_interview_data=request.test_interview_data,
        test_cv_data=request.test_cv_data,
    )
