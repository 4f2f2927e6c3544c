"""
Application routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jia.core.database import get_db
from jia.applications.service import application_service
from jia.applications.schemas import ManageApplicationRequest, ManageApplicationResponse

router = APIRouter(prefix="/api/v1/applications", tags=["Applications"])


@router.post("/manage", response_model=ManageApplicationResponse)
def manage_application(
    request: ManageApplicationRequest,
    db: Session = Depends(get_db),
):
    """Apply an applicant's update to their application"""
    application_service.manage_application(
        db,
        request.interview_data.object_id if request.interview_data else None,
        request.email,
        request.body,
        request.interview_transaction,
    )
    return ManageApplicationResponse(message="Job application updated successfully.")
