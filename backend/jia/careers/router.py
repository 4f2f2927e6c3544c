"""
Career routes
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from jia.core.database import get_db
from jia.careers.service import career_service
from jia.careers.schemas import CareerResponse, CareerMutationResponse

router = APIRouter(prefix="/api/v1/careers", tags=["Careers"])


@router.post("/", response_model=CareerMutationResponse, status_code=status.HTTP_201_CREATED)
def create_career(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """Create a career, subject to the organization's plan quota"""
    career = career_service.create_career(db, payload)
    return CareerMutationResponse(
        message="Career added successfully",
        career=CareerResponse.model_validate(career),
    )


@router.get("/", response_model=List[CareerResponse])
def list_careers(
    org_id: str = Query(...),
    career_status: Optional[str] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """List an organization's careers, most recently active first"""
    careers = career_service.list_careers(db, org_id, career_status, skip, limit)
    return [CareerResponse.model_validate(career) for career in careers]


@router.get("/{identifier}", response_model=CareerResponse)
def get_career(
    identifier: str,
    org_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Get a career by native or legacy id"""
    career = career_service.get_career(db, identifier, org_id)
    return CareerResponse.model_validate(career)


@router.put("/{identifier}", response_model=CareerMutationResponse)
def update_career(
    identifier: str,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """Apply a partial update to a career"""
    career = career_service.update_career(db, identifier, payload)
    return CareerMutationResponse(
        message="Career updated successfully",
        career=CareerResponse.model_validate(career),
    )
