"""
Application update Pydantic schemas
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class InterviewReference(BaseModel):
    """Identifies the application being changed"""
    object_id: str = Field(alias="_id")

    class Config:
        populate_by_name = True
        extra = "ignore"


class ApplicationUpdateBody(BaseModel):
    """Fields an applicant flow may change on its application"""
    pre_screen_answers: Optional[Dict[str, Any]] = Field(default=None, alias="preScreenAnswers")
    current_step: Optional[str] = Field(default=None, alias="currentStep")
    status: Optional[str] = None
    for_deletion: bool = Field(default=False, alias="forDeletion")

    class Config:
        populate_by_name = True
        extra = "forbid"


class InterviewTransaction(BaseModel):
    """History entry recorded alongside an update"""
    interview_id: Optional[str] = Field(default=None, alias="interviewID")
    action: Optional[str] = None
    from_status: Optional[str] = Field(default=None, alias="fromStatus")
    to_status: Optional[str] = Field(default=None, alias="toStatus")
    actor: Optional[Dict[str, Any]] = None
    details: Optional[Dict[str, Any]] = None

    class Config:
        populate_by_name = True
        extra = "forbid"


class ManageApplicationRequest(BaseModel):
    """Request envelope of the manage-application route"""
    interview_data: Optional[InterviewReference] = Field(default=None, alias="interviewData")
    email: Optional[str] = None
    body: Optional[Dict[str, Any]] = None
    interview_transaction: Optional[Dict[str, Any]] = Field(default=None, alias="interviewTransaction")

    class Config:
        populate_by_name = True


class ManageApplicationResponse(BaseModel):
    message: str
