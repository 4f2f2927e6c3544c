"""
CV screening Pydantic schemas
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class ScreenCVRequest(BaseModel):
    """Screening trigger; fixtures replace the stored records in test mode"""
    interview_id: Optional[str] = Field(default=None, alias="interviewID")
    user_email: Optional[str] = Field(default=None, alias="userEmail")
    test_mode: bool = Field(default=False, alias="testMode")
    test_interview_data: Optional[Dict[str, Any]] = Field(default=None, alias="testInterviewData")
    test_cv_data: Optional[Dict[str, Any]] = Field(default=None, alias="testCVData")

    class Config:
        populate_by_name = True
