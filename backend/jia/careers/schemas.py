"""
Career Pydantic schemas
"""
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field
from datetime import datetime


class CareerResponse(BaseModel):
    """Career document as returned to clients"""
    object_id: str = Field(alias="_id")
    id: str
    job_title: str = Field(alias="jobTitle")
    description: Optional[str] = None
    employment_type: Optional[str] = Field(default=None, alias="employmentType")
    country: Optional[str] = None
    province: Optional[str] = None
    location: Optional[str] = None
    work_setup: Optional[str] = Field(default=None, alias="workSetup")
    work_setup_remarks: Optional[str] = Field(default=None, alias="workSetupRemarks")
    salary_negotiable: Optional[bool] = Field(default=None, alias="salaryNegotiable")
    minimum_salary: Optional[float] = Field(default=None, alias="minimumSalary")
    maximum_salary: Optional[float] = Field(default=None, alias="maximumSalary")
    cv_screening_setting: Optional[str] = Field(default=None, alias="cvScreeningSetting")
    ai_screening_setting: Optional[str] = Field(default=None, alias="aiScreeningSetting")
    require_video: Optional[bool] = Field(default=None, alias="requireVideo")
    questions: Optional[List[Dict[str, Any]]] = None
    pre_screening_questions: Optional[List[Dict[str, Any]]] = Field(default=None, alias="preScreeningQuestions")
    status: Optional[str] = None
    org_id: Optional[str] = Field(default=None, alias="orgID")
    created_by: Optional[Union[Dict[str, Any], str]] = Field(default=None, alias="createdBy")
    last_edited_by: Optional[Union[Dict[str, Any], str]] = Field(default=None, alias="lastEditedBy")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    last_activity_at: Optional[datetime] = Field(default=None, alias="lastActivityAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class CareerMutationResponse(BaseModel):
    """Result of a create or update"""
    message: str
    career: CareerResponse
