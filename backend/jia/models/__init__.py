"""
Database models
"""
from jia.models.organization import Organization, OrganizationPlan
from jia.models.career import Career
from jia.models.interview import Interview, InterviewHistory
from jia.models.applicant import ApplicantCV, GlobalSettings

__all__ = [
    "Organization",
    "OrganizationPlan",
    "Career",
    "Interview",
    "InterviewHistory",
    "ApplicantCV",
    "GlobalSettings",
]
