"""
Interview (application) models
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, Float
from sqlalchemy.sql import func
from jia.core.database import Base
from jia.core.identifiers import new_native_id


class Interview(Base):
    """One applicant's application to one career"""

    __tablename__ = "interviews"

    object_id = Column("_id", String(24), primary_key=True, default=new_native_id)
    interview_id = Column(String(64), unique=True, nullable=False, index=True)

    # Career reference (Career.id) and snapshot taken when the applicant applied
    career_id = Column(String(64), index=True)
    job_title = Column(String(255))
    description = Column(Text)
    screening_setting = Column(String(50))

    # Applicant
    email = Column(String(255), nullable=False, index=True)
    name = Column(String(255))

    # CV screening outcome
    cv_status = Column(String(50))  # One of the screening labels, or "No CV"
    state_class = Column(String(50))  # state-muted, state-rejected, state-good, state-accepted
    cv_setting_result = Column(String(20))  # Passed, Failed
    cv_screening_reason = Column(Text)
    confidence = Column(Float)  # 0-100
    job_fit_score = Column(Float)  # 0-100

    # Pipeline
    pre_screen_answers = Column(JSON)
    current_step = Column(String(50), default="CV Screening")
    status = Column(String(50), default="Ongoing")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class InterviewHistory(Base):
    """Append-only log of application transitions"""

    __tablename__ = "interview_history"

    id = Column(Integer, primary_key=True, index=True)
    interview_id = Column(String(64), index=True)
    action = Column(String(100))
    from_status = Column(String(50))
    to_status = Column(String(50))
    actor = Column(JSON)
    details = Column(JSON)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
