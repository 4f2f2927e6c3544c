"""
Career (job posting) model
"""
from sqlalchemy import Column, String, Text, DateTime, JSON, Boolean, Float, Index
from sqlalchemy.sql import func
from jia.core.database import Base
from jia.core.identifiers import new_native_id, new_legacy_id


class Career(Base):
    """Job posting"""

    __tablename__ = "careers"

    # Identifiers
    object_id = Column("_id", String(24), primary_key=True, default=new_native_id)
    id = Column(String(64), unique=True, nullable=False, index=True, default=new_legacy_id)

    # Posting
    job_title = Column(String(255), nullable=False, index=True)
    description = Column(Text)  # Sanitized rich text
    employment_type = Column(String(50))  # Full-Time, Part-Time

    # Location and arrangement
    country = Column(String(100))
    province = Column(String(100))
    location = Column(String(255))  # City
    work_setup = Column(String(50))  # Fully Remote, Onsite, Hybrid
    work_setup_remarks = Column(Text)

    # Salary
    salary_negotiable = Column(Boolean, default=True)
    minimum_salary = Column(Float)
    maximum_salary = Column(Float)

    # Screening
    cv_screening_setting = Column(String(50))
    ai_screening_setting = Column(String(50))
    require_video = Column(Boolean, default=True)
    questions = Column(JSON)  # Interview question groups
    pre_screening_questions = Column(JSON)

    # Status
    status = Column(String(20), default="active", index=True)  # active, inactive, draft

    # Audit
    org_id = Column(String(24), index=True)
    created_by = Column(JSON)  # Actor snapshot {name, email, image}
    last_edited_by = Column(JSON)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    last_activity_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_career_org_status", "org_id", "status"),
    )
