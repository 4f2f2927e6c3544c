"""
Applicant CV and operator settings models
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.sql import func
from jia.core.database import Base
from jia.core.identifiers import new_native_id


class ApplicantCV(Base):
    """Parsed CV of an applicant"""

    __tablename__ = "applicant_cvs"

    object_id = Column("_id", String(24), primary_key=True, default=new_native_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255))
    digital_cv = Column(JSON)  # [{"name": section title, "content": section text}]

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class GlobalSettings(Base):
    """Operator-wide settings document"""

    __tablename__ = "global_settings"

    DEFAULT_NAME = "global-settings"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False, default=DEFAULT_NAME)
    cv_screening_prompt = Column(Text)  # Operator screening instructions

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
