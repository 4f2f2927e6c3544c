"""
Organization and plan models
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from jia.core.database import Base
from jia.core.identifiers import new_native_id


class OrganizationPlan(Base):
    """Subscription plan, caps how many careers may be active at once"""

    __tablename__ = "organization_plans"

    object_id = Column("_id", String(24), primary_key=True, default=new_native_id)
    name = Column(String(100), nullable=False)
    job_limit = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Organization(Base):
    """Recruiting organization"""

    __tablename__ = "organizations"

    object_id = Column("_id", String(24), primary_key=True, default=new_native_id)
    name = Column(String(255), nullable=False)
    plan_id = Column(String(24), index=True)  # OrganizationPlan._id
    extra_job_slots = Column(Integer, default=0)  # Purchased on top of the plan

    created_at = Column(DateTime(timezone=True), server_default=func.now())
