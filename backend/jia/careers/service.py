"""
Career store - create, read and update job postings
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session
import structlog

from jia.careers.constants import STATUS_ACTIVE
from jia.core.exceptions import NotFoundError, QuotaExceededError, ValidationError
from jia.core.identifiers import Identifier, NativeId, new_legacy_id, new_native_id, parse_identifier
from jia.models.career import Career
from jia.models.organization import Organization, OrganizationPlan
from jia.sanitize.career_input import (
    validate_and_sanitize_career,
    validate_and_sanitize_career_partial,
)

logger = structlog.get_logger()

# Payload key -> Career attribute
FIELD_MAP = {
    "jobTitle": "job_title",
    "description": "description",
    "employmentType": "employment_type",
    "country": "country",
    "province": "province",
    "location": "location",
    "workSetup": "work_setup",
    "workSetupRemarks": "work_setup_remarks",
    "salaryNegotiable": "salary_negotiable",
    "minimumSalary": "minimum_salary",
    "maximumSalary": "maximum_salary",
    "cvScreeningSetting": "cv_screening_setting",
    "aiScreeningSetting": "ai_screening_setting",
    "requireVideo": "require_video",
    "questions": "questions",
    "preScreeningQuestions": "pre_screening_questions",
    "status": "status",
    "orgID": "org_id",
    "createdBy": "created_by",
    "lastEditedBy": "last_edited_by",
}

REQUIRED_ON_CREATE = ("jobTitle", "description", "questions", "location", "workSetup")

# Never written through an update
PROTECTED_ON_UPDATE = ("_id", "id", "screeningSetting")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CareerService:
    """CRUD over the careers collection with plan quotas"""

    def _query(self, db: Session, identifier: Identifier):
        if isinstance(identifier, NativeId):
            return db.query(Career).filter(Career.object_id == identifier.value)
        return db.query(Career).filter(Career.id == identifier.value)

    def _job_slots(self, db: Session, org_id: Optional[str]) -> int:
        """Plan limit plus purchased extra slots"""
        organization = None
        plan = None
        if org_id:
            organization = db.query(Organization).filter(Organization.object_id == org_id).first()
        if organization:
            plan = db.query(OrganizationPlan).filter(OrganizationPlan.object_id == organization.plan_id).first()
        if not organization or not plan:
            raise NotFoundError("Organization", org_id, code="ORGANIZATION_NOT_FOUND")
        return (plan.job_limit or 0) + (organization.extra_job_slots or 0)

    def count_active(self, db: Session, org_id: str) -> int:
        return (
            db.query(Career)
            .filter(Career.org_id == org_id, Career.status == STATUS_ACTIVE)
            .count()
        )

    def create_career(self, db: Session, payload: Any) -> Career:
        """Create a career after sanitization and the plan quota check"""
        data = validate_and_sanitize_career(payload)

        missing = [
            field for field in REQUIRED_ON_CREATE
            if (data.get(field) is None if field == "questions" else not data.get(field))
        ]
        if missing:
            raise ValidationError(
                "Job title, description, questions, location and work setup are required",
                details=[{"field": field, "message": "is required"} for field in missing],
            )

        org_id = data.get("orgID")
        job_slots = self._job_slots(db, org_id)
        active = self.count_active(db, org_id)
        if active >= job_slots:
            logger.warning("career_quota_exceeded", org_id=org_id, active=active, job_slots=job_slots)
            raise QuotaExceededError(details={"active": active, "limit": job_slots})

        # Older clients send one setting for both stages
        unified = data.pop("screeningSetting", None)
        data["cvScreeningSetting"] = data.get("cvScreeningSetting") or unified
        data["aiScreeningSetting"] = data.get("aiScreeningSetting") or unified
        data["status"] = data.get("status") or STATUS_ACTIVE

        now = utcnow()
        career = Career(
            object_id=new_native_id(),
            id=new_legacy_id(),
            created_at=now,
            updated_at=now,
            last_activity_at=now,
            **{FIELD_MAP[key]: value for key, value in data.items() if key in FIELD_MAP},
        )

        db.add(career)
        db.commit()
        db.refresh(career)

        logger.info("career_created", career_id=career.id, org_id=org_id, status=career.status)
        return career

    def get_career(self, db: Session, raw_identifier: Any, org_id: Optional[str] = None) -> Career:
        """Fetch by native or legacy id, optionally scoped to an organization"""
        identifier = parse_identifier(raw_identifier)
        query = self._query(db, identifier)
        if org_id:
            query = query.filter(Career.org_id == org_id)
        career = query.first()
        if not career:
            raise NotFoundError("Career", str(identifier))
        return career

    def list_careers(
        self,
        db: Session,
        org_id: str,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Career]:
        query = db.query(Career).filter(Career.org_id == org_id)
        if status:
            query = query.filter(Career.status == status)
        return query.order_by(Career.last_activity_at.desc()).offset(skip).limit(limit).all()

    def update_career(self, db: Session, raw_identifier: Any, payload: Any) -> Career:
        """Merge a partial payload; quotas are only enforced at creation"""
        identifier = parse_identifier(raw_identifier)
        data = validate_and_sanitize_career_partial(payload)
        for field in PROTECTED_ON_UPDATE:
            data.pop(field, None)

        career = self._query(db, identifier).first()
        if not career:
            raise NotFoundError("Career", str(identifier))

        updates: Dict[str, Any] = {FIELD_MAP[key]: value for key, value in data.items() if key in FIELD_MAP}
        minimum = updates.get("minimum_salary", career.minimum_salary)
        maximum = updates.get("maximum_salary", career.maximum_salary)
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValidationError(
                "Minimum salary cannot be greater than maximum salary",
                details=[{"field": "minimumSalary", "message": "cannot be greater than maximumSalary"}],
            )

        for attr, value in updates.items():
            setattr(career, attr, value)
        career.updated_at = utcnow()

        db.commit()
        db.refresh(career)

        logger.info("career_updated", career_id=career.id, fields=sorted(data))
        return career

    def touch_last_activity(self, db: Session, career_id: Optional[str]) -> None:
        """Mark activity on a career, keyed by its legacy id"""
        if not career_id:
            return
        db.query(Career).filter(Career.id == career_id).update(
            {Career.last_activity_at: utcnow()},
            synchronize_session=False,
        )
        db.commit()


# Global instance
career_service = CareerService()
