"""
Script to create test data for development
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from jia.core.database import SessionLocal
from jia.careers.service import career_service
from jia.models import ApplicantCV, Interview, Organization, OrganizationPlan
import structlog

logger = structlog.get_logger()

TEST_ORG_NAME = "Acme Talent"
TEST_APPLICANT_EMAIL = "applicant@example.com"

TEST_QUESTIONS = [
    {
        "id": 1,
        "category": "Technical",
        "questionCountToAsk": 3,
        "questions": [
            {"id": 1, "question": "Walk us through an API you designed end to end."},
            {"id": 2, "question": "How do you approach database schema migrations?"},
            {"id": 3, "question": "How would you debug a slow endpoint in production?"},
        ],
    },
    {
        "id": 2,
        "category": "Behavioral",
        "questionCountToAsk": 2,
        "questions": [
            {"id": 1, "question": "Tell us about a disagreement with a teammate and how it ended."},
            {"id": 2, "question": "Describe a project you are proud of."},
        ],
    },
]


def create_test_organization(db: Session) -> Organization:
    """Create a test organization on the Starter plan"""
    existing = db.query(Organization).filter(Organization.name == TEST_ORG_NAME).first()
    if existing:
        logger.info("test_organization_exists", org_id=existing.object_id)
        return existing

    plan = db.query(OrganizationPlan).filter(OrganizationPlan.name == "Starter").first()
    if not plan:
        plan = OrganizationPlan(name="Starter", job_limit=3)
        db.add(plan)
        db.flush()

    organization = Organization(name=TEST_ORG_NAME, plan_id=plan.object_id, extra_job_slots=1)
    db.add(organization)
    db.commit()
    db.refresh(organization)
    logger.info("test_organization_created", org_id=organization.object_id)
    return organization


def create_test_career(db: Session, organization: Organization):
    """Create a test career through the career service"""
    career = career_service.create_career(db, {
        "orgID": organization.object_id,
        "jobTitle": "Senior Backend Engineer",
        "description": "<p>Build and run the services behind our hiring platform.</p>"
                       "<ul><li>Python and FastAPI</li><li>PostgreSQL</li><li>Redis</li></ul>",
        "employmentType": "Full-Time",
        "workSetup": "Hybrid",
        "country": "Philippines",
        "province": "Metro Manila",
        "location": "Makati",
        "minimumSalary": 80000,
        "maximumSalary": 120000,
        "cvScreeningSetting": "Good Fit and above",
        "aiScreeningSetting": "Good Fit and above",
        "questions": TEST_QUESTIONS,
        "status": "active",
    })
    logger.info("test_career_created", career_id=career.id)
    return career


def create_test_application(db: Session, career):
    """Create an applicant CV and an interview for the test career"""
    if not db.query(ApplicantCV).filter(ApplicantCV.email == TEST_APPLICANT_EMAIL).first():
        db.add(ApplicantCV(
            email=TEST_APPLICANT_EMAIL,
            name="Test Applicant",
            digital_cv=[
                {"name": "Experience", "content": "6 years building Python web services with FastAPI and Django."},
                {"name": "Skills", "content": "Python, PostgreSQL, Redis, Docker, AWS"},
                {"name": "Education", "content": "BS Computer Science"},
            ],
        ))

    interview = Interview(
        interview_id=f"test-{career.id}",
        career_id=career.id,
        job_title=career.job_title,
        description=career.description,
        screening_setting=career.cv_screening_setting,
        email=TEST_APPLICANT_EMAIL,
        name="Test Applicant",
    )
    db.add(interview)
    db.commit()
    logger.info("test_application_created", interview_id=interview.interview_id)


def main():
    """Main function"""
    db: Session = SessionLocal()
    try:
        organization = create_test_organization(db)
        career = create_test_career(db, organization)
        create_test_application(db, career)
        logger.info("test_data_created")
    except Exception as e:
        logger.error("test_data_creation_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
