"""
Initialize database with default plans and global settings
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from jia.core.database import SessionLocal, init_db
from jia.models import GlobalSettings, OrganizationPlan
import structlog

logger = structlog.get_logger()

DEFAULT_PLANS = [
    {"name": "Starter", "job_limit": 3},
    {"name": "Growth", "job_limit": 10},
    {"name": "Enterprise", "job_limit": 50},
]

DEFAULT_SCREENING_INSTRUCTIONS = """- compare the applicant's experience against the responsibilities in the job description
- check that required skills and qualifications are present in the CV
- weigh recent and relevant experience more than older or unrelated roles
- Strong Fit: meets all core requirements; Good Fit: meets most; Bad Fit: meets few; No Fit: unrelated background"""


def create_default_plans(db: Session):
    """Create default organization plans"""
    for plan_data in DEFAULT_PLANS:
        existing = db.query(OrganizationPlan).filter(OrganizationPlan.name == plan_data["name"]).first()
        if not existing:
            db.add(OrganizationPlan(**plan_data))
            logger.info("plan_created", plan=plan_data["name"], job_limit=plan_data["job_limit"])
        else:
            logger.info("plan_exists", plan=plan_data["name"])

    db.commit()


def create_global_settings(db: Session):
    """Create the global settings document with default screening instructions"""
    existing = db.query(GlobalSettings).filter(GlobalSettings.name == GlobalSettings.DEFAULT_NAME).first()
    if existing:
        logger.info("global_settings_exist")
        return

    db.add(GlobalSettings(name=GlobalSettings.DEFAULT_NAME, cv_screening_prompt=DEFAULT_SCREENING_INSTRUCTIONS))
    db.commit()
    logger.info("global_settings_created")


def main():
    """Main initialization function"""
    logger.info("initializing_database")

    # Initialize database tables
    init_db()

    db: Session = SessionLocal()
    try:
        create_default_plans(db)
        create_global_settings(db)

        logger.info("database_initialization_complete")
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
