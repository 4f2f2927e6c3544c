"""
Shared fixtures: in-memory SQLite database, API client and seed records
"""
import os

# Must be set before jia.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")
os.environ["OPENAI_API_KEY"] = ""
os.environ["SCREENING_EMAIL_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

import jia.models  # noqa: F401
from jia.core.database import Base, SessionLocal, engine, get_db
from jia.main import app
from jia.models import Organization, OrganizationPlan


def make_questions(count=5):
    """Interview question groups holding `count` questions in total"""
    technical = [{"id": i, "question": f"Technical question {i}"} for i in range(1, count + 1)]
    return [
        {"id": 1, "category": "Technical", "questionCountToAsk": count, "questions": technical},
        {"id": 2, "category": "Behavioral", "questionCountToAsk": 0, "questions": []},
    ]


@pytest.fixture
def db():
    """Fresh schema per test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """API client sharing the test session"""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def organization(db):
    """Organization on a two-job plan"""
    plan = OrganizationPlan(name="Starter", job_limit=2)
    db.add(plan)
    db.flush()
    org = Organization(name="Acme Talent", plan_id=plan.object_id, extra_job_slots=0)
    db.add(org)
    db.commit()
    db.refresh(org)
    return org


@pytest.fixture
def career_payload(organization):
    return {
        "orgID": organization.object_id,
        "jobTitle": "Backend Engineer",
        "description": "<p>Build <strong>APIs</strong></p>",
        "employmentType": "Full-Time",
        "workSetup": "Hybrid",
        "country": "Philippines",
        "province": "Metro Manila",
        "location": "Makati",
        "minimumSalary": 50000,
        "maximumSalary": 80000,
        "cvScreeningSetting": "Good Fit and above",
        "aiScreeningSetting": "Good Fit and above",
        "questions": make_questions(),
    }


@pytest.fixture
def question_groups():
    """Factory for interview question groups"""
    return make_questions
