"""
Career form wizard

Drives the four-step career form: Career Info, CV Review, AI Interview and
Review. Each save persists a draft through a CareerGateway; publishing on the
last step activates the career and yields the page to redirect to.
"""
from typing import Any, Dict, Optional

import structlog

from jia.careers.constants import DEFAULT_QUESTION_CATEGORIES, STATUS_ACTIVE, STATUS_INACTIVE
from jia.wizard.gateway import CareerGateway
from jia.wizard.steps import STEPS, can_go_to_step, salary_value, validate_step

logger = structlog.get_logger()

# Form values sent to the careers API
FORM_FIELDS = (
    "jobTitle",
    "description",
    "employmentType",
    "workSetup",
    "workSetupRemarks",
    "country",
    "province",
    "location",
    "salaryNegotiable",
    "minimumSalary",
    "maximumSalary",
    "cvScreeningSetting",
    "aiScreeningSetting",
    "requireVideo",
    "questions",
    "preScreeningQuestions",
)

MANAGE_CAREER_PATH = "/recruiter-dashboard/careers/manage/{career_id}"


def default_question_groups():
    """One empty question group per default interview category"""
    return [
        {"id": index, "category": category, "questionCountToAsk": None, "questions": []}
        for index, category in enumerate(DEFAULT_QUESTION_CATEGORIES, start=1)
    ]


class CareerWizard:
    """State machine for creating or editing one career"""

    def __init__(
        self,
        gateway: CareerGateway,
        org_id: Optional[str] = None,
        actor: Optional[Dict[str, Any]] = None,
        values: Optional[Dict[str, Any]] = None,
        career_id: Optional[str] = None,
        min_questions: Optional[int] = None,
    ):
        self.gateway = gateway
        self.org_id = org_id
        self.actor = actor
        self.values: Dict[str, Any] = dict(values or {})
        self.values.setdefault("questions", default_question_groups())
        self.errors: Dict[str, str] = {}
        # Native or legacy id, whichever the backend handed back
        self.career_id = career_id
        self.min_questions = min_questions
        self.current_step = 1

    @property
    def step_name(self) -> str:
        return STEPS[self.current_step - 1]

    @property
    def is_last_step(self) -> bool:
        return self.current_step == len(STEPS)

    def set_field(self, name: str, value: Any) -> None:
        self.values[name] = value
        self.errors.pop(name, None)

    def can_go_to(self, step: int) -> bool:
        return can_go_to_step(self.values, step, self.min_questions)

    def go_to(self, step: int) -> bool:
        """Jump to a step; refused unless every earlier step validates"""
        if not self.can_go_to(step):
            return False
        self.current_step = step
        return True

    def validate(self, step: Optional[int] = None) -> bool:
        self.errors = validate_step(self.values, step or self.current_step, self.min_questions)
        return not self.errors

    def build_payload(self, status: str) -> Dict[str, Any]:
        payload = {field: self.values[field] for field in FORM_FIELDS if field in self.values}
        for field in ("minimumSalary", "maximumSalary"):
            if field in payload:
                payload[field] = salary_value(payload[field])
        payload["status"] = status
        if self.actor:
            payload["lastEditedBy"] = self.actor
        if not self.career_id:
            payload["orgID"] = self.org_id
            if self.actor:
                payload["createdBy"] = self.actor
        return payload

    def _persist(self, status: str) -> Dict[str, Any]:
        payload = self.build_payload(status)
        if self.career_id:
            career = self.gateway.update(self.career_id, payload)
        else:
            career = self.gateway.create(payload)
            self.career_id = career.get("id") or career.get("_id")
        logger.info("career_draft_saved", career_id=self.career_id, status=status, step=self.current_step)
        return career

    def save_draft(self) -> Optional[Dict[str, Any]]:
        """Persist the current values as an unpublished career"""
        if not self.validate():
            return None
        return self._persist(STATUS_INACTIVE)

    def save_and_continue(self) -> bool:
        """Validate the current step, save the draft and advance"""
        if not self.validate():
            return False
        self._persist(STATUS_INACTIVE)
        self.current_step = min(len(STEPS), self.current_step + 1)
        return True

    def publish(self) -> Optional[str]:
        """Activate the career from the review step; returns the redirect path"""
        if not self.is_last_step or not self.validate(len(STEPS)):
            return None
        self._persist(STATUS_ACTIVE)
        logger.info("career_published", career_id=self.career_id)
        return MANAGE_CAREER_PATH.format(career_id=self.career_id)
