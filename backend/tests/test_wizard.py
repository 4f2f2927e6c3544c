"""
Tests for the career form wizard

Tests cover:
- Per-step validation and navigation guards
- Draft saving (create first, update after) and publishing
- Service and HTTP persistence gateways
"""

from unittest.mock import MagicMock

import pytest

from jia.core.exceptions import JiaException
from jia.models import Career
from jia.wizard.gateway import CareerGateway, HttpCareerGateway, ServiceCareerGateway
from jia.wizard.machine import CareerWizard
from jia.wizard.steps import STEPS, can_go_to_step, count_questions, validate_step

CAREER_INFO = {
    "jobTitle": "Backend Engineer",
    "description": "<p>Build APIs</p>",
    "employmentType": "Full-Time",
    "workSetup": "Hybrid",
    "country": "Philippines",
    "province": "Metro Manila",
    "location": "Makati",
    "minimumSalary": "50000",
    "maximumSalary": "80000",
}

ACTOR = {"name": "Rita Recruiter", "email": "rita@example.com"}


@pytest.fixture
def complete_form(question_groups):
    return {
        **CAREER_INFO,
        "cvScreeningSetting": "Good Fit and above",
        "aiScreeningSetting": "Good Fit and above",
        "questions": question_groups(5),
    }


class TestValidateStep:
    """Each step validates only what it owns."""

    def test_steps(self):
        assert STEPS == ("Career Info", "CV Review", "AI Interview", "Review")

    def test_career_info_valid(self):
        assert validate_step(CAREER_INFO, 1) == {}

    def test_career_info_required_fields(self):
        errors = validate_step({"jobTitle": "   "}, 1)

        assert set(errors) == {
            "jobTitle", "description", "employmentType", "workSetup", "country", "province", "location",
        }

    def test_salary_optional(self):
        data = {**CAREER_INFO, "minimumSalary": "", "maximumSalary": None}

        assert validate_step(data, 1) == {}

    def test_negative_salary(self):
        assert "maximumSalary" in validate_step({**CAREER_INFO, "maximumSalary": -5}, 1)

    def test_minimum_above_maximum(self):
        errors = validate_step({**CAREER_INFO, "minimumSalary": "90000"}, 1)

        assert errors == {"minimumSalary": "Minimum salary cannot be greater than maximum salary"}

    def test_non_numeric_salary(self):
        assert "minimumSalary" in validate_step({**CAREER_INFO, "minimumSalary": "lots"}, 1)

    def test_cv_review(self):
        assert validate_step({}, 2) == {"cvScreeningSetting": "CV screening setting is required"}
        assert validate_step({"cvScreeningSetting": "Only Strong Fit"}, 2) == {}

    def test_ai_interview_question_minimum(self, question_groups):
        data = {"aiScreeningSetting": "Good Fit and above", "questions": question_groups(4)}

        assert set(validate_step(data, 3)) == {"questions"}
        assert validate_step({**data, "questions": question_groups(5)}, 3) == {}

    def test_ai_interview_minimum_override(self, question_groups):
        data = {"aiScreeningSetting": "Good Fit and above", "questions": question_groups(1)}

        assert validate_step(data, 3, min_questions=1) == {}

    def test_review_checks_everything(self, complete_form):
        assert validate_step(complete_form, 4) == {}

        errors = validate_step({**complete_form, "jobTitle": "", "cvScreeningSetting": ""}, 4)
        assert set(errors) == {"jobTitle", "cvScreeningSetting"}

    def test_unknown_step(self):
        assert "step" in validate_step(CAREER_INFO, 7)

    def test_count_questions(self, question_groups):
        assert count_questions(question_groups(3)) == 3
        assert count_questions(None) == 0
        assert count_questions([{"questions": "x"}, "junk"]) == 0


class TestCanGoToStep:
    """A step is reachable only when every earlier step validates."""

    def test_first_step_always_reachable(self):
        assert can_go_to_step({}, 1)

    def test_step_three_needs_cv_setting(self, complete_form):
        data = {**complete_form, "cvScreeningSetting": ""}

        assert can_go_to_step(data, 2)
        assert not can_go_to_step(data, 3)
        assert can_go_to_step(complete_form, 3)

    def test_review_needs_questions(self, complete_form, question_groups):
        assert can_go_to_step(complete_form, 4)
        assert not can_go_to_step({**complete_form, "questions": question_groups(2)}, 4)

    @pytest.mark.parametrize("step", [0, 5])
    def test_out_of_range(self, complete_form, step):
        assert not can_go_to_step(complete_form, step)


class TestCareerWizard:
    """Draft/publish flow against a stub gateway."""

    @pytest.fixture
    def gateway(self):
        gateway = MagicMock(spec=CareerGateway)
        gateway.create.return_value = {"_id": "a" * 24, "id": "legacy-1"}
        gateway.update.return_value = {"_id": "a" * 24, "id": "legacy-1"}
        return gateway

    @pytest.fixture
    def wizard(self, gateway):
        return CareerWizard(gateway, org_id="b" * 24, actor=ACTOR)

    def fill(self, wizard, values):
        for name, value in values.items():
            wizard.set_field(name, value)

    def test_starts_with_empty_default_question_groups(self, wizard, gateway):
        self.fill(wizard, CAREER_INFO)
        wizard.save_and_continue()

        groups = gateway.create.call_args[0][0]["questions"]
        assert [group["category"] for group in groups] == [
            "CV Validation / Experience", "Technical", "Behavioral", "Analytical", "Others",
        ]
        assert all(group["questions"] == [] for group in groups)

    def test_keeps_questions_passed_in(self, gateway, question_groups):
        wizard = CareerWizard(gateway, values={"questions": question_groups(2)})

        assert wizard.values["questions"] == question_groups(2)

    def test_invalid_step_halts_without_saving(self, wizard, gateway):
        wizard.set_field("jobTitle", "Backend Engineer")

        assert wizard.save_and_continue() is False
        assert "description" in wizard.errors
        assert wizard.current_step == 1
        gateway.create.assert_not_called()

    def test_set_field_clears_its_error(self, wizard):
        wizard.save_and_continue()
        wizard.set_field("description", "Build APIs")

        assert "description" not in wizard.errors

    def test_first_save_creates_draft(self, wizard, gateway):
        self.fill(wizard, CAREER_INFO)

        assert wizard.save_and_continue() is True

        payload = gateway.create.call_args[0][0]
        assert payload["status"] == "inactive"
        assert payload["orgID"] == "b" * 24
        assert payload["createdBy"] == ACTOR
        assert payload["minimumSalary"] == 50000
        assert wizard.career_id == "legacy-1"
        assert wizard.current_step == 2
        assert wizard.step_name == "CV Review"

    def test_later_saves_update_tracked_id(self, wizard, gateway):
        self.fill(wizard, CAREER_INFO)
        wizard.save_and_continue()
        wizard.set_field("cvScreeningSetting", "Only Strong Fit")

        assert wizard.save_and_continue() is True

        gateway.create.assert_called_once()
        identifier, payload = gateway.update.call_args[0]
        assert identifier == "legacy-1"
        assert payload["cvScreeningSetting"] == "Only Strong Fit"
        assert "orgID" not in payload
        assert wizard.current_step == 3

    def test_tracks_native_id_when_only_one_returned(self, wizard, gateway):
        gateway.create.return_value = {"_id": "c" * 24}
        self.fill(wizard, CAREER_INFO)

        wizard.save_and_continue()

        assert wizard.career_id == "c" * 24

    def test_go_to_guarded(self, wizard, complete_form):
        assert wizard.go_to(3) is False

        self.fill(wizard, complete_form)

        assert wizard.go_to(4) is True
        assert wizard.is_last_step

    def test_publish_only_from_review(self, wizard, gateway, complete_form):
        self.fill(wizard, complete_form)

        assert wizard.publish() is None
        gateway.create.assert_not_called()

    def test_publish_redirects_to_manage_page(self, wizard, gateway, complete_form):
        self.fill(wizard, complete_form)
        wizard.save_and_continue()
        wizard.go_to(4)

        path = wizard.publish()

        assert path == "/recruiter-dashboard/careers/manage/legacy-1"
        assert gateway.update.call_args[0][1]["status"] == "active"

    def test_publish_refused_when_invalid(self, wizard, gateway, complete_form, question_groups):
        self.fill(wizard, complete_form)
        wizard.go_to(4)
        wizard.set_field("questions", question_groups(1))

        assert wizard.publish() is None
        assert "questions" in wizard.errors
        gateway.create.assert_not_called()
        gateway.update.assert_not_called()

    def test_save_draft_keeps_step(self, wizard, gateway):
        self.fill(wizard, CAREER_INFO)

        career = wizard.save_draft()

        assert career == {"_id": "a" * 24, "id": "legacy-1"}
        assert wizard.current_step == 1

    def test_gateway_errors_propagate(self, wizard, gateway):
        gateway.create.side_effect = JiaException("Career service unavailable", status_code=503)
        self.fill(wizard, CAREER_INFO)

        with pytest.raises(JiaException):
            wizard.save_and_continue()
        assert wizard.current_step == 1
        assert wizard.career_id is None


class TestWizardGateways:
    """Full flow against the real career store."""

    def run_flow(self, wizard, complete_form):
        for name, value in complete_form.items():
            wizard.set_field(name, value)
        assert wizard.save_and_continue()
        assert wizard.save_and_continue()
        assert wizard.save_and_continue()
        return wizard.publish()

    def test_service_gateway(self, db, organization, complete_form):
        wizard = CareerWizard(ServiceCareerGateway(db), org_id=organization.object_id, actor=ACTOR)

        path = self.run_flow(wizard, complete_form)

        career = db.query(Career).one()
        assert path == f"/recruiter-dashboard/careers/manage/{career.id}"
        assert career.status == "active"
        assert career.created_by == ACTOR

    def test_first_draft_from_career_info_only(self, db, organization):
        wizard = CareerWizard(ServiceCareerGateway(db), org_id=organization.object_id, actor=ACTOR)
        for name, value in CAREER_INFO.items():
            wizard.set_field(name, value)

        assert wizard.save_and_continue() is True

        career = db.query(Career).one()
        assert career.status == "inactive"
        assert len(career.questions) == 5
        assert wizard.career_id == career.id
        assert wizard.current_step == 2

    def test_http_gateway(self, client, db, organization, complete_form):
        wizard = CareerWizard(HttpCareerGateway(client=client), org_id=organization.object_id, actor=ACTOR)

        path = self.run_flow(wizard, complete_form)

        career = db.query(Career).one()
        assert path.endswith(career.id)
        assert career.status == "active"
        assert career.description == "<p>Build APIs</p>"

    def test_http_gateway_surfaces_api_errors(self, client, career_payload):
        gateway = HttpCareerGateway(client=client)
        gateway.create({**career_payload})
        gateway.create({**career_payload})

        with pytest.raises(JiaException) as exc_info:
            gateway.create({**career_payload})

        assert exc_info.value.status_code == 400
        assert exc_info.value.code == "QUOTA_EXCEEDED"
