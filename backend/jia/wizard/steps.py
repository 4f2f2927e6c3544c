"""
Career form steps and their per-step validation
"""
from typing import Any, Dict, Optional

from jia.core.config import settings
from jia.sanitize.coercion import coerce_number

STEPS = ("Career Info", "CV Review", "AI Interview", "Review")

CAREER_INFO_FIELDS = {
    "jobTitle": "Job title is required",
    "description": "Job description is required",
    "employmentType": "Employment type is required",
    "workSetup": "Work arrangement is required",
    "country": "Country is required",
    "province": "Province is required",
    "location": "City is required",
}


def _blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def count_questions(groups: Any) -> int:
    """Total interview questions across all question groups"""
    if not isinstance(groups, list):
        return 0
    total = 0
    for group in groups:
        questions = group.get("questions") if isinstance(group, dict) else None
        if isinstance(questions, list):
            total += len(questions)
    return total


def salary_value(value: Any) -> Optional[float]:
    number = coerce_number(value)
    return None if number == "" else number


def _career_info_errors(data: Dict[str, Any]) -> Dict[str, str]:
    errors = {field: message for field, message in CAREER_INFO_FIELDS.items() if _blank(data.get(field))}

    salaries = {}
    for field in ("minimumSalary", "maximumSalary"):
        try:
            salaries[field] = salary_value(data.get(field))
        except ValueError:
            errors[field] = "Salary must be a number"
            continue
        if salaries[field] is not None and salaries[field] < 0:
            errors[field] = "Salary cannot be negative"

    minimum = salaries.get("minimumSalary")
    maximum = salaries.get("maximumSalary")
    if minimum is not None and maximum is not None and minimum > maximum and "minimumSalary" not in errors:
        errors["minimumSalary"] = "Minimum salary cannot be greater than maximum salary"
    return errors


def _cv_review_errors(data: Dict[str, Any]) -> Dict[str, str]:
    if _blank(data.get("cvScreeningSetting")):
        return {"cvScreeningSetting": "CV screening setting is required"}
    return {}


def _ai_interview_errors(data: Dict[str, Any], min_questions: int) -> Dict[str, str]:
    errors = {}
    if _blank(data.get("aiScreeningSetting")):
        errors["aiScreeningSetting"] = "AI screening setting is required"
    if count_questions(data.get("questions")) < min_questions:
        errors["questions"] = f"Add at least {min_questions} interview questions"
    return errors


def validate_step(data: Dict[str, Any], step: int, min_questions: Optional[int] = None) -> Dict[str, str]:
    """
    Validate the form values a step owns.

    Args:
        data: form values keyed by payload field name
        step: 1-based step number
        min_questions: interview question minimum, defaults to settings

    Returns:
        Field name -> error message; empty when the step is valid
    """
    if min_questions is None:
        min_questions = settings.MIN_INTERVIEW_QUESTIONS
    data = data or {}

    if step == 1:
        return _career_info_errors(data)
    if step == 2:
        return _cv_review_errors(data)
    if step == 3:
        return _ai_interview_errors(data, min_questions)
    if step == 4:
        errors = _career_info_errors(data)
        errors.update(_cv_review_errors(data))
        errors.update(_ai_interview_errors(data, min_questions))
        return errors
    return {"step": f"Unknown step: {step}"}


def can_go_to_step(data: Dict[str, Any], target: int, min_questions: Optional[int] = None) -> bool:
    """A step is reachable only when every step before it validates"""
    if target < 1 or target > len(STEPS):
        return False
    return all(not validate_step(data, step, min_questions) for step in range(1, target))
