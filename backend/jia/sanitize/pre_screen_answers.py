"""
Sanitize applicant pre-screen answers
"""
from typing import Any, Dict

from jia.sanitize.coercion import coerce_number
from jia.sanitize.html import strip_tags

# Keys holding range answers
NUMERIC_KEYS = {"min", "max", "rangeMin", "rangeMax"}


class SanitizationError(ValueError):
    """An answer could not be made safe"""


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, str):
        return strip_tags(value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(item) for item in value]
    if isinstance(value, dict):
        cleaned = {}
        for key, item in value.items():
            if key in NUMERIC_KEYS:
                try:
                    cleaned[key] = coerce_number(item)
                except ValueError as e:
                    raise SanitizationError(f"{key}: {e}")
            else:
                cleaned[key] = _sanitize_value(item)
        return cleaned
    raise SanitizationError(f"unsupported answer type {type(value).__name__}")


def sanitize_pre_screen_answers(answers: Any) -> Dict[str, Any]:
    """
    Strip markup from every answer string, recursing into lists and objects.
    Range bounds become numbers, or "" when left blank.
    """
    if not isinstance(answers, dict):
        return {}
    return {str(key): _sanitize_value(value) for key, value in answers.items()}
