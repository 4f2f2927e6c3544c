"""
Validate and sanitize career payloads
"""
from typing import Any, Dict, List, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
import structlog

from jia.core.exceptions import ValidationError
from jia.sanitize.schemas import CareerInput, CareerUpdateInput

logger = structlog.get_logger()


def format_validation_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into [{field, message}] using payload field paths"""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _validate(schema: Type[BaseModel], payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError(
            "Invalid career payload",
            details=[{"field": "body", "message": "must be an object"}],
        )
    try:
        model = schema.model_validate(payload)
    except PydanticValidationError as e:
        details = format_validation_errors(e)
        logger.warning("career_validation_failed", errors=details)
        raise ValidationError("Invalid career payload", details=details)
    return model.model_dump(by_alias=True, exclude_unset=True)


def validate_and_sanitize_career(payload: Any) -> Dict[str, Any]:
    """Validate a create payload, returning the cleaned camelCase fields that were sent"""
    return _validate(CareerInput, payload)


def validate_and_sanitize_career_partial(payload: Any) -> Dict[str, Any]:
    """Same rules for an update, which may also carry the target's _id or id"""
    return _validate(CareerUpdateInput, payload)
