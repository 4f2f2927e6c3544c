"""
Application state updates - applicant-submitted changes to an interview record
"""
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
import structlog

from jia.applications.schemas import ApplicationUpdateBody, InterviewTransaction
from jia.careers.service import career_service, utcnow
from jia.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    OperationNotImplementedError,
    ValidationError,
)
from jia.models.interview import Interview, InterviewHistory
from jia.sanitize.career_input import format_validation_errors
from jia.sanitize.pre_screen_answers import SanitizationError, sanitize_pre_screen_answers

logger = structlog.get_logger()

# Body key -> Interview attribute
FIELD_MAP = {
    "preScreenAnswers": "pre_screen_answers",
    "currentStep": "current_step",
    "status": "status",
}


def interview_not_found() -> NotFoundError:
    return NotFoundError(
        "Interview",
        code="INTERVIEW_NOT_FOUND",
        message=(
            "Interview data could not be found for the given credentials. "
            "Unable to proceed with the operation."
        ),
    )


class ApplicationService:
    """Applies applicant updates, records history and touches the parent career"""

    def _parse(self, schema, payload: Dict[str, Any], label: str):
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            details = [
                {**detail, "field": f"{label}.{detail['field']}"}
                for detail in format_validation_errors(e)
            ]
            raise ValidationError(f"Invalid {label}", details=details)

    def manage_application(
        self,
        db: Session,
        interview_object_id: Optional[str],
        email: Optional[str],
        body: Optional[Dict[str, Any]],
        transaction: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not interview_object_id or not email or body is None:
            raise interview_not_found()

        interview = (
            db.query(Interview)
            .filter(Interview.object_id == interview_object_id, Interview.email == email)
            .first()
        )
        if not interview:
            raise interview_not_found()

        update = self._parse(ApplicationUpdateBody, body, "body")
        history_entry = self._parse(InterviewTransaction, transaction, "interviewTransaction") if transaction else None

        if not update.for_deletion:
            changes = update.model_dump(by_alias=True, exclude_unset=True, exclude={"for_deletion"})
            if "preScreenAnswers" in changes:
                try:
                    changes["preScreenAnswers"] = sanitize_pre_screen_answers(changes["preScreenAnswers"])
                except SanitizationError as e:
                    logger.warning("pre_screen_sanitization_failed", interview_id=interview.interview_id, error=str(e))
                    raise InvalidInputError(details={"reason": str(e)})

            for key, value in changes.items():
                setattr(interview, FIELD_MAP[key], value)
            db.commit()
            logger.info("application_updated", interview_id=interview.interview_id, fields=sorted(changes))

        if history_entry:
            self.record_history(db, history_entry)

        career_service.touch_last_activity(db, interview.career_id)

        if update.for_deletion:
            logger.warning("application_deletion_requested", interview_id=interview.interview_id)
            raise OperationNotImplementedError("Application deletion is not available")

    def record_history(self, db: Session, entry: InterviewTransaction) -> InterviewHistory:
        """Append a transition to the interview history log"""
        history = InterviewHistory(
            interview_id=entry.interview_id,
            action=entry.action,
            from_status=entry.from_status,
            to_status=entry.to_status,
            actor=entry.actor,
            details=entry.details,
            created_at=utcnow(),
        )
        db.add(history)
        db.commit()
        return history


# Global instance
application_service = ApplicationService()
