"""
CV screening - one model call per applicant, mapped onto the interview record
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session
import structlog

from jia.ai_engine.service import ai_engine
from jia.careers.service import utcnow
from jia.core.config import settings
from jia.core.exceptions import ConflictError, InvalidDataError, JiaException, ScreeningFailedError
from jia.core.redis_client import acquire_lock, get_cache_key, release_lock
from jia.models.applicant import ApplicantCV, GlobalSettings
from jia.models.career import Career
from jia.models.interview import Interview
from jia.screening.decision import NO_CV_RESULT, decide
from jia.screening.prompts import build_screening_prompt

logger = structlog.get_logger()

INTERVIEW_NOT_FOUND_MESSAGE = "[CV Screening Error] Interview not found - Operation Aborted"

# Screening record key -> Interview attribute
RESULT_FIELDS = {
    "cvStatus": "cv_status",
    "stateClass": "state_class",
    "cvSettingResult": "cv_setting_result",
    "cvScreeningReason": "cv_screening_reason",
    "currentStep": "current_step",
    "confidence": "confidence",
    "jobFitScore": "job_fit_score",
    "status": "status",
}


def interview_fields(interview: Interview) -> Dict[str, Any]:
    return {
        "interviewID": interview.interview_id,
        "jobTitle": interview.job_title,
        "description": interview.description,
        "name": interview.name,
        "email": interview.email,
        "screeningSetting": interview.screening_setting,
    }


class CVScreeningService:
    """Screens an applicant's parsed CV against the job they applied to"""

    def screen(
        self,
        db: Session,
        interview_id: Optional[str],
        user_email: Optional[str],
        test_mode: bool = False,
        test_interview_data: Optional[Dict[str, Any]] = None,
        test_cv_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Run a screening and return the record written to the interview.

        Test mode reads the interview and CV from the given fixtures and
        writes nothing. Outside test mode, screenings of one interview are
        serialized and a concurrent duplicate is refused.
        """
        if test_mode:
            return self._screen(db, interview_id, user_email, True, test_interview_data, test_cv_data)

        lock_key = get_cache_key("screening_lock", interview_id)
        lock = acquire_lock(lock_key, timeout=settings.SCREENING_LOCK_TIMEOUT)
        if lock is None:
            logger.warning("screening_already_running", interview_id=interview_id)
            raise ConflictError(
                "CV screening already in progress for this interview",
                details={"interviewID": interview_id},
            )
        try:
            return self._screen(db, interview_id, user_email, False)
        finally:
            release_lock(lock)

    def _screen(
        self,
        db: Session,
        interview_id: Optional[str],
        user_email: Optional[str],
        test_mode: bool,
        test_interview_data: Optional[Dict[str, Any]] = None,
        test_cv_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        interview = None
        if test_mode:
            subject = test_interview_data
            cv = test_cv_data
        else:
            interview = self._load_interview(db, interview_id)
            subject = interview_fields(interview) if interview else None
            cv = self._load_cv(db, user_email)

        if not subject:
            logger.warning("screening_interview_not_found", interview_id=interview_id)
            return {"message": INTERVIEW_NOT_FOUND_MESSAGE}

        if cv is None:
            logger.info("screening_no_cv", interview_id=interview_id, test_mode=test_mode)
            no_cv = dict(NO_CV_RESULT)
            if interview is not None:
                self._persist(db, interview, no_cv)
            return no_cv

        sections = cv.get("digitalCV")
        if not isinstance(sections, list) or not all(isinstance(s, dict) for s in sections):
            logger.error("screening_invalid_cv", interview_id=interview_id, email=user_email)
            raise InvalidDataError("Invalid CV data")

        prompt = build_screening_prompt(
            subject.get("jobTitle"),
            subject.get("description"),
            subject.get("name"),
            sections,
            self._load_instructions(db),
        )
        result = self._ask_model(prompt, interview_id)

        screening_setting = subject.get("screeningSetting")
        if not screening_setting and interview is not None:
            screening_setting = self._career_setting(db, interview.career_id)

        screening = decide(result, screening_setting)
        logger.info(
            "cv_screened",
            interview_id=interview_id,
            result=screening["cvStatus"],
            setting=screening_setting,
            status=screening.get("status"),
            test_mode=test_mode,
        )

        if test_mode:
            screening["testMode"] = True
            return screening

        self._persist(db, interview, screening)
        self._notify(user_email, subject)
        return screening

    def _ask_model(self, prompt: str, interview_id: Optional[str]) -> Dict[str, Any]:
        try:
            reply = ai_engine.generate_text(prompt)
            result = ai_engine.parse_json_response(reply)
        except (JiaException, ValueError) as e:
            detail = e.message if isinstance(e, JiaException) else str(e)
            logger.error("screening_model_failed", interview_id=interview_id, error=detail)
            raise ScreeningFailedError(details={"message": detail})

        if not isinstance(result, dict):
            logger.error("screening_reply_not_object", interview_id=interview_id)
            raise ScreeningFailedError(details={"message": "Model reply is not a JSON object"})
        return result

    def _load_interview(self, db: Session, interview_id: Optional[str]) -> Optional[Interview]:
        if not interview_id:
            return None
        return db.query(Interview).filter(Interview.interview_id == interview_id).first()

    def _load_cv(self, db: Session, email: Optional[str]) -> Optional[Dict[str, Any]]:
        if not email:
            return None
        cv = db.query(ApplicantCV).filter(ApplicantCV.email == email).first()
        if not cv:
            return None
        return {"email": cv.email, "name": cv.name, "digitalCV": cv.digital_cv}

    def _load_instructions(self, db: Session) -> Optional[str]:
        record = db.query(GlobalSettings).filter(GlobalSettings.name == GlobalSettings.DEFAULT_NAME).first()
        return record.cv_screening_prompt if record else None

    def _career_setting(self, db: Session, career_id: Optional[str]) -> Optional[str]:
        if not career_id:
            return None
        career = db.query(Career).filter(Career.id == career_id).first()
        return career.cv_screening_setting if career else None

    def _persist(self, db: Session, interview: Interview, screening: Dict[str, Any]) -> None:
        for key, value in screening.items():
            attr = RESULT_FIELDS.get(key)
            if attr:
                setattr(interview, attr, value)
        interview.updated_at = utcnow()
        db.commit()

    def _notify(self, recipient: Optional[str], subject: Dict[str, Any]) -> None:
        if not settings.SCREENING_EMAIL_ENABLED or not recipient:
            return
        from jia.tasks.notification_tasks import send_screening_email_task

        send_screening_email_task.delay(recipient, subject.get("name"), subject.get("jobTitle"))


# Global instance
cv_screening_service = CVScreeningService()
