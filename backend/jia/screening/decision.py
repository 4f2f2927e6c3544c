"""
CV screening decision table

Maps the model's result label to a UI classification and pass/fail, then
applies the career's automatic promotion setting on top.
"""
from enum import Enum
from typing import Any, Dict, Optional

from jia.careers.constants import GOOD_FIT_AND_ABOVE, ONLY_STRONG_FIT


class ScreeningLabel(str, Enum):
    NO_FIT = "No Fit"
    BAD_FIT = "Bad Fit"
    GOOD_FIT = "Good Fit"
    STRONG_FIT = "Strong Fit"
    INELIGIBLE_CV = "Ineligible CV"
    INSUFFICIENT_DATA = "Insufficient Data"


STATE_MUTED = "state-muted"
STATE_REJECTED = "state-rejected"
STATE_GOOD = "state-good"
STATE_ACCEPTED = "state-accepted"

PASSED = "Passed"
FAILED = "Failed"

STEP_CV_SCREENING = "CV Screening"
STEP_AI_INTERVIEW = "AI Interview"

STATUS_FOR_INTERVIEW = "For Interview"
STATUS_FAILED_CV_SCREENING = "Failed CV Screening"

NO_CV_RESULT = {
    "cvStatus": "No CV",
    "stateClass": STATE_MUTED,
    "cvSettingResult": None,
    "cvScreeningReason": "Applicant has no CV uploaded.",
}

BASE_OUTCOMES = {
    ScreeningLabel.NO_FIT.value: (STATE_REJECTED, FAILED),
    ScreeningLabel.BAD_FIT.value: (STATE_REJECTED, FAILED),
    ScreeningLabel.GOOD_FIT.value: (STATE_GOOD, PASSED),
    ScreeningLabel.STRONG_FIT.value: (STATE_ACCEPTED, PASSED),
    ScreeningLabel.INELIGIBLE_CV.value: (STATE_REJECTED, FAILED),
    ScreeningLabel.INSUFFICIENT_DATA.value: (STATE_REJECTED, FAILED),
}

# Labels each setting promotes to the AI interview
PROMOTING_LABELS = {
    ONLY_STRONG_FIT: {ScreeningLabel.STRONG_FIT.value},
    GOOD_FIT_AND_ABOVE: {ScreeningLabel.GOOD_FIT.value, ScreeningLabel.STRONG_FIT.value},
}


def decide(result: Dict[str, Any], screening_setting: Optional[str] = None) -> Dict[str, Any]:
    """
    Turn a parsed model reply into the screening record.

    Args:
        result: {"result", "reason", "confidence", "jobFitScore"} from the model
        screening_setting: the career's promotion setting; anything other than
            the two promoting settings leaves the base mapping alone

    Returns:
        Record with cvStatus, stateClass, cvSettingResult, cvScreeningReason,
        currentStep, confidence, jobFitScore and, when gated, status
    """
    label = result.get("result")
    # Unrecognised labels keep the accepted/unset defaults
    state_class, setting_result = BASE_OUTCOMES.get(label, (STATE_ACCEPTED, None))

    screening = {
        "cvStatus": label,
        "stateClass": state_class,
        "cvSettingResult": setting_result,
        "cvScreeningReason": result.get("reason"),
        "currentStep": STEP_CV_SCREENING,
        "confidence": result.get("confidence"),
        "jobFitScore": result.get("jobFitScore"),
    }

    promoting = PROMOTING_LABELS.get(screening_setting)
    if promoting is None:
        return screening

    if label in promoting:
        screening.update(
            stateClass=STATE_ACCEPTED,
            cvSettingResult=PASSED,
            currentStep=STEP_AI_INTERVIEW,
            status=STATUS_FOR_INTERVIEW,
        )
    else:
        screening.update(
            stateClass=STATE_REJECTED,
            cvSettingResult=FAILED,
            status=STATUS_FAILED_CV_SCREENING,
        )
    return screening
