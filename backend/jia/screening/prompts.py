"""
Prompt assembly for CV screening
"""
from typing import Any, Dict, List, Optional

from jia.screening.decision import ScreeningLabel

RESULT_CHOICES = " / ".join(label.value for label in ScreeningLabel)

SCREENING_FRAMING = (
    "You are a helpful AI assistant.\n"
    "You are given a candidate's CV and a job description.\n"
    "You need to screen the candidate's CV and determine if they are a good fit for the job."
)

OUTPUT_DIRECTIVE = f"""- format your response as json:
{{
  "result": <Result ({RESULT_CHOICES})>,
  "reason": <Reason>,
  "confidence": <AI Assessment Confidence (0-100)>,
  "jobFitScore": <Overall Score (0-100)>
}}
- return only the code JSON, nothing else.
- carefully analyze the applicant's CV and job description
- be as accurate as possible
- give a detailed reason for the result, be clear, concise, and specific.
- set result to Ineligible CV if the applicant's CV is not in the correct format.
- set result to Insufficient Data if the applicant's CV is missing important information.
- do not include any other text or comments."""


def render_cv(sections: List[Dict[str, Any]]) -> str:
    """Render parsed CV sections as "name\\ncontent\\n" blocks"""
    return "".join(f"{section.get('name', '')}\n{section.get('content', '')}\n" for section in sections)


def build_screening_prompt(
    job_title: Optional[str],
    description: Optional[str],
    applicant_name: Optional[str],
    sections: List[Dict[str, Any]],
    instructions: Optional[str] = None,
) -> str:
    return (
        f"{SCREENING_FRAMING}\n\n"
        "Job Details:\n"
        f"Job Title:\n{job_title or ''}\n"
        f"Job Description:\n{description or ''}\n\n"
        "Applicant CV information:\n"
        f"Applicant Name: {applicant_name or ''}\n\n"
        f"Applicant CV:\n{render_cv(sections)}\n"
        f"Processing Steps:\n{instructions or ''}\n"
        f"{OUTPUT_DIRECTIVE}\n"
    )
