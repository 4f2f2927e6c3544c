"""
Career enumerations shared by the sanitizer, the store and the wizard
"""

GOOD_FIT_AND_ABOVE = "Good Fit and above"
ONLY_STRONG_FIT = "Only Strong Fit"
NO_AUTOMATIC_PROMOTION = "No Automatic Promotion"

SCREENING_SETTINGS = (GOOD_FIT_AND_ABOVE, ONLY_STRONG_FIT, NO_AUTOMATIC_PROMOTION)

WORK_SETUPS = ("Fully Remote", "Onsite", "Hybrid")

EMPLOYMENT_TYPES = ("Full-Time", "Part-Time")

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
STATUS_DRAFT = "draft"

CAREER_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE, STATUS_DRAFT)

DEFAULT_QUESTION_CATEGORIES = (
    "CV Validation / Experience",
    "Technical",
    "Behavioral",
    "Analytical",
    "Others",
)
