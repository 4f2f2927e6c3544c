"""
Career input schemas

Every string field is cleaned as it is validated, so a model that validates
is already safe to persist.
"""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, field_validator, model_validator

from jia.careers.constants import (
    CAREER_STATUSES,
    EMPLOYMENT_TYPES,
    SCREENING_SETTINGS,
    WORK_SETUPS,
)
from jia.sanitize.coercion import coerce_bool, coerce_number
from jia.sanitize.html import clean_rich_text, strip_tags


def _one_of(allowed):
    def check(value: Optional[str]) -> Optional[str]:
        if value and value not in allowed:
            raise ValueError(f"must be one of: {', '.join(allowed)}")
        return value
    return check


PlainText = Annotated[str, AfterValidator(strip_tags)]
RichText = Annotated[str, AfterValidator(clean_rich_text)]
FlexibleBool = Annotated[bool, BeforeValidator(coerce_bool)]
NumberOrBlank = Annotated[Union[int, float, Literal[""]], BeforeValidator(coerce_number)]
ScreeningSetting = Annotated[PlainText, AfterValidator(_one_of(SCREENING_SETTINGS))]
WorkSetup = Annotated[PlainText, AfterValidator(_one_of(WORK_SETUPS))]
EmploymentType = Annotated[PlainText, AfterValidator(_one_of(EMPLOYMENT_TYPES))]
CareerStatus = Annotated[PlainText, AfterValidator(_one_of(CAREER_STATUSES))]
QuestionId = Union[int, str]


class StrictModel(BaseModel):
    """Payload model: camelCase aliases, unknown fields rejected"""

    class Config:
        populate_by_name = True
        extra = "forbid"


class NestedModel(BaseModel):
    """Nested document: unknown keys are dropped"""

    class Config:
        populate_by_name = True
        extra = "ignore"


class ActorSnapshot(NestedModel):
    """Who created or last edited a record"""
    name: Optional[PlainText] = None
    email: Optional[PlainText] = None
    image: Optional[PlainText] = None


class InterviewQuestion(NestedModel):
    id: Optional[QuestionId] = None
    question: PlainText


class QuestionGroup(NestedModel):
    """Interview questions of one category"""
    id: Optional[QuestionId] = None
    category: PlainText
    question_count_to_ask: Optional[int] = Field(default=None, ge=0, alias="questionCountToAsk")
    questions: List[InterviewQuestion] = []


class _PreScreenQuestionBase(NestedModel):
    id: Optional[QuestionId] = None
    question: PlainText


class DropdownQuestion(_PreScreenQuestionBase):
    type: Literal["dropdown"]
    options: List[PlainText] = []


class CheckboxesQuestion(_PreScreenQuestionBase):
    type: Literal["checkboxes"]
    options: List[PlainText] = []
    min_checked: int = Field(default=0, alias="minChecked")
    max_checked: int = Field(default=0, alias="maxChecked")

    @model_validator(mode="after")
    def check_bounds(self):
        if not self.options and (self.min_checked or self.max_checked):
            raise ValueError("minChecked and maxChecked must be 0 when there are no options")
        if not 0 <= self.min_checked <= self.max_checked <= len(self.options):
            raise ValueError("expected 0 <= minChecked <= maxChecked <= number of options")
        return self


class RangeQuestion(_PreScreenQuestionBase):
    type: Literal["range"]
    range_min: NumberOrBlank = Field(default="", alias="rangeMin")
    range_max: NumberOrBlank = Field(default="", alias="rangeMax")

    @model_validator(mode="after")
    def check_bounds(self):
        if self.range_min != "" and self.range_max != "" and self.range_min > self.range_max:
            raise ValueError("rangeMin cannot be greater than rangeMax")
        return self


class ShortAnswerQuestion(_PreScreenQuestionBase):
    type: Literal["short answer"]


class LongAnswerQuestion(_PreScreenQuestionBase):
    type: Literal["long answer"]


PreScreenQuestion = Annotated[
    Union[
        DropdownQuestion,
        CheckboxesQuestion,
        RangeQuestion,
        ShortAnswerQuestion,
        LongAnswerQuestion,
    ],
    Field(discriminator="type"),
]


class CareerInput(StrictModel):
    """Fields a recruiter may send when creating a career"""
    org_id: Optional[str] = Field(default=None, min_length=1, alias="orgID")
    job_title: Optional[PlainText] = Field(default=None, alias="jobTitle")
    description: Optional[RichText] = None
    questions: Optional[List[QuestionGroup]] = None
    pre_screening_questions: Optional[List[PreScreenQuestion]] = Field(default=None, alias="preScreeningQuestions")
    location: Optional[PlainText] = None
    country: Optional[PlainText] = None
    province: Optional[PlainText] = None
    work_setup: Optional[WorkSetup] = Field(default=None, alias="workSetup")
    work_setup_remarks: Optional[PlainText] = Field(default=None, alias="workSetupRemarks")
    employment_type: Optional[EmploymentType] = Field(default=None, alias="employmentType")
    status: Optional[CareerStatus] = None
    cv_screening_setting: Optional[ScreeningSetting] = Field(default=None, alias="cvScreeningSetting")
    ai_screening_setting: Optional[ScreeningSetting] = Field(default=None, alias="aiScreeningSetting")
    # Deprecated single setting, still sent by older clients
    screening_setting: Optional[ScreeningSetting] = Field(default=None, alias="screeningSetting")
    require_video: Optional[FlexibleBool] = Field(default=None, alias="requireVideo")
    salary_negotiable: Optional[FlexibleBool] = Field(default=None, alias="salaryNegotiable")
    minimum_salary: Optional[float] = Field(default=None, ge=0, alias="minimumSalary")
    maximum_salary: Optional[float] = Field(default=None, ge=0, alias="maximumSalary")
    created_by: Optional[Union[ActorSnapshot, PlainText]] = Field(default=None, alias="createdBy")
    last_edited_by: Optional[Union[ActorSnapshot, PlainText]] = Field(default=None, alias="lastEditedBy")

    @field_validator("maximum_salary")
    @classmethod
    def check_salary_range(cls, value, info):
        minimum = info.data.get("minimum_salary")
        if value is not None and minimum is not None and minimum > value:
            raise ValueError("Minimum salary cannot be greater than maximum salary")
        return value


class CareerUpdateInput(CareerInput):
    """Update payload, may name the career it targets"""
    object_id: Optional[str] = Field(default=None, alias="_id")
    id: Optional[str] = None
