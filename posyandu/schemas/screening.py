from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .measurement import Measurement
from .subject import Subject


class PhbsClassification(str, Enum):
    PRATAMA = "PHBS Pratama"
    MADYA = "PHBS Madya"
    UTAMA = "PHBS Utama"
    PARIPURNA = "PHBS Paripurna"


class HouseholdSurvey(BaseModel):
    """Answers of the family survey (Survei Keluarga) used for PHBS scoring.

    ``None`` means the question was not answered.
    """
    is_pregnant: Optional[bool] = None
    six_antenatal_visits: Optional[bool] = None
    has_infant_0_11_months: Optional[bool] = None
    delivered_at_facility: Optional[bool] = None
    has_child_7_23_months: Optional[bool] = None
    exclusive_breastfeeding: Optional[bool] = None
    has_child_2_5_years: Optional[bool] = None
    growth_monitored_7_23_months: Optional[bool] = None
    growth_monitored_2_5_years: Optional[bool] = None
    balanced_diet: Optional[bool] = None
    has_adolescent_girl: Optional[bool] = None
    adolescent_takes_iron_tablets: Optional[bool] = None
    iodized_salt: Optional[bool] = None
    main_water_source: Optional[str] = None
    latrine_disposal: Optional[str] = None
    waste_disposed_properly: Optional[bool] = None
    physical_activity: Optional[bool] = None
    smoking_indoors: Optional[bool] = None
    handwashing_with_soap: Optional[bool] = None
    tooth_brushing: Optional[bool] = None
    regular_health_check: Optional[bool] = None
    mosquito_larvae_found: Optional[bool] = None


class PhbsScore(BaseModel):
    score: int
    classification: PhbsClassification


class TwoItemScreeningRequest(BaseModel):
    q1: int
    q2: int


class ScreeningScore(BaseModel):
    answers: List[int]
    score: int
    positive: bool
    interpretation: str


class Questionnaire(BaseModel):
    """Questions in the order their answers are expected; each is answered 0 to 3."""
    instrument: str
    questions: List[str]


class EpdsRequest(BaseModel):
    answers: List[int] = Field(..., min_length=10, max_length=10)


class Milestones(BaseModel):
    age_group: str
    bracket_end: int
    milestones: List[str]


class ImmunizationEntry(BaseModel):
    name: str
    given_on: Optional[str] = None
    age: Optional[str] = None


class ImmunizationStatus(BaseModel):
    completed: List[ImmunizationEntry]
    upcoming: List[ImmunizationEntry]


class ImmunizationRequest(BaseModel):
    subject: Subject
    history: List[Measurement] = Field(default_factory=list)
    as_of: Optional[date] = None


class DueImmunizationResponse(BaseModel):
    due: Optional[str] = None
