from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .measurement import Measurement
from .subject import Category, Subject


class Severity(str, Enum):
    NORMAL = "normal"
    RISK = "risk"
    ALERT = "alert"


class IndicatorResult(BaseModel):
    label: str
    severity: Severity

    class Config:
        frozen = True


# Indicator key (e.g. "BB/U", "Status LILA") -> result
ClassificationResult = Dict[str, IndicatorResult]


class WeightGainStatus(str, Enum):
    NAIK = "Naik"
    TIDAK_NAIK = "Tidak Naik"
    BARU_DITIMBANG = "Baru Ditimbang"
    O = "O"


class WeightGainResult(BaseModel):
    status: WeightGainStatus
    diff_grams: Optional[int] = None

    class Config:
        frozen = True


class AgeDetail(BaseModel):
    years: int
    months: int
    days: int

    class Config:
        frozen = True


class ClassificationRequest(BaseModel):
    subject: Subject
    measurement: Measurement
    as_of: Optional[date] = None
    history: List[Measurement] = Field(default_factory=list)


class WeightGainRequest(BaseModel):
    current_weight: float = Field(..., gt=0)
    current_date: date
    birth_date: date
    history: List[Measurement] = Field(default_factory=list)


class VisitResponse(BaseModel):
    category: Category
    result: Dict[str, IndicatorResult]
    record_fields: Dict[str, str] = Field(default_factory=dict)
