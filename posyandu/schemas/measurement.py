import datetime
from typing import Optional, Tuple

from pydantic import BaseModel


class Measurement(BaseModel):
    date: datetime.date
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    head_circumference_cm: Optional[float] = None
    muac_cm: Optional[float] = None
    abdominal_circumference_cm: Optional[float] = None
    systolic: Optional[float] = None
    diastolic: Optional[float] = None
    glucose: Optional[float] = None
    cholesterol: Optional[float] = None
    uric_acid: Optional[float] = None
    hemoglobin: Optional[float] = None
    # Vaccines given at this visit, e.g. ("BCG", "OPV 1")
    immunizations: Tuple[str, ...] = ()

    class Config:
        frozen = True
