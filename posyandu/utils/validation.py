import logging
import math
from typing import Optional

from posyandu.core.errors import ValidationError
from posyandu.schemas.measurement import Measurement

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = (
    "weight_kg",
    "height_cm",
    "head_circumference_cm",
    "muac_cm",
    "abdominal_circumference_cm",
    "systolic",
    "diastolic",
    "glucose",
    "cholesterol",
    "uric_acid",
    "hemoglobin",
)


def check_value(field: str, value: Optional[float]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValidationError(field, "must be a finite number")
    if value < 0:
        raise ValidationError(field, f"must not be negative (got {value})")


def check_measurement(measurement: Measurement) -> None:
    """Reject negative or non-finite readings before any classification runs."""
    for field in NUMERIC_FIELDS:
        try:
            check_value(field, getattr(measurement, field))
        except ValidationError as e:
            logger.warning(f"Rejected measurement dated {measurement.date}: {e}")
            raise


def present(value: Optional[float]) -> bool:
    """True when a reading was taken; zero counts as not taken."""
    return value is not None and value > 0
