"""
Threshold rules for blood pressure, blood glucose, cholesterol, uric acid
and hemoglobin.

Each rule table is an ordered list of ``(predicate, label)`` pairs evaluated
top to bottom; the first matching predicate wins. The blood pressure bands
overlap (e.g. 125/95 satisfies both the Pra-Hipertensi and the Hipertensi
Tahap 1 predicates), so the order is part of the rule and must not be
rearranged into disjoint ranges.
"""
import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from posyandu.schemas.classification import IndicatorResult
from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Category, Sex, Subject
from posyandu.utils.age import age_in_years, determine_category
from posyandu.utils.severity import indicator
from posyandu.utils.validation import check_measurement, present

logger = logging.getLogger(__name__)

BLOOD_PRESSURE_RULES: List[Tuple[Callable[[float, float], bool], str]] = [
    (lambda sis, dia: sis < 90 and dia < 60, "Hipotensi"),
    (lambda sis, dia: sis < 120 and dia < 80, "Normal"),
    (lambda sis, dia: 120 <= sis <= 139 or 80 <= dia <= 89, "Pra-Hipertensi"),
    (lambda sis, dia: 140 <= sis <= 159 or 90 <= dia <= 99, "Hipertensi Tahap 1"),
    (lambda sis, dia: sis >= 160 or dia >= 100, "Hipertensi Tahap 2"),
]

GLUCOSE_RULES: List[Tuple[Callable[[float], bool], str]] = [
    (lambda gds: gds < 140, "Normal"),
    (lambda gds: gds < 200, "Pra-Diabetes"),
    (lambda gds: gds >= 200, "Tinggi (Diabetes)"),
]

CHOLESTEROL_RULES: List[Tuple[Callable[[float], bool], str]] = [
    (lambda chol: chol < 200, "Normal"),
    (lambda chol: chol < 240, "Batas Tinggi"),
    (lambda chol: chol >= 240, "Kolesterol Tinggi"),
]

# (high, low) in mg/dL
URIC_ACID_LIMITS = {
    Sex.MALE: (7.0, 3.4),
    Sex.FEMALE: (5.7, 2.4),
}

HEMOGLOBIN_CATEGORIES = (Category.IBU_HAMIL, Category.BALITA, Category.ANAK_REMAJA)


def first_match(rules, *values) -> Optional[str]:
    for predicate, label in rules:
        if predicate(*values):
            return label
    return None


def classify_blood_pressure(systolic: float, diastolic: float) -> Optional[str]:
    # Fractional readings between the integer bands (e.g. 139.5/70) match no rule
    return first_match(BLOOD_PRESSURE_RULES, systolic, diastolic)


def classify_glucose(glucose: float) -> Optional[str]:
    return first_match(GLUCOSE_RULES, glucose)


def classify_cholesterol(cholesterol: float) -> Optional[str]:
    return first_match(CHOLESTEROL_RULES, cholesterol)


def classify_uric_acid(uric_acid: float, sex: Sex) -> str:
    high, low = URIC_ACID_LIMITS[sex]
    if uric_acid > high:
        return "Asam Urat Tinggi"
    if uric_acid < low:
        return "Asam Urat Rendah"
    return "Normal"


def hemoglobin_threshold(category: Category, age_years: int, sex: Sex) -> Optional[float]:
    """Anemia cut-off in g/dL, or None when hemoglobin is not graded for the category."""
    if category == Category.IBU_HAMIL:
        return 11.0
    if category not in HEMOGLOBIN_CATEGORIES:
        return None
    if age_years < 5:
        return 11.0
    if age_years <= 11:
        return 11.5
    if age_years <= 14:
        return 12.0
    return 13.0 if sex == Sex.MALE else 12.0


def classify_hemoglobin(hemoglobin: float, category: Category, age_years: int, sex: Sex) -> Optional[str]:
    threshold = hemoglobin_threshold(category, age_years, sex)
    if threshold is None:
        return None
    return "Anemia" if hemoglobin < threshold else "Normal"


def classify_vitals(measurement: Measurement, subject: Subject,
                    as_of: Optional[date] = None) -> Dict[str, IndicatorResult]:
    check_measurement(measurement)
    as_of = as_of or measurement.date
    results: Dict[str, IndicatorResult] = {}

    if present(measurement.systolic) and present(measurement.diastolic):
        label = classify_blood_pressure(measurement.systolic, measurement.diastolic)
        if label:
            results["Tensi"] = indicator(label)
        else:
            logger.info(f"Blood pressure {measurement.systolic}/{measurement.diastolic} matched no band")

    if present(measurement.glucose):
        results["Gula Darah"] = indicator(classify_glucose(measurement.glucose))

    if present(measurement.cholesterol):
        results["Kolesterol"] = indicator(classify_cholesterol(measurement.cholesterol))

    if present(measurement.uric_acid):
        results["Asam Urat"] = indicator(classify_uric_acid(measurement.uric_acid, subject.sex))

    if present(measurement.hemoglobin):
        category = determine_category(subject.birth_date, subject.is_pregnant, as_of)
        age_years = age_in_years(subject.birth_date, as_of)
        label = classify_hemoglobin(measurement.hemoglobin, category, age_years, subject.sex)
        if label:
            results["HB"] = indicator(label)

    return results
