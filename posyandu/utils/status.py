import logging
from datetime import date
from typing import Dict, Iterable, Optional

from posyandu.models.who_standards import ReferenceTableStore, standards
from posyandu.schemas.classification import ClassificationResult
from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Category, Subject
from posyandu.utils.age import determine_category
from posyandu.utils.anthropometry import anthropometric_status
from posyandu.utils.severity import indicator
from posyandu.utils.validation import check_measurement, present
from posyandu.utils.vital_signs import classify_vitals
from posyandu.utils.weight_gain import evaluate_weight_gain

logger = logging.getLogger(__name__)

# Indicator key -> column cached on the measurement record
RECORD_FIELDS = {
    "BB/U": "status_bb_u",
    "PB/U": "status_tb_u",
    "TB/U": "status_tb_u",
    "BB/PB": "status_bb_tb",
    "BB/TB": "status_bb_tb",
    "BMI": "status_bmi",
    "Kategori": "status_kategori_bmi",
    "Status LILA": "status_lila",
    "Kenaikan Berat": "status_kenaikan_berat",
    "Tensi": "kesimpulan_tensi",
    "Gula Darah": "kesimpulan_gds",
    "Kolesterol": "kesimpulan_kolesterol",
    "Asam Urat": "kesimpulan_asam_urat",
    "HB": "kesimpulan_hb",
}


def derive_category(birth_date: date, is_pregnant: bool = False, as_of: Optional[date] = None) -> Category:
    return determine_category(birth_date, is_pregnant, as_of)


def classify_growth(measurement: Measurement, subject: Subject, as_of: Optional[date] = None,
                    history: Optional[Iterable[Measurement]] = None,
                    store: ReferenceTableStore = standards) -> ClassificationResult:
    """
    Growth and nutrition status for one measurement.

    The category is derived from the birth date and pregnancy flag at
    ``as_of`` (defaults to the measurement date). For balita with a weight,
    the month-over-month weight-gain status is included under
    "Kenaikan Berat", using ``history`` as the earlier weighings.
    """
    check_measurement(measurement)
    as_of = as_of or measurement.date
    category = derive_category(subject.birth_date, subject.is_pregnant, as_of)

    results = anthropometric_status(measurement, subject, category, as_of, store)

    if category == Category.BALITA and present(measurement.weight_kg):
        gain = evaluate_weight_gain(measurement.weight_kg, measurement.date, subject.birth_date, history or ())
        results["Kenaikan Berat"] = indicator(gain.status.value)

    logger.debug(f"Classified {category.value} measurement of {measurement.date}: {len(results)} indicators")
    return results


def classify_visit(measurement: Measurement, subject: Subject, as_of: Optional[date] = None,
                   history: Optional[Iterable[Measurement]] = None,
                   store: ReferenceTableStore = standards) -> ClassificationResult:
    results = classify_growth(measurement, subject, as_of, history, store)
    results.update(classify_vitals(measurement, subject, as_of))
    return results


def to_record_fields(result: ClassificationResult) -> Dict[str, str]:
    """Flatten a result into the status columns appended to the measurement record."""
    return {
        RECORD_FIELDS[key]: item.label
        for key, item in result.items()
        if key in RECORD_FIELDS
    }
