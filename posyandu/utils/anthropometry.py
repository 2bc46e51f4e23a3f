import logging
from datetime import date
from typing import Dict, Optional, Tuple

from posyandu.models.who_standards import ReferenceTableStore, standards
from posyandu.schemas.classification import IndicatorResult
from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Category, Sex, Subject
from posyandu.utils.age import age_in_months
from posyandu.utils.interpolation import lookup
from posyandu.utils.severity import indicator
from posyandu.utils.validation import present

logger = logging.getLogger(__name__)

# Standing height tables start at 24 months; below that length is measured lying down
LENGTH_AGE_LIMIT_MONTHS = 24
MUAC_THRESHOLD_CM = 23.5


def classify_weight_for_age(weight_kg: float, sex: Sex, months: float,
                            store: ReferenceTableStore = standards) -> str:
    ref = lookup(store.weight_for_age(sex), months)
    if weight_kg > ref.sd1:
        return "Risiko berat badan lebih"
    if weight_kg >= ref.sd2neg:
        return "Normal"
    if weight_kg >= ref.sd3neg:
        return "Berat badan kurang"
    return "Berat badan sangat kurang"


def classify_height_for_age(height_cm: float, sex: Sex, months: float,
                            store: ReferenceTableStore = standards) -> Tuple[str, str]:
    """Returns the indicator key (PB/U or TB/U) and its label."""
    if months <= LENGTH_AGE_LIMIT_MONTHS:
        key, ref = "PB/U", lookup(store.length_for_age(sex), months)
    else:
        key, ref = "TB/U", lookup(store.height_for_age(sex), max(LENGTH_AGE_LIMIT_MONTHS, months))

    if height_cm > ref.sd3:
        return key, "Tinggi"
    if height_cm >= ref.sd2neg:
        return key, "Normal"
    if height_cm >= ref.sd3neg:
        return key, "Pendek (stunted)"
    return key, "Sangat pendek (severely stunted)"


def classify_weight_for_height(weight_kg: float, height_cm: float, sex: Sex, months: float,
                               store: ReferenceTableStore = standards) -> Tuple[str, str]:
    """Returns the indicator key (BB/PB or BB/TB) and its label."""
    if months <= LENGTH_AGE_LIMIT_MONTHS:
        key, table = "BB/PB", store.weight_for_length(sex)
    else:
        key, table = "BB/TB", store.weight_for_height(sex)
    ref = lookup(table, height_cm)

    if weight_kg > ref.sd3:
        return key, "Obesitas"
    if weight_kg > ref.sd2:
        return key, "Gizi lebih (overweight)"
    if weight_kg > ref.sd1:
        return key, "Berisiko gizi lebih"
    if weight_kg >= ref.sd2neg:
        return key, "Gizi baik (normal)"
    if weight_kg >= ref.sd3neg:
        return key, "Gizi kurang (wasted)"
    return key, "Gizi buruk (severely wasted)"


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    # Banding uses the one-decimal value that is shown to staff
    return float(f"{weight_kg / (height_m * height_m):.1f}")


def classify_bmi(bmi: float) -> str:
    if bmi < 18.5:
        return "Berat Badan Kurang"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Berat Badan Lebih"
    return "Obesitas"


def classify_muac(muac_cm: float, category: Category) -> str:
    if muac_cm >= MUAC_THRESHOLD_CM:
        return "Normal"
    if category == Category.IBU_HAMIL:
        return "KEK (Kurang Energi Kronis)"
    return "Kurang Gizi"


def bmi_status(weight_kg: float, height_cm: float) -> Dict[str, IndicatorResult]:
    bmi = calculate_bmi(weight_kg, height_cm)
    band = classify_bmi(bmi)
    severity = indicator(band).severity
    return {
        "BMI": IndicatorResult(label=f"{bmi:.1f}", severity=severity),
        "Kategori": IndicatorResult(label=band, severity=severity),
    }


def balita_status(measurement: Measurement, subject: Subject, as_of: date,
                  store: ReferenceTableStore = standards) -> Dict[str, IndicatorResult]:
    months = age_in_months(subject.birth_date, as_of)
    weight, height = measurement.weight_kg, measurement.height_cm
    results: Dict[str, IndicatorResult] = {}

    if present(weight):
        results["BB/U"] = indicator(classify_weight_for_age(weight, subject.sex, months, store))
    if present(height):
        key, label = classify_height_for_age(height, subject.sex, months, store)
        results[key] = indicator(label)
    if present(weight) and present(height):
        key, label = classify_weight_for_height(weight, height, subject.sex, months, store)
        results[key] = indicator(label)

    logger.debug(f"Balita aged {months:.2f} months classified: {sorted(results)}")
    return results


def anthropometric_status(measurement: Measurement, subject: Subject, category: Category,
                          as_of: Optional[date] = None,
                          store: ReferenceTableStore = standards) -> Dict[str, IndicatorResult]:
    """
    Anthropometric indicators for one measurement.

    Balita are graded against the growth tables; every other category gets
    BMI, and pregnant women, adolescents and the elderly additionally get an
    arm-circumference (LILA) status. Indicators whose inputs are missing are
    left out.
    """
    as_of = as_of or measurement.date
    if category == Category.BALITA:
        return balita_status(measurement, subject, as_of, store)

    results: Dict[str, IndicatorResult] = {}
    if category in (Category.IBU_HAMIL, Category.ANAK_REMAJA, Category.LANSIA) and present(measurement.muac_cm):
        results["Status LILA"] = indicator(classify_muac(measurement.muac_cm, category))
    if present(measurement.weight_kg) and present(measurement.height_cm):
        results.update(bmi_status(measurement.weight_kg, measurement.height_cm))
    return results
