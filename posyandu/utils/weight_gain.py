import logging
import math
from datetime import date
from typing import Iterable, Optional

from posyandu.schemas.classification import WeightGainResult, WeightGainStatus
from posyandu.schemas.measurement import Measurement
from posyandu.utils.age import age_in_months
from posyandu.utils.validation import check_value, present

logger = logging.getLogger(__name__)

# Kenaikan Berat Minimum (grams per month) by completed month of age
KBM_FIRST_MONTH = 800
KBM_TABLE = (
    (2, 900),
    (3, 800),
    (4, 600),
    (5, 500),
    (6, 400),
    (12, 300),
    (24, 200),
)


def minimum_gain_grams(age_months: int) -> Optional[int]:
    """KBM for a child of ``age_months`` completed months; None above 24 months."""
    if age_months < 1:
        return KBM_FIRST_MONTH
    for upper, grams in KBM_TABLE:
        if age_months <= upper:
            return grams
    return None


def month_gap(previous: date, current: date) -> int:
    return (current.year - previous.year) * 12 + (current.month - previous.month)


def previous_weighing(current_date: date, history: Iterable[Measurement]) -> Optional[Measurement]:
    earlier = []
    for record in history:
        check_value("weight_kg", record.weight_kg)
        # A zero weight on an earlier visit means the child was not weighed
        if record.date < current_date and present(record.weight_kg):
            earlier.append(record)
    if not earlier:
        return None
    return max(earlier, key=lambda record: record.date)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def evaluate_weight_gain(current_weight: float, current_date: date, birth_date: date,
                         history: Iterable[Measurement]) -> WeightGainResult:
    """
    Month-over-month weight-gain status (N/T/B/O as written on the KMS card).

    Only the latest weighing strictly before ``current_date`` is compared.
    A gap of more than one calendar month breaks the trend and yields "O".
    """
    check_value("weight_kg", current_weight)

    previous = previous_weighing(current_date, history)
    if previous is None:
        return WeightGainResult(status=WeightGainStatus.BARU_DITIMBANG)

    if month_gap(previous.date, current_date) > 1:
        logger.debug(f"Last weighing on {previous.date} is more than a month before {current_date}")
        return WeightGainResult(status=WeightGainStatus.O)

    diff_grams = round_half_up((current_weight - previous.weight_kg) * 1000)
    age_months = int(math.floor(age_in_months(birth_date, current_date)))
    threshold = minimum_gain_grams(age_months)

    if threshold is None:
        gained = diff_grams > 0
    else:
        gained = diff_grams >= threshold

    status = WeightGainStatus.NAIK if gained else WeightGainStatus.TIDAK_NAIK
    return WeightGainResult(status=status, diff_grams=diff_grams)
