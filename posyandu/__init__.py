"""Growth and health status classification for Posyandu visits."""

from posyandu.core.errors import ValidationError
from posyandu.utils.status import classify_growth, classify_visit, derive_category, to_record_fields
from posyandu.utils.vital_signs import classify_vitals
from posyandu.utils.weight_gain import evaluate_weight_gain

__all__ = [
    "ValidationError",
    "classify_growth",
    "classify_visit",
    "classify_vitals",
    "derive_category",
    "evaluate_weight_gain",
    "to_record_fields",
]
