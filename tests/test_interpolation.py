import math

import numpy as np
import pytest

from posyandu.core.errors import ValidationError
from posyandu.models.who_standards import (
    HEIGHT_FOR_AGE_BOYS, WEIGHT_FOR_AGE_GIRLS, WEIGHT_FOR_HEIGHT_BOYS, WEIGHT_FOR_LENGTH_BOYS, standards
)
from posyandu.utils.interpolation import lookup


def test_tabulated_keys_return_stored_rows():
    for _, _, table in standards.tables():
        for key, row in table.rows():
            assert lookup(table, key) == row


def test_key_within_tolerance_returns_stored_row():
    assert lookup(WEIGHT_FOR_AGE_GIRLS, 12.0004) == WEIGHT_FOR_AGE_GIRLS.row(12)


def test_midpoint_is_linear_interpolation():
    ref = lookup(WEIGHT_FOR_LENGTH_BOYS, 72.5)
    assert ref.sd0 == pytest.approx((8.3 + 9.5) / 2)
    assert ref.sd3neg == pytest.approx((6.9 + 7.9) / 2)
    assert ref.sd3 == pytest.approx((10.8 + 12.2) / 2)


def test_interpolation_between_uneven_keys():
    # Rows at 25 and 30 months
    ref = lookup(HEIGHT_FOR_AGE_BOYS, 27.0)
    assert ref.sd0 == pytest.approx(88.0 + (91.9 - 88.0) * 2 / 5)


def test_median_never_decreases_across_key_range():
    for _, _, table in standards.tables():
        keys = np.linspace(table.keys[0] - 5, table.keys[-1] + 5, 400)
        medians = [lookup(table, float(key)).sd0 for key in keys]
        assert all(b >= a for a, b in zip(medians, medians[1:])), table.name


def test_keys_below_range_clamp_to_first_row():
    assert lookup(WEIGHT_FOR_HEIGHT_BOYS, 60.0) == WEIGHT_FOR_HEIGHT_BOYS.row(0)
    assert lookup(WEIGHT_FOR_HEIGHT_BOYS, -1.0) == lookup(WEIGHT_FOR_HEIGHT_BOYS, 65.0)


def test_keys_above_range_clamp_to_last_row():
    last = len(WEIGHT_FOR_HEIGHT_BOYS) - 1
    assert lookup(WEIGHT_FOR_HEIGHT_BOYS, 130.0) == WEIGHT_FOR_HEIGHT_BOYS.row(last)
    assert lookup(WEIGHT_FOR_HEIGHT_BOYS, 130.0) == lookup(WEIGHT_FOR_HEIGHT_BOYS, 120.0)


@pytest.mark.parametrize("key", [math.nan, math.inf, -math.inf])
def test_non_finite_key_rejected(key):
    with pytest.raises(ValidationError):
        lookup(WEIGHT_FOR_AGE_GIRLS, key)
