from datetime import date

import pytest

from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Category, Sex
from posyandu.utils.anthropometry import (
    anthropometric_status, calculate_bmi, classify_bmi, classify_height_for_age, classify_muac,
    classify_weight_for_age, classify_weight_for_height
)

AT_12_MONTHS = date(2024, 1, 10)


@pytest.mark.parametrize("weight, expected", [
    (11.5, "Risiko berat badan lebih"),
    (11.0, "Normal"),
    (9.5, "Normal"),
    (8.0, "Normal"),
    (7.7, "Berat badan kurang"),
    (7.4, "Berat badan kurang"),
    (7.0, "Berat badan sangat kurang"),
])
def test_weight_for_age_bands(weight, expected):
    assert classify_weight_for_age(weight, Sex.MALE, 12.0) == expected


@pytest.mark.parametrize("height, expected", [
    (83.5, "Tinggi"),
    (75.0, "Normal"),
    (71.0, "Normal"),
    (70.0, "Pendek (stunted)"),
    (68.0, "Sangat pendek (severely stunted)"),
])
def test_length_for_age_bands(height, expected):
    assert classify_height_for_age(height, Sex.MALE, 12.0) == ("PB/U", expected)


@pytest.mark.parametrize("weight, expected", [
    (12.5, "Obesitas"),
    (11.5, "Gizi lebih (overweight)"),
    (10.5, "Berisiko gizi lebih"),
    (10.3, "Gizi baik (normal)"),
    (9.5, "Gizi baik (normal)"),
    (8.4, "Gizi baik (normal)"),
    (8.0, "Gizi kurang (wasted)"),
    (7.5, "Gizi buruk (severely wasted)"),
])
def test_weight_for_length_bands(weight, expected):
    assert classify_weight_for_height(weight, 75.0, Sex.MALE, 12.0) == ("BB/PB", expected)


def test_length_table_used_up_to_24_months():
    # Length table sd2neg at 24 months is 81.7; height table sd2neg is 83.2
    assert classify_height_for_age(82.5, Sex.MALE, 24.0) == ("PB/U", "Normal")


def test_height_table_used_after_24_months():
    assert classify_height_for_age(82.5, Sex.MALE, 24.01) == ("TB/U", "Pendek (stunted)")


def test_weight_for_height_table_used_after_24_months():
    # At 85 cm: weight-for-length sd2 is 13.8, weight-for-height sd2 is 14.1
    assert classify_weight_for_height(14.0, 85.0, Sex.MALE, 24.0) == ("BB/PB", "Gizi lebih (overweight)")
    assert classify_weight_for_height(14.0, 85.0, Sex.MALE, 30.0) == ("BB/TB", "Berisiko gizi lebih")


def test_bmi_is_rounded_to_one_decimal():
    assert calculate_bmi(70, 170) == 24.2
    assert calculate_bmi(95, 170) == 32.9


@pytest.mark.parametrize("bmi, expected", [
    (18.4, "Berat Badan Kurang"),
    (18.5, "Normal"),
    (24.9, "Normal"),
    (25.0, "Berat Badan Lebih"),
    (29.9, "Berat Badan Lebih"),
    (30.0, "Obesitas"),
])
def test_bmi_bands(bmi, expected):
    assert classify_bmi(bmi) == expected


def test_muac_labels_depend_on_category():
    assert classify_muac(22.0, Category.IBU_HAMIL) == "KEK (Kurang Energi Kronis)"
    assert classify_muac(22.0, Category.LANSIA) == "Kurang Gizi"
    assert classify_muac(22.0, Category.ANAK_REMAJA) == "Kurang Gizi"
    assert classify_muac(23.5, Category.IBU_HAMIL) == "Normal"


def test_balita_status_reports_all_three_indices(toddler_boy):
    measurement = Measurement(date=AT_12_MONTHS, weight_kg=9.5, height_cm=75.0)
    result = anthropometric_status(measurement, toddler_boy, Category.BALITA)
    assert {key: item.label for key, item in result.items()} == {
        "BB/U": "Normal",
        "PB/U": "Normal",
        "BB/PB": "Gizi baik (normal)",
    }


def test_balita_without_height_only_gets_weight_for_age(toddler_boy):
    measurement = Measurement(date=AT_12_MONTHS, weight_kg=9.5)
    result = anthropometric_status(measurement, toddler_boy, Category.BALITA)
    assert list(result) == ["BB/U"]


def test_adult_gets_bmi_without_muac(adult_man):
    measurement = Measurement(date=date(2024, 5, 1), weight_kg=70, height_cm=170, muac_cm=22)
    result = anthropometric_status(measurement, adult_man, Category.DEWASA)
    assert result["BMI"].label == "24.2"
    assert result["Kategori"].label == "Normal"
    assert "Status LILA" not in result


def test_pregnant_muac_reported_without_height(pregnant_woman):
    measurement = Measurement(date=date(2024, 5, 1), weight_kg=50, muac_cm=22.5)
    result = anthropometric_status(measurement, pregnant_woman, Category.IBU_HAMIL)
    assert result["Status LILA"].label == "KEK (Kurang Energi Kronis)"
    assert "BMI" not in result
