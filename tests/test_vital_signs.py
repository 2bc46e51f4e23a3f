from datetime import date

import pytest

from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Category, Sex, Subject
from posyandu.utils.vital_signs import (
    classify_blood_pressure, classify_cholesterol, classify_glucose, classify_hemoglobin,
    classify_uric_acid, classify_vitals
)

VISIT = date(2024, 5, 1)


@pytest.mark.parametrize("systolic, diastolic, expected", [
    (85, 55, "Hipotensi"),
    (85, 65, "Normal"),
    (119, 79, "Normal"),
    (120, 79, "Pra-Hipertensi"),
    (135, 85, "Pra-Hipertensi"),
    # Pra-Hipertensi is checked before Tahap 1
    (125, 95, "Pra-Hipertensi"),
    (150, 70, "Hipertensi Tahap 1"),
    (110, 95, "Hipertensi Tahap 1"),
    (165, 70, "Hipertensi Tahap 2"),
    (100, 100, "Hipertensi Tahap 2"),
])
def test_blood_pressure_rules(systolic, diastolic, expected):
    assert classify_blood_pressure(systolic, diastolic) == expected


def test_fractional_blood_pressure_between_bands_matches_nothing():
    assert classify_blood_pressure(139.5, 70) is None


@pytest.mark.parametrize("glucose, expected", [
    (139, "Normal"), (140, "Pra-Diabetes"), (199, "Pra-Diabetes"), (250, "Tinggi (Diabetes)"),
])
def test_glucose_rules(glucose, expected):
    assert classify_glucose(glucose) == expected


@pytest.mark.parametrize("cholesterol, expected", [
    (199, "Normal"), (200, "Batas Tinggi"), (239, "Batas Tinggi"), (240, "Kolesterol Tinggi"),
])
def test_cholesterol_rules(cholesterol, expected):
    assert classify_cholesterol(cholesterol) == expected


@pytest.mark.parametrize("value, sex, expected", [
    (7.5, Sex.MALE, "Asam Urat Tinggi"),
    (7.0, Sex.MALE, "Normal"),
    (6.0, Sex.MALE, "Normal"),
    (6.0, Sex.FEMALE, "Asam Urat Tinggi"),
    (3.0, Sex.MALE, "Asam Urat Rendah"),
    (3.0, Sex.FEMALE, "Normal"),
    (2.0, Sex.FEMALE, "Asam Urat Rendah"),
])
def test_uric_acid_rules(value, sex, expected):
    assert classify_uric_acid(value, sex) == expected


@pytest.mark.parametrize("hb, category, age, sex, expected", [
    (10.5, Category.IBU_HAMIL, 28, Sex.FEMALE, "Anemia"),
    (11.0, Category.IBU_HAMIL, 28, Sex.FEMALE, "Normal"),
    (10.9, Category.BALITA, 3, Sex.MALE, "Anemia"),
    (11.0, Category.BALITA, 3, Sex.MALE, "Normal"),
    (11.4, Category.ANAK_REMAJA, 8, Sex.FEMALE, "Anemia"),
    (11.9, Category.ANAK_REMAJA, 13, Sex.MALE, "Anemia"),
    (12.5, Category.ANAK_REMAJA, 16, Sex.MALE, "Anemia"),
    (12.5, Category.ANAK_REMAJA, 16, Sex.FEMALE, "Normal"),
])
def test_hemoglobin_rules(hb, category, age, sex, expected):
    assert classify_hemoglobin(hb, category, age, sex) == expected


def test_hemoglobin_not_graded_for_adults():
    assert classify_hemoglobin(9.0, Category.DEWASA, 40, Sex.MALE) is None


def test_classify_vitals_for_pregnant_woman(pregnant_woman):
    measurement = Measurement(date=VISIT, systolic=135, diastolic=85, glucose=250, hemoglobin=10.5)
    result = classify_vitals(measurement, pregnant_woman)
    assert result["Tensi"].label == "Pra-Hipertensi"
    assert result["Gula Darah"].label == "Tinggi (Diabetes)"
    assert result["HB"].label == "Anemia"


def test_classify_vitals_skips_missing_and_zero_readings(adult_man):
    measurement = Measurement(date=VISIT, systolic=135, glucose=0, hemoglobin=9.0)
    assert classify_vitals(measurement, adult_man) == {}


def test_hemoglobin_uses_age_at_visit():
    teenager = Subject(birth_date=date(2009, 6, 1), sex=Sex.MALE)
    measurement = Measurement(date=VISIT, hemoglobin=12.5)
    # 14 years old: cut-off 12.0
    assert classify_vitals(measurement, teenager)["HB"].label == "Normal"
    # 15 years old: male cut-off 13.0
    assert classify_vitals(measurement, teenager, date(2024, 6, 1))["HB"].label == "Anemia"
