from datetime import date

import pytest

from posyandu.core.errors import ValidationError
from posyandu.schemas.measurement import Measurement
from posyandu.schemas.screening import HouseholdSurvey, PhbsClassification
from posyandu.utils.immunization import due_immunization, immunization_status
from posyandu.utils.milestones import developmental_milestones
from posyandu.utils.screening import (
    calculate_epds_score, calculate_gad2_score, calculate_phbs_score, calculate_phq2_score, questionnaire
)

HEALTHY_HOUSEHOLD = dict(
    is_pregnant=False,
    has_infant_0_11_months=False,
    has_child_7_23_months=False,
    has_child_2_5_years=False,
    balanced_diet=True,
    has_adolescent_girl=False,
    iodized_salt=True,
    main_water_source="PAMSIMAS",
    latrine_disposal="Tangki septik disedot < 5 thn / SPALD",
    waste_disposed_properly=True,
    physical_activity=True,
    smoking_indoors=False,
    handwashing_with_soap=True,
    tooth_brushing=True,
    regular_health_check=True,
    mosquito_larvae_found=False,
)


def test_phbs_all_indicators_met():
    score = calculate_phbs_score(HouseholdSurvey(**HEALTHY_HOUSEHOLD))
    assert score.score == 16
    assert score.classification == PhbsClassification.PARIPURNA


def test_phbs_unanswered_survey_scores_low():
    score = calculate_phbs_score(HouseholdSurvey())
    # Only growth monitoring counts when no child is declared
    assert score.score == 1
    assert score.classification == PhbsClassification.PRATAMA


def test_phbs_unmonitored_toddler_and_unsafe_latrine():
    answers = dict(HEALTHY_HOUSEHOLD, has_child_2_5_years=True, growth_monitored_2_5_years=False,
                   latrine_disposal="Cubluk / Lubang Tanah", main_water_source="Sumur gali tak terlindungi")
    score = calculate_phbs_score(HouseholdSurvey(**answers))
    assert score.score == 13
    assert score.classification == PhbsClassification.UTAMA


def test_phq2_positive_from_three():
    assert calculate_phq2_score(1, 2).positive
    assert not calculate_phq2_score(1, 1).positive
    assert "PHQ-9" in calculate_phq2_score(3, 0).interpretation


def test_gad2_negative():
    result = calculate_gad2_score(0, 2)
    assert result.score == 2
    assert result.interpretation.startswith("Negatif")


def test_two_item_answers_out_of_range_rejected():
    with pytest.raises(ValidationError):
        calculate_phq2_score(4, 0)


@pytest.mark.parametrize("answers, prefix", [
    ([0] * 10, "Normal"),
    ([1] * 10, "Borderline"),
    ([2] * 6 + [1] * 3 + [0], "Positif"),
])
def test_epds_interpretation(answers, prefix):
    assert calculate_epds_score(answers).interpretation.startswith(prefix)


def test_epds_self_harm_warning():
    result = calculate_epds_score([0] * 9 + [1])
    assert result.positive
    assert "PERHATIAN" in result.interpretation


def test_epds_requires_ten_answers():
    with pytest.raises(ValidationError):
        calculate_epds_score([0] * 9)


@pytest.mark.parametrize("age, group", [
    (0.5, "0-3 Bulan"), (3.9, "0-3 Bulan"), (4, "3-6 Bulan"), (24, "18-24 Bulan"),
    (59, "4-5 Tahun"), (61, "5+ Tahun"),
])
def test_milestone_brackets(age, group):
    assert developmental_milestones(age).age_group == group


def test_immunization_status(infant_girl):
    history = [
        Measurement(date=date(2024, 1, 15), immunizations=("BCG", "OPV 1")),
        Measurement(date=date(2023, 11, 15), immunizations=("HB0",)),
        Measurement(date=date(2024, 2, 15), immunizations=("OPV 1",)),
    ]
    status = immunization_status(infant_girl.birth_date, history, date(2024, 2, 15))
    assert [entry.name for entry in status.completed] == ["HB0", "BCG", "OPV 1"]
    assert status.completed[0].given_on == "15 November 2023"
    upcoming = [entry.name for entry in status.upcoming]
    assert upcoming[0] == "DPT-HB-Hib 2"
    assert "DPT-HB-Hib 1" not in upcoming
    assert "BCG" not in upcoming


def test_due_immunization(infant_girl, adult_man):
    history = [Measurement(date=date(2023, 11, 15), immunizations=("HB0",))]
    assert due_immunization(infant_girl, history, date(2024, 2, 15)) == "BCG"
    assert due_immunization(adult_man, [], date(2024, 2, 15)) is None


@pytest.mark.parametrize("instrument, count", [("phq2", 2), ("GAD2", 2), ("epds", 10)])
def test_questionnaire(instrument, count):
    result = questionnaire(instrument)
    assert result.instrument == instrument.lower()
    assert len(result.questions) == count


def test_unknown_questionnaire_rejected():
    with pytest.raises(ValidationError) as excinfo:
        questionnaire("phq9")
    assert excinfo.value.field == "instrument"
