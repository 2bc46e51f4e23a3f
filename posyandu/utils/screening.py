import logging
from typing import Sequence

from posyandu.core.errors import ValidationError
from posyandu.schemas.screening import (
    HouseholdSurvey, PhbsClassification, PhbsScore, Questionnaire, ScreeningScore
)

logger = logging.getLogger(__name__)

SAFE_WATER_SOURCES = (
    "PAMSIMAS",
    "Sumur bor dengan pompa listrik",
    "Sumur bor dengan pompa tangan",
    "Sumur gali terlindungi",
)

UNSAFE_LATRINE_DISPOSAL = (
    "Cubluk / Lubang Tanah",
    "Dibuang langsung ke lingkungan",
)

PHQ2_QUESTIONS = [
    "Selama 2 minggu terakhir, apakah Anda merasa kurang berminat atau bergairah dalam melakukan apapun?",
    "Selama 2 minggu terakhir, apakah Anda merasa murung, sedih, atau putus asa?",
]

GAD2_QUESTIONS = [
    "Selama 2 minggu terakhir, apakah Anda merasa gelisah, cemas, atau khawatir yang berlebihan?",
    "Selama 2 minggu terakhir, apakah Anda merasa tidak mampu menghentikan atau mengendalikan rasa cemas?",
]

EPDS_QUESTIONS = [
    "1. Saya mampu tertawa dan melihat sisi lucunya dari suatu hal.",
    "2. Saya menantikan hal-hal yang menyenangkan dengan perasaan gembira.",
    "3. Saya menyalahkan diri sendiri secara berlebihan ketika ada yang salah.",
    "4. Saya merasa cemas atau khawatir tanpa alasan yang jelas.",
    "5. Saya merasa takut atau panik tanpa alasan yang jelas.",
    "6. Saya merasa kewalahan (semua hal terasa terlalu berat).",
    "7. Saya merasa sangat tidak bahagia sehingga saya sulit tidur.",
    "8. Saya merasa sedih atau menderita.",
    "9. Saya merasa sangat tidak bahagia sehingga saya menangis.",
    "10. Pikiran untuk menyakiti diri sendiri pernah muncul dalam benak saya.",
]

QUESTIONNAIRES = {
    "phq2": PHQ2_QUESTIONS,
    "gad2": GAD2_QUESTIONS,
    "epds": EPDS_QUESTIONS,
}

# Two-item screeners are positive from this score upward
TWO_ITEM_CUTOFF = 3
EPDS_BORDERLINE = 10
EPDS_SEVERE = 13


def calculate_phbs_score(survey: HouseholdSurvey) -> PhbsScore:
    """
    Score the 16 PHBS (clean and healthy living) household indicators.

    Indicators that do not apply to the household (e.g. no infant for the
    facility-delivery question) count as met.
    """
    s = survey
    checks = [
        s.is_pregnant is False or s.six_antenatal_visits is True,
        s.has_infant_0_11_months is False or s.delivered_at_facility is True,
        s.has_child_7_23_months is False or s.exclusive_breastfeeding is True,
        growth_monitoring_met(s),
        s.balanced_diet is True,
        s.has_adolescent_girl is False or s.adolescent_takes_iron_tablets is True,
        s.iodized_salt is True,
        s.main_water_source in SAFE_WATER_SOURCES,
        bool(s.latrine_disposal) and s.latrine_disposal not in UNSAFE_LATRINE_DISPOSAL,
        s.waste_disposed_properly is True,
        s.physical_activity is True,
        s.smoking_indoors is False,
        s.handwashing_with_soap is True,
        s.tooth_brushing is True,
        s.regular_health_check is True,
        s.mosquito_larvae_found is False,
    ]
    score = sum(1 for met in checks if met)

    if score <= 5:
        classification = PhbsClassification.PRATAMA
    elif score <= 10:
        classification = PhbsClassification.MADYA
    elif score <= 15:
        classification = PhbsClassification.UTAMA
    else:
        classification = PhbsClassification.PARIPURNA

    return PhbsScore(score=score, classification=classification)


def growth_monitoring_met(survey: HouseholdSurvey) -> bool:
    has_7_23 = survey.has_child_7_23_months is True
    has_2_5 = survey.has_child_2_5_years is True
    if not has_7_23 and not has_2_5:
        return True
    monitored_7_23 = not has_7_23 or survey.growth_monitored_7_23_months is True
    monitored_2_5 = not has_2_5 or survey.growth_monitored_2_5_years is True
    return monitored_7_23 and monitored_2_5


def check_answers(answers: Sequence[int], expected: int) -> None:
    if len(answers) != expected:
        raise ValidationError("answers", f"expected {expected} answers, got {len(answers)}")
    for number, answer in enumerate(answers, start=1):
        if answer not in (0, 1, 2, 3):
            raise ValidationError("answers", f"answer {number} must be between 0 and 3 (got {answer})")


def calculate_phq2_score(q1: int, q2: int) -> ScreeningScore:
    check_answers([q1, q2], 2)
    score = q1 + q2
    positive = score >= TWO_ITEM_CUTOFF
    interpretation = (
        "Positif: Kemungkinan Depresi. Perlu pemeriksaan lanjutan (PHQ-9)."
        if positive
        else "Negatif: Kemungkinan kecil mengalami gangguan depresi."
    )
    return ScreeningScore(answers=[q1, q2], score=score, positive=positive, interpretation=interpretation)


def calculate_gad2_score(q1: int, q2: int) -> ScreeningScore:
    check_answers([q1, q2], 2)
    score = q1 + q2
    positive = score >= TWO_ITEM_CUTOFF
    interpretation = (
        "Positif: Kemungkinan Gangguan Cemas. Perlu pemeriksaan lanjutan (GAD-7)."
        if positive
        else "Negatif: Kemungkinan kecil mengalami gangguan cemas."
    )
    return ScreeningScore(answers=[q1, q2], score=score, positive=positive, interpretation=interpretation)


def calculate_epds_score(answers: Sequence[int]) -> ScreeningScore:
    """Edinburgh Postnatal Depression Scale; each answer is already scored 0 (best) to 3 (worst)."""
    check_answers(answers, len(EPDS_QUESTIONS))
    score = sum(answers)

    if score >= EPDS_SEVERE:
        interpretation = "Positif: Kemungkinan Depresi Postpartum Berat. Segera rujuk."
    elif score >= EPDS_BORDERLINE:
        interpretation = "Borderline: Risiko Depresi. Perlu pemantauan."
    else:
        interpretation = "Normal: Risiko depresi rendah."

    # Question 10 asks about self-harm
    if answers[9] > 0:
        interpretation += " PERHATIAN: Ada risiko menyakiti diri sendiri."
        logger.warning("EPDS screening flagged self-harm risk")

    return ScreeningScore(
        answers=list(answers),
        score=score,
        positive=score >= EPDS_BORDERLINE or answers[9] > 0,
        interpretation=interpretation,
    )


def questionnaire(instrument: str) -> Questionnaire:
    questions = QUESTIONNAIRES.get(instrument.lower())
    if questions is None:
        raise ValidationError("instrument", f"unknown questionnaire {instrument!r}")
    return Questionnaire(instrument=instrument.lower(), questions=questions)
