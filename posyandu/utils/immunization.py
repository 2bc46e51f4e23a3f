import math
from datetime import date
from typing import Iterable, List, Optional

from posyandu.schemas.measurement import Measurement
from posyandu.schemas.screening import ImmunizationEntry, ImmunizationStatus
from posyandu.schemas.subject import Category, Subject
from posyandu.utils.age import age_in_months, determine_category

# National basic immunisation schedule: (vaccine, recommended age in months, display age)
SCHEDULE = [
    ("HB0", 0, "Saat Lahir (<24 jam)"),
    ("BCG", 1, "1 Bulan"),
    ("OPV 1", 1, "1 Bulan"),
    ("DPT-HB-Hib 1", 2, "2 Bulan"),
    ("OPV 2", 2, "2 Bulan"),
    ("PCV 1", 2, "2 Bulan"),
    ("RV 1", 2, "2 Bulan"),
    ("DPT-HB-Hib 2", 3, "3 Bulan"),
    ("OPV 3", 3, "3 Bulan"),
    ("PCV 2", 3, "3 Bulan"),
    ("RV 2", 3, "3 Bulan"),
    ("DPT-HB-Hib 3", 4, "4 Bulan"),
    ("OPV 4", 4, "4 Bulan"),
    ("IPV 1", 4, "4 Bulan"),
    ("RV 3", 4, "4 Bulan"),
    ("MR 1", 9, "9 Bulan"),
    ("IPV 2", 9, "9 Bulan"),
    ("JE", 9, "9 Bulan"),
    ("PCV 3", 12, "12 Bulan"),
    ("DPT-HB-Hib 4", 18, "18 Bulan"),
    ("MR 2", 18, "18 Bulan"),
]

MONTH_NAMES = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]


def format_date(value: date) -> str:
    return f"{value.day:02d} {MONTH_NAMES[value.month - 1]} {value.year}"


def given_immunizations(history: Iterable[Measurement]) -> List[ImmunizationEntry]:
    """First administration of every vaccine recorded in the history, oldest first."""
    seen = set()
    completed = []
    for record in sorted(history, key=lambda r: r.date):
        for vaccine in record.immunizations:
            if vaccine not in seen:
                seen.add(vaccine)
                completed.append(ImmunizationEntry(name=vaccine, given_on=format_date(record.date)))
    return completed


def immunization_status(birth_date: date, history: Iterable[Measurement],
                        as_of: Optional[date] = None) -> ImmunizationStatus:
    completed = given_immunizations(history)
    given = {entry.name for entry in completed}
    current_month = math.floor(age_in_months(birth_date, as_of))

    upcoming = [
        ImmunizationEntry(name=name, age=label)
        for name, month, label in SCHEDULE
        if name not in given and month >= current_month
    ]
    return ImmunizationStatus(completed=completed, upcoming=upcoming)


def due_immunization(subject: Subject, history: Iterable[Measurement],
                     as_of: Optional[date] = None) -> Optional[str]:
    """The earliest scheduled vaccine the child is old enough for but has not received."""
    if determine_category(subject.birth_date, subject.is_pregnant, as_of) != Category.BALITA:
        return None

    given = {entry.name for entry in given_immunizations(history)}
    current_month = math.floor(age_in_months(subject.birth_date, as_of))
    for name, month, _ in SCHEDULE:
        if name not in given and current_month >= month:
            return name
    return None
