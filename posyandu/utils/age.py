from datetime import date, timedelta
from typing import Optional

from posyandu.core.config import settings
from posyandu.core.errors import ValidationError
from posyandu.schemas.classification import AgeDetail
from posyandu.schemas.subject import Category

CATEGORY_LABELS = {
    Category.IBU_HAMIL: "Ibu Hamil",
    Category.BALITA: "Bayi & Balita",
    Category.ANAK_REMAJA: "Anak & Remaja",
    Category.DEWASA: "Dewasa",
    Category.LANSIA: "Lansia",
}

def age_detail(birth_date: date, as_of: Optional[date] = None) -> AgeDetail:
    """
    Calendar age as completed years, months and days.

    Negative days borrow the length of the month before ``as_of``'s month,
    negative months borrow a year.
    """
    as_of = as_of or date.today()
    if birth_date > as_of:
        raise ValidationError("birth_date", f"{birth_date} is after {as_of}")

    years = as_of.year - birth_date.year
    months = as_of.month - birth_date.month
    days = as_of.day - birth_date.day

    if days < 0:
        months -= 1
        last_day_of_previous_month = as_of.replace(day=1) - timedelta(days=1)
        days += last_day_of_previous_month.day

    if months < 0:
        years -= 1
        months += 12

    return AgeDetail(years=years, months=months, days=days)


def age_in_months(birth_date: date, as_of: Optional[date] = None) -> float:
    detail = age_detail(birth_date, as_of)
    return detail.years * 12 + detail.months + detail.days / settings.DAYS_PER_MONTH


def age_in_years(birth_date: date, as_of: Optional[date] = None) -> int:
    return age_detail(birth_date, as_of).years


def determine_category(birth_date: date, is_pregnant: bool = False, as_of: Optional[date] = None) -> Category:
    if is_pregnant:
        return Category.IBU_HAMIL

    detail = age_detail(birth_date, as_of)
    total_months = detail.years * 12 + detail.months

    if total_months < 60:
        return Category.BALITA
    if detail.years < 18:
        return Category.ANAK_REMAJA
    if detail.years < 60:
        return Category.DEWASA
    return Category.LANSIA


def category_label(category: Category) -> str:
    return CATEGORY_LABELS.get(category, "Tidak Diketahui")


def format_detailed_age(birth_date: date, as_of: Optional[date] = None) -> str:
    detail = age_detail(birth_date, as_of)
    if detail.years == 0:
        return "Kurang dari 1 bulan" if detail.months == 0 else f"{detail.months} bulan"
    if detail.months > 0:
        return f"{detail.years} tahun {detail.months} bulan"
    return f"{detail.years} tahun"
