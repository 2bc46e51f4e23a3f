from datetime import date

import pytest

from posyandu.schemas.measurement import Measurement
from posyandu.schemas.subject import Sex, Subject


@pytest.fixture(scope="session")
def toddler_boy() -> Subject:
    """
    Boy born 2023-01-10; exactly 12 months old on 2024-01-10.
    """
    return Subject(birth_date=date(2023, 1, 10), sex=Sex.MALE)


@pytest.fixture(scope="session")
def infant_girl() -> Subject:
    """
    Girl born 2023-11-15; exactly 3 months old on 2024-02-15.
    """
    return Subject(birth_date=date(2023, 11, 15), sex=Sex.FEMALE)


@pytest.fixture(scope="session")
def pregnant_woman() -> Subject:
    return Subject(birth_date=date(1995, 6, 1), sex=Sex.FEMALE, is_pregnant=True)


@pytest.fixture(scope="session")
def adult_man() -> Subject:
    return Subject(birth_date=date(1980, 3, 15), sex=Sex.MALE)


@pytest.fixture(scope="session")
def elderly_woman() -> Subject:
    return Subject(birth_date=date(1950, 8, 17), sex=Sex.FEMALE)


@pytest.fixture
def weight_history():
    return [
        Measurement(date=date(2023, 12, 15), weight_kg=3.4),
        Measurement(date=date(2024, 1, 15), weight_kg=4.0),
        Measurement(date=date(2024, 2, 1), height_cm=55.0),
    ]
