from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from posyandu.utils.dates import normalize_date_string


class Sex(str, Enum):
    MALE = "Laki-laki"
    FEMALE = "Perempuan"


class Category(str, Enum):
    IBU_HAMIL = "ibu-hamil"
    BALITA = "balita"
    ANAK_REMAJA = "anak-remaja"
    DEWASA = "dewasa"
    LANSIA = "lansia"


class Subject(BaseModel):
    birth_date: date
    sex: Sex
    is_pregnant: bool = False

    class Config:
        frozen = True


class CategoryRequest(BaseModel):
    birth_date: date
    is_pregnant: bool = False
    as_of: Optional[date] = None

    @field_validator("birth_date", "as_of", mode="before")
    @classmethod
    def accept_form_dates(cls, value):
        # Registration forms and imported sheets write dates day-first
        if isinstance(value, str):
            return normalize_date_string(value) or value
        return value


class CategoryResponse(BaseModel):
    category: Category
    label: str
    age: str
