from pydantic import BaseModel
from typing import Any, Optional, Generic, TypeVar

T = TypeVar('T')

class GenericResponse(BaseModel, Generic[T]):
    """Envelope every endpoint answers with, success or failure."""
    StatusCode: int
    StatusMessage: str
    Value: Optional[T] = None

    @classmethod
    def ok(cls, value: T, message: str = "Success") -> "GenericResponse[T]":
        return cls(StatusCode=200, StatusMessage=message, Value=value)

    @classmethod
    def error(cls, status_code: int, message: str, value: Any = None) -> "GenericResponse[Any]":
        return GenericResponse[Any](StatusCode=status_code, StatusMessage=message, Value=value)
