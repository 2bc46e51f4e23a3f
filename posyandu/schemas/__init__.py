from .subject import Sex, Category, Subject, CategoryRequest, CategoryResponse
from .measurement import Measurement
from .classification import (
    Severity, IndicatorResult, ClassificationResult, WeightGainStatus, WeightGainResult,
    AgeDetail, ClassificationRequest, WeightGainRequest, VisitResponse
)
from .generic_response import GenericResponse
