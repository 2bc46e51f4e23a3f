import logging
from typing import Dict

from fastapi import APIRouter, Depends

from posyandu.api import deps
from posyandu.models.who_standards import ReferenceTableStore
from posyandu.schemas import classification as classification_schema
from posyandu.schemas.generic_response import GenericResponse
from posyandu.schemas.subject import CategoryRequest, CategoryResponse
from posyandu.utils.age import category_label, format_detailed_age
from posyandu.utils.status import classify_growth, classify_visit, derive_category, to_record_fields
from posyandu.utils.vital_signs import classify_vitals
from posyandu.utils.weight_gain import evaluate_weight_gain

logger = logging.getLogger(__name__)

router = APIRouter()

ResultMap = Dict[str, classification_schema.IndicatorResult]


@router.post("/category", response_model=GenericResponse[CategoryResponse])
async def get_category(request: CategoryRequest):
    category = derive_category(request.birth_date, request.is_pregnant, request.as_of)
    return GenericResponse.ok(CategoryResponse(
        category=category,
        label=category_label(category),
        age=format_detailed_age(request.birth_date, request.as_of)
    ))


@router.post("/growth", response_model=GenericResponse[ResultMap])
async def get_growth_status(
    request: classification_schema.ClassificationRequest,
    store: ReferenceTableStore = Depends(deps.get_standards)
):
    result = classify_growth(request.measurement, request.subject, request.as_of, request.history, store)
    return GenericResponse.ok(result)


@router.post("/weight-gain", response_model=GenericResponse[classification_schema.WeightGainResult])
async def get_weight_gain(request: classification_schema.WeightGainRequest):
    result = evaluate_weight_gain(
        request.current_weight,
        request.current_date,
        request.birth_date,
        request.history
    )
    return GenericResponse.ok(result)


@router.post("/vitals", response_model=GenericResponse[ResultMap])
async def get_vital_signs(request: classification_schema.ClassificationRequest):
    result = classify_vitals(request.measurement, request.subject, request.as_of)
    return GenericResponse.ok(result)


@router.post("/visit", response_model=GenericResponse[classification_schema.VisitResponse])
async def get_visit_status(
    request: classification_schema.ClassificationRequest,
    store: ReferenceTableStore = Depends(deps.get_standards)
):
    as_of = request.as_of or request.measurement.date
    category = derive_category(request.subject.birth_date, request.subject.is_pregnant, as_of)
    result = classify_visit(request.measurement, request.subject, as_of, request.history, store)

    logger.info(f"Visit on {request.measurement.date} classified as {category.value} with {len(result)} indicators")
    return GenericResponse.ok(classification_schema.VisitResponse(
        category=category,
        result=result,
        record_fields=to_record_fields(result)
    ))
