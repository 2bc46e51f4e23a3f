from fastapi import APIRouter, Query

from posyandu.schemas import screening as screening_schema
from posyandu.schemas.generic_response import GenericResponse
from posyandu.utils.immunization import due_immunization, immunization_status
from posyandu.utils.milestones import developmental_milestones
from posyandu.utils.screening import (
    calculate_epds_score, calculate_gad2_score, calculate_phbs_score, calculate_phq2_score, questionnaire
)

router = APIRouter()


@router.get("/questions/{instrument}", response_model=GenericResponse[screening_schema.Questionnaire])
async def get_questionnaire(instrument: str):
    return GenericResponse.ok(questionnaire(instrument))


@router.post("/phbs", response_model=GenericResponse[screening_schema.PhbsScore])
async def get_phbs_score(survey: screening_schema.HouseholdSurvey):
    return GenericResponse.ok(calculate_phbs_score(survey))


@router.post("/phq2", response_model=GenericResponse[screening_schema.ScreeningScore])
async def get_phq2_score(request: screening_schema.TwoItemScreeningRequest):
    return GenericResponse.ok(calculate_phq2_score(request.q1, request.q2))


@router.post("/gad2", response_model=GenericResponse[screening_schema.ScreeningScore])
async def get_gad2_score(request: screening_schema.TwoItemScreeningRequest):
    return GenericResponse.ok(calculate_gad2_score(request.q1, request.q2))


@router.post("/epds", response_model=GenericResponse[screening_schema.ScreeningScore])
async def get_epds_score(request: screening_schema.EpdsRequest):
    return GenericResponse.ok(calculate_epds_score(request.answers))


@router.get("/milestones", response_model=GenericResponse[screening_schema.Milestones])
async def get_milestones(age_in_months: float = Query(..., ge=0)):
    return GenericResponse.ok(developmental_milestones(age_in_months))


@router.post("/immunization", response_model=GenericResponse[screening_schema.ImmunizationStatus])
async def get_immunization_status(request: screening_schema.ImmunizationRequest):
    status = immunization_status(request.subject.birth_date, request.history, request.as_of)
    return GenericResponse.ok(status)


@router.post("/immunization/due", response_model=GenericResponse[screening_schema.DueImmunizationResponse])
async def get_due_immunization(request: screening_schema.ImmunizationRequest):
    due = due_immunization(request.subject, request.history, request.as_of)
    return GenericResponse.ok(screening_schema.DueImmunizationResponse(due=due))
