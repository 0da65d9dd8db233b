"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import List

from api.dependencies import get_service
from api.schemas import (
    ClearRoundsResponse,
    HandicapResponse,
    RoundCardResponse,
    RoundResponse,
    SubmitRoundRequest,
    SubmitRoundResponse,
)
from database.exceptions import NotFoundError
from services import RoundEntryService

router = APIRouter()


@router.get("", response_model=List[RoundCardResponse])
def list_rounds(service: RoundEntryService = Depends(get_service)):
    """Stored rounds, newest first."""
    return [RoundCardResponse.from_round(r) for r in service.rounds()]


@router.post("", response_model=SubmitRoundResponse, status_code=201)
def submit_round(req: SubmitRoundRequest, service: RoundEntryService = Depends(get_service)):
    result = service.submit(req.date, req.score, req.course_rating, req.slope)
    if not result.ok:
        status = 507 if result.error_kind == "capacity" else 422
        raise HTTPException(status, result.error)
    return SubmitRoundResponse(
        round=RoundCardResponse.from_round(result.round),
        differential=result.round.differential,
        handicap=HandicapResponse.from_result(result.handicap),
    )


@router.get("/{round_id}", response_model=RoundResponse)
def get_round(round_id: str, service: RoundEntryService = Depends(get_service)):
    try:
        round_ = service.get(round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    return RoundResponse(**round_.model_dump())


@router.delete("/{round_id}", status_code=204)
def delete_round(round_id: str, service: RoundEntryService = Depends(get_service)):
    if not service.delete(round_id):
        raise HTTPException(404, "Round not found")
    return Response(status_code=204)


@router.delete("", response_model=ClearRoundsResponse)
def delete_all_rounds(
    confirm: bool = Query(False, description="Must be true to delete every round"),
    service: RoundEntryService = Depends(get_service),
):
    if not confirm:
        raise HTTPException(400, "Deleting all rounds requires confirm=true")
    return ClearRoundsResponse(deleted=service.delete_all())
