"""Handicap/dashboard API endpoints."""

from fastapi import APIRouter, Depends

from analytics.stats import summary
from api.dependencies import get_service
from api.schemas import DashboardResponse, HandicapResponse, RoundCardResponse
from services import RoundEntryService

router = APIRouter()

RECENT_ROUNDS = 5


@router.get("/handicap", response_model=HandicapResponse)
def get_handicap(service: RoundEntryService = Depends(get_service)):
    return HandicapResponse.from_result(service.handicap())


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(service: RoundEntryService = Depends(get_service)):
    rounds = service.rounds()
    stats = summary(rounds)
    latest = RoundCardResponse(**stats["latest_round"]) if stats["latest_round"] else None

    return DashboardResponse(
        total_rounds=stats["total_rounds"],
        handicap=stats["handicap"],
        handicap_hint=stats["handicap_hint"],
        best_differential=stats["best_differential"],
        average_differential=stats["average_differential"],
        latest_round=latest,
        recent_rounds=[RoundCardResponse.from_round(r) for r in rounds[:RECENT_ROUNDS]],
    )
