"""API request and response models."""

from pydantic import BaseModel
from typing import Any, List, Optional

from analytics.handicap import HandicapResult
from analytics.stats import handicap_hint, round_card
from models import RoundRecord


class SubmitRoundRequest(BaseModel):
    """Raw form values; validated by the service, not by FastAPI."""
    date: Any = None
    score: Any = None
    course_rating: Any = None
    slope: Any = None


class RoundCardResponse(BaseModel):
    """One entry of the round list."""
    id: str
    date: str
    date_label: str
    differential: float
    differential_label: str
    details: str

    @classmethod
    def from_round(cls, r: RoundRecord) -> "RoundCardResponse":
        return cls(**round_card(r))


class RoundResponse(BaseModel):
    """Full stored round."""
    id: str
    date: str
    score: int
    course_rating: float
    slope: int
    differential: float


class HandicapResponse(BaseModel):
    handicap: Optional[float] = None
    hint: str
    rounds_considered: int = 0
    rounds_used: int = 0
    adjustment: float = 0.0
    counting_round_ids: List[str] = []

    @classmethod
    def from_result(cls, result: HandicapResult) -> "HandicapResponse":
        return cls(
            handicap=result.value,
            hint=handicap_hint(result),
            rounds_considered=result.rounds_considered,
            rounds_used=result.rounds_used,
            adjustment=result.adjustment,
            counting_round_ids=result.counting_round_ids,
        )


class SubmitRoundResponse(BaseModel):
    round: RoundCardResponse
    differential: float
    handicap: HandicapResponse


class ClearRoundsResponse(BaseModel):
    deleted: int


class DashboardResponse(BaseModel):
    """Aggregated figures for the summary view."""
    total_rounds: int
    handicap: Optional[float] = None
    handicap_hint: str
    best_differential: Optional[float] = None
    average_differential: Optional[float] = None
    latest_round: Optional[RoundCardResponse] = None
    recent_rounds: List[RoundCardResponse]
