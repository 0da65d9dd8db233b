"""Round entry flow: validate, score, store, recompute the handicap."""

import logging
from datetime import date
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict

from analytics.handicap import HandicapResult, differential, handicap_index, newest_first
from database.exceptions import CapacityError, NotFoundError
from database.repositories import RoundRepository
from models import RoundRecord
from validation import validate_round_input

logger = logging.getLogger(__name__)


class SubmissionResult(BaseModel):
    """Outcome of one form submission: the stored round or one message."""
    model_config = ConfigDict(frozen=True)

    round: Optional[RoundRecord] = None
    handicap: Optional[HandicapResult] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RoundEntryService:
    """Operations triggered by the user: submit, delete, delete all.

    The repository is the only state; every method reads it fresh.
    """

    def __init__(
        self,
        repository: RoundRepository,
        today: Optional[Callable[[], date]] = None,
    ):
        self._repo = repository
        self._today = today or date.today

    def rounds(self) -> List[RoundRecord]:
        """Stored rounds, newest first."""
        return newest_first(self._repo.load())

    def get(self, round_id: str) -> RoundRecord:
        round_ = self._repo.get_round(round_id)
        if round_ is None:
            raise NotFoundError(f"Round {round_id} not found")
        return round_

    def handicap(self) -> HandicapResult:
        return handicap_index(self.rounds())

    def submit(self, date_value: Any, score: Any, course_rating: Any, slope: Any) -> SubmissionResult:
        checked = validate_round_input(date_value, score, course_rating, slope, today=self._today())
        if not checked.ok:
            return SubmissionResult(error=checked.error, error_kind=checked.kind.value)

        fields = checked.value
        round_ = RoundRecord(
            id=self._repo.next_id(),
            date=fields["date"],
            score=fields["score"],
            course_rating=fields["course_rating"],
            slope=fields["slope"],
            differential=differential(fields["score"], fields["course_rating"], fields["slope"]),
        )
        try:
            self._repo.add_round(round_)
        except CapacityError as e:
            logger.warning("Could not store round: %s", e)
            return SubmissionResult(
                error="Storage is full. Delete some rounds and try again.",
                error_kind="capacity",
            )
        return SubmissionResult(round=round_, handicap=self.handicap())

    def delete(self, round_id: str) -> bool:
        return self._repo.delete_round(round_id)

    def delete_all(self) -> int:
        """Remove every round. Returns how many were removed."""
        count = len(self._repo.load())
        self._repo.clear()
        return count
