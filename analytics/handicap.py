"""
World Handicap System calculations.

Score differentials are computed once, when a round is entered, and stored
with it. The handicap index is recomputed from the stored differentials of
the most recent 20 rounds.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from models.round import RoundRecord

STANDARD_SLOPE = 113
MAX_ROUNDS_CONSIDERED = 20

# (min rounds, max rounds, differentials used, adjustment)
SLIDING_SCALE: Tuple[Tuple[int, int, int, Decimal], ...] = (
    (1, 3, 1, Decimal("-2.0")),
    (4, 5, 1, Decimal("0")),
    (6, 6, 2, Decimal("-1.0")),
    (7, 8, 2, Decimal("0")),
    (9, 11, 3, Decimal("0")),
    (12, 14, 4, Decimal("0")),
    (15, 16, 5, Decimal("0")),
    (17, 18, 6, Decimal("0")),
    (19, 19, 7, Decimal("0")),
    (20, MAX_ROUNDS_CONSIDERED, 8, Decimal("0")),
)


class HandicapResult(BaseModel):
    """Handicap index plus the facts needed to explain it."""
    model_config = ConfigDict(frozen=True)

    value: Optional[float] = None
    rounds_considered: int = 0
    rounds_used: int = 0
    adjustment: float = 0.0
    counting_round_ids: List[str] = Field(default_factory=list)

    @property
    def has_handicap(self) -> bool:
        return self.value is not None


def round_one_decimal(value: Decimal) -> float:
    """Round to one decimal with halves going up, so -0.25 -> -0.2."""
    tenths = (value * 10 + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    return float(tenths / 10)


def differential(score: int, course_rating: float, slope: int) -> float:
    """
    Score differential = (113 / slope) * (score - course rating).

    Rounded half-up (towards +inf) to one decimal in decimal arithmetic, so
    28.25 -> 28.3 regardless of binary float representation.
    """
    if slope <= 0:
        raise ValueError(f"Slope must be positive, got {slope}")
    raw = Decimal(STANDARD_SLOPE) * (Decimal(str(score)) - Decimal(str(course_rating))) / Decimal(slope)
    return round_one_decimal(raw)


def sliding_scale(available: int) -> Tuple[int, float]:
    """Return (differentials to use, adjustment) for a number of rounds."""
    if available < 1:
        raise ValueError("At least one round is required")
    available = min(available, MAX_ROUNDS_CONSIDERED)
    for low, high, use, adjustment in SLIDING_SCALE:
        if low <= available <= high:
            return use, float(adjustment)
    raise AssertionError(f"No sliding-scale row for {available} rounds")


def handicap_index(rounds: Sequence[RoundRecord]) -> HandicapResult:
    """
    Handicap index from rounds ordered newest first.

    Only the most recent 20 rounds are considered. They are sorted by
    differential (stable, so equal differentials keep their order), the
    best N from the sliding scale are averaged, the adjustment is added and
    the result is rounded to one decimal. No rounds means no handicap.
    """
    considered = list(rounds[:MAX_ROUNDS_CONSIDERED])
    if not considered:
        return HandicapResult()

    use, adjustment = sliding_scale(len(considered))
    best = sorted(considered, key=lambda r: r.differential)[:use]

    total = sum((Decimal(str(r.differential)) for r in best), Decimal("0"))
    average = total / Decimal(len(best))
    value = round_one_decimal(average + Decimal(str(adjustment)))

    return HandicapResult(
        value=value,
        rounds_considered=len(considered),
        rounds_used=len(best),
        adjustment=adjustment,
        counting_round_ids=[r.id for r in best],
    )


def newest_first(rounds: Iterable[RoundRecord]) -> List[RoundRecord]:
    """Sort by date descending; rounds on the same date keep stored order."""
    return sorted(rounds, key=lambda r: r.date, reverse=True)
