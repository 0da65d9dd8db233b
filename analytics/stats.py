from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from models.round import RoundRecord

from .handicap import (
    MAX_ROUNDS_CONSIDERED,
    HandicapResult,
    handicap_index,
    round_one_decimal,
    sliding_scale,
)


def format_date(iso: str) -> str:
    """YYYY-MM-DD -> DD.MM.YYYY; anything else is returned unchanged."""
    parts = iso.split("-")
    if len(parts) != 3:
        return iso
    return f"{parts[2]}.{parts[1]}.{parts[0]}"


def round_card(round_obj: RoundRecord) -> Dict[str, Any]:
    """Display fields for one entry of the round list."""
    return {
        "id": round_obj.id,
        "date": round_obj.date,
        "date_label": format_date(round_obj.date),
        "differential": round_obj.differential,
        "differential_label": f"Diff. {round_obj.differential:.1f}",
        "details": (
            f"Score {round_obj.score} · CR {round_obj.course_rating:g} · Slope {round_obj.slope}"
        ),
    }


def handicap_hint(result: HandicapResult) -> str:
    """Explain which differentials the handicap is built from."""
    if not result.has_handicap:
        use, _ = sliding_scale(MAX_ROUNDS_CONSIDERED)
        return f"Best {use} of the last {MAX_ROUNDS_CONSIDERED} rounds"
    hint = f"Best {result.rounds_used} of the last {result.rounds_considered} rounds"
    if result.adjustment:
        hint += f", adjusted {result.adjustment:+.1f}"
    return hint


def differential_trend(rounds: Sequence[RoundRecord]) -> List[Dict[str, Any]]:
    """
    Differential per round in chronological order.

    `rounds` is newest first, as stored. Rows flag whether the round is one
    of the differentials currently counting towards the handicap.
    """
    counting = set(handicap_index(rounds).counting_round_ids)
    results: List[Dict[str, Any]] = []
    for index, round_obj in enumerate(reversed(rounds), start=1):
        results.append(
            {
                "round_index": index,
                "round_id": round_obj.id,
                "date": round_obj.date,
                "differential": round_obj.differential,
                "counting": round_obj.id in counting,
            }
        )
    return results


def summary(rounds: Sequence[RoundRecord]) -> Dict[str, Any]:
    """Aggregate figures for the dashboard. `rounds` is newest first."""
    result = handicap_index(rounds)
    differentials = [r.differential for r in rounds]

    average: Optional[float] = None
    if differentials:
        total = sum((Decimal(str(d)) for d in differentials), Decimal("0"))
        average = round_one_decimal(total / len(differentials))

    return {
        "total_rounds": len(rounds),
        "handicap": result.value,
        "handicap_hint": handicap_hint(result),
        "best_differential": min(differentials) if differentials else None,
        "average_differential": average,
        "latest_round": round_card(rounds[0]) if rounds else None,
    }
