import pytest

from analytics.handicap import (
    differential,
    handicap_index,
    newest_first,
    sliding_scale,
)
from analytics.stats import (
    differential_trend,
    format_date,
    handicap_hint,
    round_card,
    summary,
)
from models import RoundRecord


def _round(diff, *, round_id=None, date="2026-02-01", score=90, course_rating=72.0, slope=113):
    return RoundRecord(
        id=round_id or f"r{diff}",
        date=date,
        score=score,
        course_rating=course_rating,
        slope=slope,
        differential=diff,
    )


def _rounds(diffs):
    """Rounds newest first with unique ids in list order."""
    return [_round(d, round_id=f"r{i}") for i, d in enumerate(diffs)]


# ================================================================
# differential
# ================================================================

def test_differential_standard_slope():
    assert differential(90, 72, 113) == 18.0


def test_differential_rounds_half_up():
    # (113 / 120) * 30 = 28.25 exactly
    assert differential(100, 70, 120) == 28.3


def test_differential_other_values():
    assert differential(72, 72.0, 113) == 0.0
    assert differential(68, 72.0, 113) == -4.0
    assert differential(85, 71.3, 125) == 12.4


def test_differential_rejects_non_positive_slope():
    with pytest.raises(ValueError):
        differential(90, 72, 0)


# ================================================================
# sliding scale
# ================================================================

@pytest.mark.parametrize("available,expected", [
    (1, (1, -2.0)),
    (3, (1, -2.0)),
    (4, (1, 0.0)),
    (5, (1, 0.0)),
    (6, (2, -1.0)),
    (8, (2, 0.0)),
    (9, (3, 0.0)),
    (11, (3, 0.0)),
    (12, (4, 0.0)),
    (14, (4, 0.0)),
    (16, (5, 0.0)),
    (17, (6, 0.0)),
    (19, (7, 0.0)),
    (20, (8, 0.0)),
    (35, (8, 0.0)),
])
def test_sliding_scale(available, expected):
    assert sliding_scale(available) == expected


def test_sliding_scale_requires_a_round():
    with pytest.raises(ValueError):
        sliding_scale(0)


# ================================================================
# handicap_index
# ================================================================

def test_handicap_no_rounds_is_undefined():
    result = handicap_index([])
    assert result.value is None
    assert not result.has_handicap
    assert result.rounds_used == 0


def test_handicap_single_round_gets_adjustment():
    result = handicap_index(_rounds([10.0]))
    assert result.value == 8.0
    assert result.adjustment == -2.0


def test_handicap_five_rounds_uses_best_one():
    result = handicap_index(_rounds([20.0, 15.5, 18.2, 22.0, 19.1]))
    assert result.value == 15.5
    assert result.rounds_used == 1
    assert result.counting_round_ids == ["r1"]


def test_handicap_six_rounds_uses_best_two_minus_one():
    result = handicap_index(_rounds([20.0, 15.5, 18.2, 22.0, 19.1, 16.5]))
    assert result.value == 15.0    # (15.5 + 16.5) / 2 - 1.0
    assert result.rounds_used == 2
    assert result.adjustment == -1.0


def test_handicap_average_rounds_half_up():
    result = handicap_index(_rounds([10.1, 30.0, 10.2, 30.0, 30.0, 30.0, 30.0]))
    assert result.value == 10.2    # 10.15


def test_handicap_considers_only_last_twenty():
    newest = [float(20 + i) for i in range(20)]     # 20.0 .. 39.0
    oldest = [1.0] * 5                              # would dominate if counted
    result = handicap_index(_rounds(newest + oldest))
    assert result.rounds_considered == 20
    assert result.rounds_used == 8
    assert result.value == 23.5    # mean of 20..27


def test_handicap_ties_keep_original_order():
    rounds = [
        _round(12.0, round_id="a"),
        _round(10.0, round_id="b"),
        _round(10.0, round_id="c"),
        _round(14.0, round_id="d"),
    ]
    result = handicap_index(rounds)
    assert result.counting_round_ids == ["b"]


def test_handicap_can_go_negative():
    assert handicap_index(_rounds([1.0])).value == -1.0


def test_differential_negative_half_rounds_up():
    # -0.25 rounds towards +inf, like the original Math.round
    assert differential(71, 71.25, 113) == -0.2


def test_handicap_negative_half_rounds_up():
    result = handicap_index(_rounds([0.2, 0.7, 5.0, 6.0, 7.0, 8.0]))
    assert result.value == -0.5    # (0.2 + 0.7) / 2 - 1.0 = -0.55


def test_newest_first_is_stable_within_a_date():
    rounds = [
        _round(10.0, round_id="older", date="2026-01-10"),
        _round(11.0, round_id="same-1", date="2026-02-01"),
        _round(12.0, round_id="same-2", date="2026-02-01"),
        _round(13.0, round_id="oldest", date="2025-12-31"),
    ]
    ordered = newest_first(rounds)
    assert [r.id for r in ordered] == ["same-1", "same-2", "older", "oldest"]


# ================================================================
# Presentation helpers
# ================================================================

def test_format_date():
    assert format_date("2026-02-07") == "07.02.2026"
    assert format_date("not a date") == "not a date"


def test_round_card():
    card = round_card(_round(18.0, round_id="x", date="2026-02-07"))
    assert card["id"] == "x"
    assert card["date_label"] == "07.02.2026"
    assert card["differential_label"] == "Diff. 18.0"
    assert card["details"] == "Score 90 · CR 72 · Slope 113"

    card = round_card(_round(12.4, course_rating=71.3, slope=125, score=85))
    assert card["details"] == "Score 85 · CR 71.3 · Slope 125"


def test_handicap_hint():
    assert handicap_hint(handicap_index([])) == "Best 8 of the last 20 rounds"
    assert handicap_hint(handicap_index(_rounds([1.0] * 5))) == "Best 1 of the last 5 rounds"
    assert (
        handicap_hint(handicap_index(_rounds([1.0] * 6)))
        == "Best 2 of the last 6 rounds, adjusted -1.0"
    )


def test_summary():
    rounds = _rounds([20.0, 15.5, 18.2, 22.0, 19.1])
    s = summary(rounds)
    assert s["total_rounds"] == 5
    assert s["handicap"] == 15.5
    assert s["best_differential"] == 15.5
    assert s["average_differential"] == 19.0
    assert s["latest_round"]["id"] == "r0"


def test_summary_average_rounds_half_up():
    # 10.15 as a float is 10.1499..., decimal rounding still gives 10.2
    assert summary(_rounds([10.1, 10.2]))["average_differential"] == 10.2


def test_summary_empty():
    s = summary([])
    assert s["total_rounds"] == 0
    assert s["handicap"] is None
    assert s["best_differential"] is None
    assert s["average_differential"] is None
    assert s["latest_round"] is None


def test_differential_trend_is_chronological():
    rows = differential_trend(_rounds([20.0, 15.5, 18.2]))
    assert [row["round_id"] for row in rows] == ["r2", "r1", "r0"]
    assert [row["round_index"] for row in rows] == [1, 2, 3]
    assert [row["counting"] for row in rows] == [False, True, False]
