from .handicap import (
    HandicapResult,
    differential,
    handicap_index,
    newest_first,
    sliding_scale,
)
from .stats import (
    differential_trend,
    format_date,
    handicap_hint,
    round_card,
    summary,
)
from .visualizations import plot_differential_trend

__all__ = [
    "HandicapResult",
    "differential",
    "handicap_index",
    "newest_first",
    "sliding_scale",
    "differential_trend",
    "format_date",
    "handicap_hint",
    "round_card",
    "summary",
    "plot_differential_trend",
]
