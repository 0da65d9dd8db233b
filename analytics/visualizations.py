from __future__ import annotations

from typing import Optional, Sequence

from models.round import RoundRecord

from .handicap import handicap_index
from .stats import differential_trend, format_date


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = max(1, count // max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        tick_positions.append(count - 1)

    tick_labels = [labels[i] for i in tick_positions]
    ax.set_xticks(tick_positions)
    ax.set_xticklabels(tick_labels, rotation=45, ha="right")


def plot_differential_trend(rounds: Sequence[RoundRecord], title: Optional[str] = None):
    """
    Line chart of score differentials, oldest to newest.

    Differentials counting towards the current handicap are highlighted and
    the handicap index is drawn as a horizontal line.
    """
    plt = _load_plt()
    rows = differential_trend(rounds)
    x = list(range(len(rows)))
    values = [row["differential"] for row in rows]
    labels = [format_date(row["date"]) for row in rows]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(x, values, color="gray", marker="o", linewidth=1.2, label="Differential")

    counting = [(i, row["differential"]) for i, row in enumerate(rows) if row["counting"]]
    if counting:
        ax.scatter(
            [i for i, _ in counting],
            [v for _, v in counting],
            color="green",
            zorder=3,
            label="Counting",
        )

    result = handicap_index(rounds)
    if result.has_handicap:
        ax.axhline(result.value, color="black", linestyle="--", linewidth=1,
                   label=f"Handicap {result.value:.1f}")

    ax.set_title(title or "Score Differentials")
    ax.set_xlabel("Round")
    ax.set_ylabel("Differential")
    if labels:
        _apply_sparse_xticks(ax, labels)
    ax.grid(axis="y", alpha=0.2)
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig, ax
