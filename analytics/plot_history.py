from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from analytics.handicap import newest_first
from analytics.stats import summary
from analytics.visualizations import plot_differential_trend
from database.repositories import RoundRepository
from database.store import FileStore
from utils.config import Settings
from utils.logger import setup_logger


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Chart the stored score differentials and current handicap."
    )
    parser.add_argument(
        "--store-dir",
        default=None,
        help="Directory holding the round store. Defaults to HANDICAP_STORE_DIR or ./data",
    )
    parser.add_argument(
        "--out",
        default="analytics/output/differentials.png",
        help="Where the chart PNG is written",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> Path:
    args = _parse_args(argv)
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.log_file)

    store_dir = Path(args.store_dir) if args.store_dir else settings.store_dir
    repo = RoundRepository(FileStore(store_dir, settings.quota_bytes), key=settings.storage_key)
    rounds = newest_first(repo.load())
    if not rounds:
        raise SystemExit(f"No rounds stored in {store_dir.resolve()}")

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig, _ = plot_differential_trend(rounds)
    fig.savefig(out, dpi=150)

    stats = summary(rounds)
    handicap = stats["handicap"]
    print(f"Rounds: {stats['total_rounds']}  Handicap: {handicap:.1f} ({stats['handicap_hint']})")
    print(f"Saved chart to: {out.resolve()}")
    return out


if __name__ == "__main__":
    main()
