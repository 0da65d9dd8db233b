"""Logging setup for the handicap tracker."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "golf_handicap"


def setup_logger(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the root logger once and return the application logger.

    Args:
        level: Logging level, as a number or a name like "DEBUG".
        log_file: Optional path to a log file. If None, logs to stderr only.
    """
    root = logging.getLogger()
    if not getattr(root, "_golf_handicap_configured", False):
        fmt = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(fmt)
        root.addHandler(h)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(fmt)
            root.addHandler(fh)
        root._golf_handicap_configured = True

    root.setLevel(level.upper() if isinstance(level, str) else level)
    return logging.getLogger(LOGGER_NAME)
