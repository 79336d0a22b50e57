"""
logger.py — Phase 00: Orchestration
-------------------------------------
Provides a structured, per-run logger.
Streams to stdout AND writes to data/{run_label}/run.log.
"""

import logging
import sys
from pathlib import Path


def get_logger(run_label: str, data_root: str = "data", level: str = "INFO") -> logging.Logger:
    """
    Returns a configured Logger instance for the given run label.
    Creates the run data directory and run.log file if they do not exist.

    Args:
        run_label:  Run identifier, e.g. 'dashboard' or '2024-03-15-export'.
        data_root:  Root data directory relative to the project root.
        level:      Console log level name (the file always gets DEBUG).

    Returns:
        logging.Logger: Configured logger instance.
    """
    log_dir = Path(data_root) / run_label
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "run.log"

    logger = logging.getLogger(f"feedback.{run_label}")
    logger.setLevel(logging.DEBUG)

    # Streamlit reruns the script on every interaction
    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # File handler appends across runs
    fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    ch.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(ch)

    return logger
