"""
orchestrator.py — Phase 00: Orchestration
-------------------------------------------
Command-line export of the dashboard data, for when a report is needed
without opening the Streamlit app.

Usage:
  # Export the review list in every format:
  python phase-00-orchestration/orchestrator.py

  # One sheet, one format, custom run label:
  python phase-00-orchestration/orchestrator.py --kind sentiment --format pdf --label weekly

  # Dry run (validate config and build rows, write nothing):
  python phase-00-orchestration/orchestrator.py --dry-run

Files land in {data_root}/{label}/{export.output_dir}/.

Exit codes:
  0  — Success
  1  — Export failure
  2  — Configuration or argument error
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure the project root and sibling phases are importable when run directly
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PHASE_00_DIR = Path(__file__).resolve().parent

for _p in [
    str(PROJECT_ROOT),
    str(PHASE_00_DIR),
    str(PROJECT_ROOT / "phase-01-records"),
    str(PROJECT_ROOT / "phase-05-export"),
    str(PROJECT_ROOT / "phase-06-dashboard"),
]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from config_loader import get_value, load_config                     # noqa: E402
from logger import get_logger                                         # noqa: E402
from mock_data import MOCK_INSIGHTS, MOCK_REVIEWS                     # noqa: E402
from review_session import ReviewSession                              # noqa: E402
from exporter import (                                                # noqa: E402
    EXPORT_KINDS,
    export_to_csv,
    export_to_pdf,
    export_to_xlsx,
    prepare_data_for_export,
)

FORMATS = ("csv", "pdf", "xlsx")


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="orchestrator",
        description="Fashion Feedback Analytics — Export Runner",
    )
    parser.add_argument(
        "--label",
        default=None,
        help="Run label used for the data directory. Defaults to export-YYYY-MM-DD.",
    )
    parser.add_argument(
        "--kind",
        choices=EXPORT_KINDS,
        default="reviews",
        help="Which sheet to export (default: reviews).",
    )
    parser.add_argument(
        "--format",
        choices=(*FORMATS, "all"),
        default="all",
        dest="fmt",
        help="Output format (default: all).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an alternative dashboard_config.yaml.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Validate config and build rows, but write no files.",
    )
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Main orchestration logic
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """
    Run one export.

    Returns:
        int: Exit code (0 = success, 1 = failure, 2 = config/arg error).
    """
    args = _parse_args(argv)

    # --- 1. Load and validate configuration ---
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[CONFIG ERROR] {exc}", file=sys.stderr)
        return 2

    label = args.label or f"export-{date.today().isoformat()}"
    data_root = get_value(config, "data_root", "data")
    output_dir = Path(data_root) / label / get_value(config, "export.output_dir", "exports")
    title = get_value(config, "export.pdf_title", get_value(config, "dashboard.title"))

    # --- 2. Initialise logger (creates data/{label}/ directory) ---
    logger = get_logger(run_label=label, data_root=data_root,
                        level=get_value(config, "logging.level", "INFO"))
    logger.info("=" * 60)
    logger.info("Fashion Feedback Analytics — Export Runner")
    logger.info(f"Run Label : {label}")
    logger.info(f"Kind      : {args.kind}")
    logger.info(f"Format    : {args.fmt}")
    logger.info(f"Dry Run   : {args.dry_run}")
    logger.info("=" * 60)

    # --- 3. Build the session and rows ---
    session = ReviewSession(MOCK_REVIEWS, MOCK_INSIGHTS, logger=logger)
    summary = session.summary()
    logger.info(
        f"Collection: {summary.total_reviews} reviews, "
        f"avg rating {summary.average_rating}, sentiment score {summary.sentiment_score}%"
    )

    rows = prepare_data_for_export(args.kind, session.records)
    logger.info(f"Prepared {len(rows)} row(s) for '{args.kind}'.")

    if args.dry_run:
        logger.info(f"[DRY-RUN] Would write to {output_dir}")
        return 0

    # --- 4. Write files ---
    formats = FORMATS if args.fmt == "all" else (args.fmt,)
    try:
        written = _run_exports(rows, args.kind, title, formats, output_dir, logger)
    except RuntimeError as exc:
        logger.error(f"Export aborted: {exc}")
        return 1

    logger.info("=" * 60)
    logger.info(f"Export complete: {len(written)} file(s) in {output_dir}")
    logger.info("=" * 60)
    return 0


def _run_exports(rows, kind, title, formats, output_dir, logger) -> list[Path]:
    """
    Raises:
        RuntimeError: When any format fails (wraps the original exception).
    """
    filename = f"{kind}-report"
    written = []
    for fmt in formats:
        try:
            if fmt == "csv":
                written.append(export_to_csv(rows, filename, output_dir, logger))
            elif fmt == "pdf":
                written.append(export_to_pdf(rows, filename, title, output_dir, logger))
            else:
                written.append(export_to_xlsx(rows, kind, output_dir, logger))
        except (ValueError, OSError) as exc:
            raise RuntimeError(f"Export {fmt} failed: {exc}") from exc
    return written


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
