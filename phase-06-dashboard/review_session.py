"""
review_session.py — Phase 06: Dashboard
-----------------------------------------
The in-memory review collection behind one dashboard session.

On every submission:
  1. Validate the form.
  2. Classify sentiment from comment + rating (Phase 02).
  3. Prepend the new record (newest first).
  4. Recompute every category insight from scratch (Phase 03).

Records are never updated or deleted. Nothing is written to disk.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

# Path bootstrap
_PHASE_DIR    = Path(__file__).resolve().parent
_PROJECT_ROOT = _PHASE_DIR.parent
for _p in [
    str(_PROJECT_ROOT),
    str(_PHASE_DIR),
    str(_PROJECT_ROOT / "phase-01-records"),
    str(_PROJECT_ROOT / "phase-02-sentiment"),
    str(_PROJECT_ROOT / "phase-03-statistics"),
    str(_PROJECT_ROOT / "phase-04-search"),
]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from review_schema import CategoryInsight, ReviewFormData, ReviewRecord  # noqa: E402
from sentiment_analyzer import classify                                  # noqa: E402
from record_filter import apply_facets, filter_records                   # noqa: E402
import stats_calculator                                                  # noqa: E402


@dataclass(frozen=True)
class SessionSummary:
    total_reviews: int
    average_rating: Optional[float]     # None when there are no reviews
    sentiment_score: Optional[int]


class ReviewSession:
    """Owns the records and insights of one interactive session."""

    def __init__(
        self,
        records: Iterable[ReviewRecord] = (),
        insights: Iterable[CategoryInsight] = (),
        logger: Optional[logging.Logger] = None,
    ):
        self._records: list[ReviewRecord] = list(records)
        self._insights: list[CategoryInsight] = list(insights)
        self.logger = logger or logging.getLogger(__name__)

    @property
    def records(self) -> list[ReviewRecord]:
        return list(self._records)

    @property
    def insights(self) -> list[CategoryInsight]:
        return list(self._insights)

    @property
    def categories(self) -> list[str]:
        """Category choices offered by the submission form."""
        return [i.category for i in self._insights]

    def submit(self, form: ReviewFormData, today: Optional[date] = None) -> ReviewRecord:
        """
        Add a user submission to the session.

        Raises:
            ValueError: If the form is incomplete or the rating is out of range.
        """
        form.validate()
        n = len(self._records) + 1

        record = ReviewRecord(
            review_id=f"r{n}",
            product_id=f"p{n}",
            user_id=f"u{n}",
            product_name=form.product_name.strip(),
            brand=form.brand.strip(),
            category=form.category,
            rating=form.rating,
            comment=form.comment,
            sentiment=classify(form.comment, form.rating),
            date=(today or date.today()).isoformat(),
        )

        self._records.insert(0, record)
        self._insights = stats_calculator.recompute_insights(self._insights, self._records)

        self.logger.info(
            f"Review {record.review_id} added: {record.product_name} "
            f"({record.category}, {record.rating}★) → {record.sentiment}"
        )
        return record

    def search(self, query: str) -> list[ReviewRecord]:
        return filter_records(self._records, query)

    def browse(self, query: str = "", **facets) -> list[ReviewRecord]:
        """Search box and dropdown filters applied together."""
        return apply_facets(filter_records(self._records, query), **facets)

    def summary(self) -> SessionSummary:
        if not self._records:
            return SessionSummary(total_reviews=0, average_rating=None, sentiment_score=None)
        return SessionSummary(
            total_reviews=len(self._records),
            average_rating=stats_calculator.average_rating(self._records),
            sentiment_score=stats_calculator.sentiment_score(self._records),
        )
