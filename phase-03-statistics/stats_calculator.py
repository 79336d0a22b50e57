"""
stats_calculator.py — Phase 03: Aggregate Statistics
------------------------------------------------------
Summary numbers over a collection of ReviewRecords.
Pure math — no I/O. Easily unit-testable.

Formulas:
  average_rating       = sum(rating) / count, one decimal place
  sentiment_score      = round(100 * positive / count)
  sentiment percentage = round(100 * label_count / count), per label

Percentages are rounded independently and are NOT corrected to sum to
100 (e.g. three equal thirds give 33/33/33). Rounding is half-up, the
way the figures have always been displayed, not Python's half-even.

Every function raises ValueError on an empty collection; callers check
the size first.

Insights are recomputed from scratch over the full collection after
every change. There is no incremental update.
"""

import math
import sys
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Iterable, Sequence

# Path bootstrap
_PHASE_DIR    = Path(__file__).resolve().parent
_PROJECT_ROOT = _PHASE_DIR.parent
for _p in [str(_PROJECT_ROOT), str(_PHASE_DIR), str(_PROJECT_ROOT / "phase-01-records")]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from review_schema import CategoryInsight, ReviewRecord, SentimentDistribution  # noqa: E402


# ---------------------------------------------------------------------------
# Rounding helpers
# ---------------------------------------------------------------------------

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _one_decimal(value: float) -> float:
    # Decimal(value) is the exact binary value, so 4.35 (really 4.3499...)
    # rounds down and 4.25 rounds up.
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _require_records(records: Sequence[ReviewRecord], what: str) -> None:
    if not records:
        raise ValueError(f"Cannot compute {what} of an empty review collection.")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def average_rating(records: Sequence[ReviewRecord]) -> float:
    """Mean star rating rounded to one decimal place."""
    _require_records(records, "average rating")
    total = sum(r.rating for r in records)
    return _one_decimal(total / len(records))


def sentiment_score(records: Sequence[ReviewRecord]) -> int:
    """Share of positive reviews as a whole percentage (0–100)."""
    _require_records(records, "sentiment score")
    positive = sum(1 for r in records if r.sentiment == "positive")
    return _round_half_up(positive / len(records) * 100)


def sentiment_distribution(records: Sequence[ReviewRecord]) -> SentimentDistribution:
    """Positive / neutral / negative percentages, each rounded on its own."""
    _require_records(records, "sentiment distribution")
    total = len(records)
    positive = sum(1 for r in records if r.sentiment == "positive")
    negative = sum(1 for r in records if r.sentiment == "negative")
    neutral = total - positive - negative

    return SentimentDistribution(
        positive=_round_half_up(positive / total * 100),
        neutral=_round_half_up(neutral / total * 100),
        negative=_round_half_up(negative / total * 100),
    )


def rating_distribution(records: Iterable[ReviewRecord]) -> dict[int, int]:
    """Number of reviews per star value, keyed 5 down to 1 (zeros included)."""
    counts = Counter(r.rating for r in records)
    return {stars: counts.get(stars, 0) for stars in range(5, 0, -1)}


def category_counts(records: Iterable[ReviewRecord]) -> dict[str, int]:
    """Number of reviews per category, in order of first appearance."""
    counts: dict[str, int] = {}
    for r in records:
        counts[r.category] = counts.get(r.category, 0) + 1
    return counts


def build_category_insight(
    category: str,
    records: Sequence[ReviewRecord],
    common_phrases: Iterable[str] = (),
) -> CategoryInsight:
    """
    Compute the insight for one category from every record in it.

    Args:
        category:        Category name to aggregate.
        records:         Full record collection; only matching ones are used.
        common_phrases:  Curated phrases to carry over onto the insight.

    Raises:
        ValueError: If no record belongs to ``category``.
    """
    in_category = [r for r in records if r.category == category]
    if not in_category:
        raise ValueError(f"No reviews in category '{category}'.")

    return CategoryInsight(
        category=category,
        sentiment=sentiment_distribution(in_category),
        common_phrases=tuple(common_phrases),
        average_rating=average_rating(in_category),
    )


def recompute_insights(
    insights: Sequence[CategoryInsight],
    records: Sequence[ReviewRecord],
) -> list[CategoryInsight]:
    """
    Rebuild every category insight from the full record collection.

    Existing insights keep their position and phrases. A category with no
    records keeps its previous numbers unchanged. Categories that appear
    in ``records`` but have no insight yet are appended with no phrases.
    """
    present = category_counts(records)
    updated: list[CategoryInsight] = []

    for insight in insights:
        if insight.category in present:
            updated.append(
                build_category_insight(insight.category, records, insight.common_phrases)
            )
        else:
            updated.append(insight)

    known = {i.category for i in insights}
    for category in present:
        if category not in known:
            updated.append(build_category_insight(category, records))

    return updated
