"""
record_filter.py — Phase 04: Search & Filtering
-------------------------------------------------
Selects the reviews shown in the list views.

  filter_records(): free-text search box. Case-insensitive substring match
                    against product name, brand, category and comment (any
                    field may match). Empty query → input unchanged.
  apply_facets():   the dropdown filters (brand, category, rating, date range).

Neither function ranks results; input order is always preserved.
"""

from datetime import date
from typing import Optional, Sequence

SEARCH_FIELDS = ("product_name", "brand", "category", "comment")

# date_range option → maximum day difference kept
DATE_RANGES = {
    "today": 0,
    "week":  7,
    "month": 30,
}


def filter_records(records: Sequence, query: str) -> list:
    """
    Args:
        records: ReviewRecords in display order.
        query:   Raw text from the search box.

    Returns:
        The matching records, in their original order.
    """
    if not query:
        return list(records)

    needle = query.lower()
    return [
        r for r in records
        if any(needle in (getattr(r, f) or "").lower() for f in SEARCH_FIELDS)
    ]


def apply_facets(
    records: Sequence,
    brand: str = "all",
    category: str = "all",
    rating: str | int = "all",
    date_range: str = "all",
    today: Optional[date] = None,
) -> list:
    """
    Apply the dropdown filters. Each facet set to "all" is ignored.

    Raises:
        ValueError: On an unknown date_range or a non-numeric rating.
    """
    if date_range != "all" and date_range not in DATE_RANGES:
        raise ValueError(
            f"Unknown date range '{date_range}'. "
            f"Expected one of: all, {', '.join(DATE_RANGES)}"
        )

    wanted_rating = None
    if rating != "all":
        try:
            wanted_rating = int(rating)
        except (ValueError, TypeError):
            raise ValueError(f"Rating filter must be 'all' or 1-5, got {rating!r}")

    today = today or date.today()
    kept = []

    for r in records:
        if brand != "all" and r.brand != brand:
            continue
        if category != "all" and r.category != category:
            continue
        if wanted_rating is not None and r.rating != wanted_rating:
            continue
        if date_range != "all":
            days_diff = (today - date.fromisoformat(r.date)).days
            if days_diff > DATE_RANGES[date_range]:
                continue
        kept.append(r)

    return kept
