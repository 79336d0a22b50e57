"""
test_record_filter.py — Unit tests for Phase 04: Search & Filtering
---------------------------------------------------------------------
Test coverage:
  filter_records():
    1. Empty query returns every record, same order
    2. Case-insensitive match on category ("DRESS" → "Dresses")
    3. Matches on product name, brand and comment
    4. No match → empty list; order preserved for multiple matches
  apply_facets():
    5. "all" everywhere is a no-op
    6. Brand / category / rating facets
    7. Date ranges relative to a fixed "today"; future-dated records kept
    8. Unknown date range / rating → ValueError
"""

import sys
import unittest
from datetime import date
from pathlib import Path

_TESTS_DIR    = Path(__file__).resolve().parent
_PHASE_DIR    = _TESTS_DIR.parent
_PROJECT_ROOT = _PHASE_DIR.parent
for _p in [str(_PROJECT_ROOT), str(_PHASE_DIR), str(_PROJECT_ROOT / "phase-01-records")]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from record_filter import apply_facets, filter_records  # noqa: E402
from mock_data import MOCK_REVIEWS                      # noqa: E402

TODAY = date(2024, 3, 15)


class TestFilterRecords(unittest.TestCase):

    def test_empty_query_returns_all(self):
        result = filter_records(MOCK_REVIEWS, "")
        self.assertEqual(result, list(MOCK_REVIEWS))

    def test_category_case_insensitive(self):
        result = filter_records(MOCK_REVIEWS, "DRESS")
        self.assertEqual([r.review_id for r in result], ["1"])
        self.assertEqual(result[0].category, "Dresses")

    def test_matches_each_field(self):
        self.assertEqual([r.review_id for r in filter_records(MOCK_REVIEWS, "kurta")], ["3"])   # name
        self.assertEqual([r.review_id for r in filter_records(MOCK_REVIEWS, "denimco")], ["2"]) # brand
        self.assertEqual([r.review_id for r in filter_records(MOCK_REVIEWS, "EMBROIDERY")], ["3"])  # comment

    def test_no_match(self):
        self.assertEqual(filter_records(MOCK_REVIEWS, "sneakers"), [])

    def test_order_preserved(self):
        # "summer" is in review 1's name and review 3's comment
        result = filter_records(MOCK_REVIEWS, "summer")
        self.assertEqual([r.review_id for r in result], ["1", "3"])
        reversed_result = filter_records(list(reversed(MOCK_REVIEWS)), "summer")
        self.assertEqual([r.review_id for r in reversed_result], ["3", "1"])


class TestApplyFacets(unittest.TestCase):

    def test_all_is_noop(self):
        self.assertEqual(apply_facets(MOCK_REVIEWS, today=TODAY), list(MOCK_REVIEWS))

    def test_brand_and_category(self):
        self.assertEqual([r.review_id for r in apply_facets(MOCK_REVIEWS, brand="DenimCo")], ["2"])
        self.assertEqual([r.review_id for r in apply_facets(MOCK_REVIEWS, category="Ethnic Wear")], ["3"])
        self.assertEqual(apply_facets(MOCK_REVIEWS, brand="DenimCo", category="Dresses"), [])

    def test_rating(self):
        self.assertEqual([r.review_id for r in apply_facets(MOCK_REVIEWS, rating=5)], ["3"])
        self.assertEqual([r.review_id for r in apply_facets(MOCK_REVIEWS, rating="2")], ["2"])

    def test_date_ranges(self):
        today = apply_facets(MOCK_REVIEWS, date_range="today", today=TODAY)
        self.assertEqual([r.review_id for r in today], ["1"])

        week = apply_facets(MOCK_REVIEWS, date_range="week", today=date(2024, 3, 21))
        self.assertEqual([r.review_id for r in week], ["1", "2"])   # 6 and 7 days; 8 dropped

        month = apply_facets(MOCK_REVIEWS, date_range="month", today=date(2024, 4, 13))
        self.assertEqual([r.review_id for r in month], ["1", "2"])

    def test_records_dated_after_today_are_kept(self):
        # All three mock reviews are dated 2024-03-13..15
        for date_range in ("today", "week", "month"):
            kept = apply_facets(MOCK_REVIEWS, date_range=date_range, today=date(2024, 3, 12))
            self.assertEqual([r.review_id for r in kept], ["1", "2", "3"])

    def test_bad_facets(self):
        with self.assertRaises(ValueError):
            apply_facets(MOCK_REVIEWS, date_range="year")
        with self.assertRaises(ValueError):
            apply_facets(MOCK_REVIEWS, rating="five")


if __name__ == "__main__":
    unittest.main()
