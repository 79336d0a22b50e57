"""
test_review_schema.py — Unit tests for Phase 01: Review Records
-----------------------------------------------------------------
Test coverage:
  1. Valid record builds; to_dict() exposes every field
  2. Rating outside 1–5, non-integer or bool → ValueError
  3. Unknown sentiment label → ValueError
  4. Records are immutable
  5. ReviewFormData.validate(): blank fields and bad ratings rejected
  6. Mock data: unique ids, ratings in range, insight categories cover reviews
  7. generate_metric_cards(): seeded output is reproducible and in range
"""

import dataclasses
import random
import sys
import unittest
from pathlib import Path

_TESTS_DIR    = Path(__file__).resolve().parent
_PHASE_DIR    = _TESTS_DIR.parent
_PROJECT_ROOT = _PHASE_DIR.parent
for _p in [str(_PROJECT_ROOT), str(_PHASE_DIR)]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from review_schema import ReviewFormData, ReviewRecord  # noqa: E402
from mock_data import (                                  # noqa: E402
    MOCK_INSIGHTS,
    MOCK_REVIEWS,
    MOCK_USER_INSIGHT,
    generate_metric_cards,
)


def _record(**overrides) -> ReviewRecord:
    fields = {
        "review_id":    "r1",
        "product_id":   "p1",
        "user_id":      "u1",
        "product_name": "Linen Shirt",
        "brand":        "Coastline",
        "category":     "Shirts",
        "rating":       4,
        "comment":      "good shirt",
        "sentiment":    "positive",
        "date":         "2024-03-15",
    }
    fields.update(overrides)
    return ReviewRecord(**fields)


class TestReviewRecord(unittest.TestCase):

    def test_valid_record(self):
        r = _record()
        d = r.to_dict()
        self.assertEqual(d["product_name"], "Linen Shirt")
        self.assertTrue(d["purchase_verified"])
        self.assertIsNone(d["user_age"])

    def test_rating_bounds(self):
        for rating in (1, 5):
            self.assertEqual(_record(rating=rating).rating, rating)
        for rating in (0, 6, -1):
            with self.assertRaises(ValueError):
                _record(rating=rating)

    def test_rating_must_be_int(self):
        for rating in (4.5, "4", True, None):
            with self.assertRaises(ValueError):
                _record(rating=rating)

    def test_unknown_sentiment(self):
        with self.assertRaises(ValueError):
            _record(sentiment="mixed")

    def test_record_is_immutable(self):
        r = _record()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            r.rating = 1


class TestReviewFormData(unittest.TestCase):

    def test_valid_form(self):
        ReviewFormData("Linen Shirt", "Coastline", "Shirts", 3, "").validate()

    def test_blank_fields_listed(self):
        form = ReviewFormData("  ", "", "Shirts", 3, "ok")
        with self.assertRaises(ValueError) as ctx:
            form.validate()
        self.assertIn("product_name", str(ctx.exception))
        self.assertIn("brand", str(ctx.exception))

    def test_bad_rating(self):
        with self.assertRaises(ValueError):
            ReviewFormData("Linen Shirt", "Coastline", "Shirts", 7, "").validate()


class TestMockData(unittest.TestCase):

    def test_review_ids_unique(self):
        ids = [r.review_id for r in MOCK_REVIEWS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_insight_categories_cover_reviews(self):
        categories = {i.category for i in MOCK_INSIGHTS}
        for r in MOCK_REVIEWS:
            self.assertIn(r.category, categories)

    def test_user_insight_shape(self):
        self.assertEqual(MOCK_USER_INSIGHT.time_range, "30d")
        self.assertEqual(len(MOCK_USER_INSIGHT.age_groups), 4)
        self.assertEqual(MOCK_USER_INSIGHT.top_searches[0], ("summer dress", 1200))

    def test_metric_cards_seeded(self):
        a = generate_metric_cards(random.Random(7))
        b = generate_metric_cards(random.Random(7))
        self.assertEqual(a, b)
        self.assertEqual(len(a), 7)

    def test_metric_card_ranges(self):
        for seed in range(20):
            cards = {c["title"]: c for c in generate_metric_cards(random.Random(seed))}
            avg = float(cards["Average Rating"]["value"])
            self.assertGreaterEqual(avg, 3.0)
            self.assertLessEqual(avg, 5.0)
            aov = float(cards["Average Order Value"]["value"].lstrip("$"))
            self.assertGreaterEqual(aov, 50.0)
            self.assertLessEqual(aov, 100.0)
            self.assertTrue(cards["User Satisfaction"]["value"].endswith("/5"))


if __name__ == "__main__":
    unittest.main()
