"""
review_schema.py — Phase 01: Review Records
---------------------------------------------
Defines the canonical ReviewRecord dataclass and the smaller shapes that
travel with it (form input, category insight, user insight).

Every other phase consumes ONLY these shapes — the dashboard never passes
raw dicts between phases.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional


SENTIMENT_LABELS = ("positive", "neutral", "negative")

DEFAULT_IMAGE_URL = "https://images.unsplash.com/photo-1612336307429-8a898d10e223?w=400"


def _check_rating(rating) -> None:
    # bool is an int subclass; True/False are not star ratings
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValueError(f"Invalid rating: {rating!r}. Must be an integer 1-5")
    if not (1 <= rating <= 5):
        raise ValueError(f"Invalid rating: {rating}. Must be 1-5")


@dataclass(frozen=True)
class ReviewRecord:
    """One user's evaluation of one product."""

    # --- Identity ---
    review_id: str              # Unique within a session, e.g. "r4"
    product_id: str
    user_id: str

    # --- Content ---
    product_name: str
    brand: str
    category: str               # Open set: "Dresses", "Jeans", ...
    rating: int                 # 1–5 stars
    comment: str
    sentiment: str              # "positive" | "neutral" | "negative"

    # --- Metadata ---
    date: str                   # ISO date string, e.g. "2024-03-15"
    image_url: str = field(default=DEFAULT_IMAGE_URL)
    user_age: Optional[int] = field(default=None)
    purchase_verified: bool = field(default=True)

    def __post_init__(self):
        _check_rating(self.rating)
        if self.sentiment not in SENTIMENT_LABELS:
            raise ValueError(
                f"Invalid sentiment: {self.sentiment!r}. Must be one of {SENTIMENT_LABELS}"
            )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ReviewFormData:
    """User-supplied half of a review, as entered in the submission form."""

    product_name: str
    brand: str
    category: str
    rating: int = 5
    comment: str = ""

    def validate(self) -> None:
        """
        Raises:
            ValueError: If a required field is blank or the rating is out of range.
        """
        missing = [
            name for name in ("product_name", "brand", "category")
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ValueError(f"Review form is missing required fields: {', '.join(missing)}")
        _check_rating(self.rating)


@dataclass(frozen=True)
class SentimentDistribution:
    positive: int
    neutral: int
    negative: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CategoryInsight:
    """Aggregate view over every record sharing one category."""

    category: str
    sentiment: SentimentDistribution
    common_phrases: tuple[str, ...]
    average_rating: float           # one decimal place

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AgeGroup:
    range: str
    rating: float
    count: int


@dataclass(frozen=True)
class UserInsight:
    """Audience metrics for the "User Insights" drill-down."""

    time_range: str                             # "1d" | "7d" | "15d" | "30d"
    age_groups: tuple[AgeGroup, ...]
    time_spent_total: int                       # minutes
    time_spent_average: int                     # minutes per session
    top_searches: tuple[tuple[str, int], ...]   # (term, count)
    ctr: float
    total_users: int
    returning_users: int
    drop_offs: int
    successful_payments: int
    retention_rate: int

    def to_dict(self) -> dict:
        return asdict(self)
