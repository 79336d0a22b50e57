"""
mock_data.py — Phase 01: Review Records
-----------------------------------------
Seed data for the dashboard. Nothing here is fetched or persisted: the
reviews, insights and user metrics are fixed, and the headline metric
cards are regenerated at random on every render.
"""

import random
from typing import Any, Optional

from review_schema import (
    AgeGroup,
    CategoryInsight,
    ReviewRecord,
    SentimentDistribution,
    UserInsight,
)


MOCK_REVIEWS: tuple[ReviewRecord, ...] = (
    ReviewRecord(
        review_id="1",
        product_id="p1",
        user_id="u1",
        product_name="Summer Floral Dress",
        brand="Ethnic Fusion",
        category="Dresses",
        rating=4,
        comment="Beautiful design but the fabric could be better. Love the fit though!",
        sentiment="positive",
        date="2024-03-15",
        image_url="https://images.unsplash.com/photo-1612336307429-8a898d10e223?w=400",
        user_age=25,
        purchase_verified=True,
    ),
    ReviewRecord(
        review_id="2",
        product_id="p2",
        user_id="u2",
        product_name="Classic Denim Jeans",
        brand="DenimCo",
        category="Jeans",
        rating=2,
        comment="The sizing runs small and the quality is not worth the price.",
        sentiment="negative",
        date="2024-03-14",
        image_url="https://images.unsplash.com/photo-1541099649105-f69ad21f3246?w=400",
        user_age=32,
        purchase_verified=True,
    ),
    ReviewRecord(
        review_id="3",
        product_id="p3",
        user_id="u3",
        product_name="Cotton Kurta",
        brand="Traditional Touch",
        category="Ethnic Wear",
        rating=5,
        comment="Perfect for summer! Great quality and beautiful embroidery.",
        sentiment="positive",
        date="2024-03-13",
        image_url="https://images.unsplash.com/photo-1614255976202-31c8302a7e99?w=400",
        user_age=28,
        purchase_verified=True,
    ),
)


MOCK_INSIGHTS: tuple[CategoryInsight, ...] = (
    CategoryInsight(
        category="Dresses",
        sentiment=SentimentDistribution(positive=65, neutral=20, negative=15),
        common_phrases=("good fit", "beautiful design", "fabric quality"),
        average_rating=4.2,
    ),
    CategoryInsight(
        category="Jeans",
        sentiment=SentimentDistribution(positive=45, neutral=30, negative=25),
        common_phrases=("size issues", "comfortable", "durability"),
        average_rating=3.8,
    ),
    CategoryInsight(
        category="Ethnic Wear",
        sentiment=SentimentDistribution(positive=75, neutral=15, negative=10),
        common_phrases=("traditional look", "good craftsmanship", "value for money"),
        average_rating=4.5,
    ),
)


MOCK_USER_INSIGHT = UserInsight(
    time_range="30d",
    age_groups=(
        AgeGroup(range="18-24", rating=4.2, count=1200),
        AgeGroup(range="25-34", rating=4.5, count=2500),
        AgeGroup(range="35-44", rating=3.8, count=1800),
        AgeGroup(range="45+",   rating=4.0, count=900),
    ),
    time_spent_total=450000,
    time_spent_average=15,
    top_searches=(
        ("summer dress", 1200),
        ("ethnic wear", 980),
        ("denim jeans", 850),
        ("cotton kurta", 720),
        ("party wear", 650),
    ),
    ctr=24.5,
    total_users=10000,
    returning_users=6500,
    drop_offs=2000,
    successful_payments=4500,
    retention_rate=65,
)


def generate_metric_cards(rng: Optional[random.Random] = None) -> list[dict[str, Any]]:
    """
    Build the headline metric cards shown above the charts.

    Values are random on every call; pass a seeded ``random.Random`` for
    reproducible output.

    Returns:
        list of dicts with keys: title, value, change.
    """
    rng = rng or random.Random()
    return [
        {
            "title":  "Average Rating",
            "value":  f"{rng.uniform(3, 5):.1f}",
            "change": f"+{rng.uniform(0, 0.5):.1f}",
        },
        {
            "title":  "Sentiment Score",
            "value":  f"{rng.randint(60, 79)}%",
            "change": f"+{rng.randint(0, 4)}%",
        },
        {
            "title":  "Total Reviews",
            "value":  str(rng.randint(500, 1499)),
            "change": f"+{rng.randint(0, 9)}%",
        },
        {
            "title":  "User Retention",
            "value":  f"{rng.randint(80, 89)}%",
            "change": f"+{rng.randint(0, 2)}%",
        },
        {
            "title":  "Average Order Value",
            "value":  f"${rng.uniform(50, 100):.2f}",
            "change": f"+{rng.randint(0, 4)}%",
        },
        {
            "title":  "Quantity Sold",
            "value":  str(rng.randint(500, 1499)),
            "change": f"+{rng.randint(0, 7)}%",
        },
        {
            "title":  "User Satisfaction",
            "value":  f"{rng.uniform(3, 5):.1f}/5",
            "change": f"+{rng.uniform(0, 0.3):.1f}",
        },
    ]
