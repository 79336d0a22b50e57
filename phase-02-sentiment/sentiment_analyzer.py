"""
sentiment_analyzer.py — Phase 02: Sentiment Classification
------------------------------------------------------------
Labels a review comment as positive, neutral or negative.
Pure keyword counting — no model, no I/O. Easily unit-testable.

Rule:
  positive_count = tokens found in POSITIVE_WORDS  (+1 if rating >= 4)
  negative_count = tokens found in NEGATIVE_WORDS  (+1 if rating <= 2)

  positive_count > negative_count → "positive"
  negative_count > positive_count → "negative"
  otherwise (including 0–0)       → "neutral"

Tokens are the lowercased comment split on whitespace and must match a
keyword exactly: "great!" does not count as "great". Punctuation is
never stripped.
"""

POSITIVE_WORDS = frozenset(
    ["great", "good", "excellent", "love", "perfect", "beautiful", "amazing"]
)
NEGATIVE_WORDS = frozenset(
    ["bad", "poor", "terrible", "worst", "disappointed", "issue", "problem"]
)


def classify(comment: str, rating: int) -> str:
    """
    Classify a review from its comment text and star rating.

    Args:
        comment: Free-text review body (may be empty).
        rating:  Star rating, 1–5.

    Returns:
        "positive", "neutral" or "negative".
    """
    words = (comment or "").lower().split()

    positive_count = sum(1 for w in words if w in POSITIVE_WORDS)
    negative_count = sum(1 for w in words if w in NEGATIVE_WORDS)

    # Factor in the rating
    if rating >= 4:
        positive_count += 1
    if rating <= 2:
        negative_count += 1

    if positive_count > negative_count:
        return "positive"
    if negative_count > positive_count:
        return "negative"
    return "neutral"
