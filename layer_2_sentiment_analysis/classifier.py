"""
Rating-based sentiment classifier
"""
import math
from dataclasses import replace
from typing import Any, List

from models.review import Review
from layer_1_data_import.validator import parse_float
from layer_2_sentiment_analysis.sentiment_config import (
    POSITIVE,
    NEUTRAL,
    NEGATIVE,
    POSITIVE_THRESHOLD,
    NEGATIVE_THRESHOLD,
    FALLBACK_SENTIMENT,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def label_sentiment(rating: Any) -> str:
    """
    Map a rating to a sentiment label

    rating > 4 is positive, rating < 2 is negative, 2..4 (both ends
    included) is neutral. Missing or non-numeric ratings are neutral.

    Args:
        rating: Review rating (number or text)

    Returns:
        "positive", "neutral" or "negative"
    """
    if rating is None:
        return FALLBACK_SENTIMENT
    value = parse_float(rating)
    if math.isnan(value):
        return FALLBACK_SENTIMENT

    if value > POSITIVE_THRESHOLD:
        return POSITIVE
    if value < NEGATIVE_THRESHOLD:
        return NEGATIVE
    return NEUTRAL


def classify_review(review: Review) -> Review:
    """Return a copy of the review with its sentiment filled in"""
    return replace(review, sentiment=label_sentiment(review.rating))


def classify_reviews(reviews: List[Review]) -> List[Review]:
    """
    Label every review

    The input reviews are left untouched, new Review objects are returned.
    """
    classified = [classify_review(review) for review in reviews]
    logger.debug(f"Classified {len(classified)} reviews")
    return classified
