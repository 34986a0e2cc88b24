"""
Sentiment aggregation by app and by language
"""
from typing import Dict, List

from models.review import Review, SentimentTally
from layer_2_sentiment_analysis.classifier import label_sentiment
from utils.logger import get_logger

logger = get_logger(__name__)


def aggregate_sentiment(reviews: List[Review], key_field: str, key_name: str) -> List[SentimentTally]:
    """
    Count sentiment labels per group

    Groups come out in the order their key was first seen. Each call
    starts from empty counts, so running it twice gives the same result.
    Reviews are not modified.

    Args:
        reviews: Cleaned reviews
        key_field: Review attribute to group by (e.g. "app_name")
        key_name: Name of the key when the tally is rendered (e.g. "app_name", "lang_name")

    Returns:
        One SentimentTally per distinct key
    """
    tallies: Dict[str, SentimentTally] = {}
    for review in reviews:
        key = getattr(review, key_field)
        if key not in tallies:
            tallies[key] = SentimentTally(key=key, key_name=key_name)
        tallies[key].add(label_sentiment(review.rating))

    logger.debug(f"Aggregated {len(reviews)} reviews into {len(tallies)} groups by {key_field}")
    return list(tallies.values())


def sentiment_analysis_app(reviews: List[Review]) -> List[SentimentTally]:
    """Sentiment counts per app"""
    return aggregate_sentiment(reviews, key_field="app_name", key_name="app_name")


def sentiment_analysis_lang(reviews: List[Review]) -> List[SentimentTally]:
    """Sentiment counts per review language"""
    return aggregate_sentiment(reviews, key_field="review_language", key_name="lang_name")
