"""
Summary statistics for the most-reviewed app

Finds the app with the most reviews, then looks only at that app's
reviews to find its most used device and its average rating.
"""
from typing import Dict, Hashable, List, Optional, Tuple

from models.review import Review, SummaryResult
from utils.logger import get_logger

logger = get_logger(__name__)


def count_by(reviews: List[Review], key_field: str) -> Dict[str, int]:
    """
    Count reviews per value of a field, keeping first-seen order

    Args:
        reviews: Reviews to count
        key_field: Review attribute to count by

    Returns:
        Dictionary mapping each value to its count
    """
    counts: Dict[str, int] = {}
    for review in reviews:
        key = getattr(review, key_field)
        counts[key] = counts.get(key, 0) + 1
    return counts


def most_common_first(counts: Dict[Hashable, int]) -> Tuple[Optional[Hashable], int]:
    """
    Pick the key with the highest count

    A key only takes the lead by strictly beating the current maximum,
    so on a tie the key seen first wins.

    Returns:
        Tuple of (key, count), (None, 0) for empty counts
    """
    leader = None
    best = 0
    for key, count in counts.items():
        if count > best:
            leader = key
            best = count
    return leader, best


def summary_statistics(reviews: List[Review]) -> SummaryResult:
    """
    Compute summary statistics for the most-reviewed app

    Steps:
    1. Count reviews per app
    2. Pick the app with the most reviews
    3. Keep only that app's reviews
    4. Find its most used device and its average rating

    Args:
        reviews: Cleaned reviews

    Returns:
        SummaryResult (all empty/zero when there are no reviews)
    """
    if not reviews:
        logger.info("No reviews to summarize")
        return SummaryResult()

    # 1) and 2) Most reviewed app
    app_counts = count_by(reviews, 'app_name')
    most_reviewed_app, most_reviews = most_common_first(app_counts)

    # 3) Only that app's reviews
    app_reviews = [r for r in reviews if r.app_name == most_reviewed_app]

    # 4) Most used device and average rating
    most_used_device, most_devices = most_common_first(count_by(app_reviews, 'device_type'))
    rating_sum = sum(r.rating for r in app_reviews)
    avg_rating = rating_sum / len(app_reviews) if app_reviews else 0

    logger.debug(
        f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews), "
        f"top device: {most_used_device} ({most_devices})"
    )

    return SummaryResult(
        most_reviewed_app=most_reviewed_app,
        most_reviews=most_reviews,
        most_used_device=most_used_device,
        most_devices=most_devices,
        avg_rating=avg_rating,
    )
