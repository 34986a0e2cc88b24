"""
Sentiment configuration for rating-based review labelling
Defines the 3 allowed labels and the rating thresholds between them
"""

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"

SENTIMENT_LABELS = [POSITIVE, NEUTRAL, NEGATIVE]

# Ratings strictly above this are positive
POSITIVE_THRESHOLD = 4.0

# Ratings strictly below this are negative
NEGATIVE_THRESHOLD = 2.0

# Label used when a rating is missing or not a number
FALLBACK_SENTIMENT = NEUTRAL


def is_valid_sentiment(label: str) -> bool:
    """Check if a label is one of the allowed sentiments"""
    return label in SENTIMENT_LABELS
