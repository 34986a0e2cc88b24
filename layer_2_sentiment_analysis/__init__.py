"""
Layer 2: Sentiment analysis (rating-based labels, counts per app and per language).
"""
from .sentiment_config import (
    POSITIVE,
    NEUTRAL,
    NEGATIVE,
    SENTIMENT_LABELS,
    FALLBACK_SENTIMENT,
    is_valid_sentiment
)
from .classifier import label_sentiment, classify_review, classify_reviews
from .aggregator import aggregate_sentiment, sentiment_analysis_app, sentiment_analysis_lang

__all__ = [
    'POSITIVE',
    'NEUTRAL',
    'NEGATIVE',
    'SENTIMENT_LABELS',
    'FALLBACK_SENTIMENT',
    'is_valid_sentiment',
    'label_sentiment',
    'classify_review',
    'classify_reviews',
    'aggregate_sentiment',
    'sentiment_analysis_app',
    'sentiment_analysis_lang',
]
