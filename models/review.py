"""
Review data models
"""
from dataclasses import dataclass, asdict
from datetime import date
from typing import Optional, Union

import pandas as pd

# Integer fields fall back to float('nan') when their text does not parse
IntOrNaN = Union[int, float]


@dataclass
class ReviewUser:
    """Reviewer details nested inside a review"""
    user_age: IntOrNaN
    user_country: str
    user_gender: str  # "" when the dataset leaves it blank
    user_id: IntOrNaN


@dataclass
class Review:
    """Cleaned review record"""
    review_id: IntOrNaN
    app_name: str
    app_category: str
    review_text: str
    review_language: str
    rating: float
    review_date: date  # pd.NaT when the date text does not parse
    verified_purchase: bool
    device_type: str
    num_helpful_votes: IntOrNaN
    app_version: str
    user: ReviewUser
    sentiment: Optional[str] = None  # "positive", "neutral" or "negative" once classified

    def to_dict(self) -> dict:
        """Convert review to a plain dictionary for display"""
        data = asdict(self)
        data["review_date"] = None if pd.isna(self.review_date) else self.review_date.isoformat()
        return data


@dataclass
class SentimentTally:
    """Positive/neutral/negative counts for one app or language"""
    key: str
    key_name: str = "key"  # Name used for the key when rendered ("app_name", "lang_name")
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def add(self, sentiment: str):
        """Count one review with the given sentiment label"""
        if sentiment == "positive":
            self.positive += 1
        elif sentiment == "negative":
            self.negative += 1
        else:
            self.neutral += 1

    def to_dict(self) -> dict:
        return {
            self.key_name: self.key,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


@dataclass
class SummaryResult:
    """Statistics for the most-reviewed app"""
    most_reviewed_app: Optional[str] = None
    most_reviews: int = 0
    most_used_device: Optional[str] = None
    most_devices: int = 0
    avg_rating: float = 0

    def to_dict(self) -> dict:
        return {
            "most_reviewed_app": self.most_reviewed_app,
            "most_reviews": self.most_reviews,
            "most_used_device": self.most_used_device,
            "most_devices": self.most_devices,
            "avg_rating": self.avg_rating,
        }
