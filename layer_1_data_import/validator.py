"""
Schema validator and field converters for raw review rows
"""
import re
from typing import Any, Dict, Optional

import pandas as pd

from models.review import Review, ReviewUser
from utils.logger import get_logger

logger = get_logger(__name__)

# Text values that count as "yes" for boolean columns
TRUE_VALUES = {'true', '1', 'yes', 'y'}

# Leading number patterns (trailing junk is ignored, like "12 votes" -> 12)
INT_PREFIX_PATTERN = re.compile(r'^\s*([+-]?\d+)')
FLOAT_PREFIX_PATTERN = re.compile(r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')


def is_missing(value: Any) -> bool:
    """
    Check if a raw value counts as missing

    Missing means: None, NaN/NaT, blank after trimming, or the text "null"
    in any letter case.
    """
    if value is None:
        return True
    if not isinstance(value, str) and pd.isna(value):
        return True
    text = str(value).strip()
    if text == '':
        return True
    return text.lower() == 'null'


def to_boolean(value: Any) -> bool:
    """Coerce a raw value to bool ("true", "1", "yes", "y" are True, anything else False)"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def parse_int(value: Any):
    """Parse the leading integer of a value, float('nan') if there isn't one"""
    match = INT_PREFIX_PATTERN.match(str(value)) if value is not None else None
    if not match:
        return float('nan')
    return int(match.group(1))


def parse_float(value: Any) -> float:
    """Parse the leading decimal number of a value, float('nan') if there isn't one"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = FLOAT_PREFIX_PATTERN.match(str(value)) if value is not None else None
    if not match:
        return float('nan')
    return float(match.group(1))


def parse_date(value: Any):
    """
    Parse a calendar date from its text form

    Returns:
        datetime.date, or pd.NaT if the text isn't a recognizable date
    """
    if is_missing(value):
        return pd.NaT
    timestamp = pd.to_datetime(str(value).strip(), errors='coerce')
    if pd.isna(timestamp):
        return pd.NaT
    return timestamp.date()


class ReviewValidator:
    """Validate raw review rows and convert them to Review objects"""

    # user_gender is the only column allowed to be blank
    REQUIRED_FIELDS = [
        'review_id',
        'app_name',
        'app_category',
        'review_text',
        'review_language',
        'rating',
        'review_date',
        'verified_purchase',
        'device_type',
        'num_helpful_votes',
        'app_version',
        'user_id',
        'user_age',
        'user_country',
    ]

    @classmethod
    def validate(cls, row: Dict[str, Any]) -> tuple[bool, Optional[str]]:
        """
        Check that every required field has a value

        Args:
            row: Raw row dictionary

        Returns:
            Tuple of (is_valid, error_message)
        """
        for field in cls.REQUIRED_FIELDS:
            if is_missing(row.get(field)):
                return False, f"Missing required field: {field}"
        return True, None

    @staticmethod
    def to_review(row: Dict[str, Any]) -> Review:
        """
        Convert a validated raw row into a Review

        Numbers and dates that don't parse become NaN / NaT instead of
        raising, the row is kept either way.

        Args:
            row: Raw row dictionary (already validated)

        Returns:
            Review object
        """
        gender = row.get('user_gender')
        return Review(
            review_id=parse_int(row['review_id']),
            app_name=row['app_name'],
            app_category=row['app_category'],
            review_text=row['review_text'],
            review_language=row['review_language'],
            rating=parse_float(row['rating']),
            review_date=parse_date(row['review_date']),
            verified_purchase=to_boolean(row['verified_purchase']),
            device_type=row['device_type'],
            num_helpful_votes=parse_int(row['num_helpful_votes']),
            app_version=row['app_version'],
            user=ReviewUser(
                user_age=parse_int(row['user_age']),
                user_country=row['user_country'],
                user_gender='' if is_missing(gender) else gender,
                user_id=parse_int(row['user_id']),
            ),
        )

    @classmethod
    def process_row(cls, row: Dict[str, Any]) -> Optional[Review]:
        """
        Validate and convert one raw row

        Returns:
            Review object, or None if the row should be dropped
        """
        is_valid, error = cls.validate(row)
        if not is_valid:
            logger.debug(f"Row dropped ({error}): review_id={row.get('review_id')}")
            return None
        return cls.to_review(row)
