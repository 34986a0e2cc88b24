"""
Layer 3: Summary statistics (most reviewed app, its top device and average rating).
"""
from .summary import count_by, most_common_first, summary_statistics

__all__ = [
    'count_by',
    'most_common_first',
    'summary_statistics',
]
