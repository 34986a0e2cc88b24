"""
Layer 1: Data Import & Validation
- CSV Reader (dataset file -> raw rows)
- Schema Validator (ensure required fields exist)
- Field Converters (numbers, dates, booleans with NaN/NaT fallback)
"""
from .reader import read_csv_text, parse_csv, parse_data
from .validator import ReviewValidator, is_missing, to_boolean, parse_int, parse_float, parse_date
from .import_reviews import clean_data, import_reviews

__all__ = [
    'read_csv_text',
    'parse_csv',
    'parse_data',
    'ReviewValidator',
    'is_missing',
    'to_boolean',
    'parse_int',
    'parse_float',
    'parse_date',
    'clean_data',
    'import_reviews',
]
