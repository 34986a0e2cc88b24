"""
Main import workflow: Read, validate and convert reviews

This file is responsible for getting reviews out of the dataset and preparing them.
Think of it like a quality control process:
- It reads the CSV file into raw rows
- It checks each row has every required value
- It converts the text values into numbers, dates and booleans
"""
from typing import Any, Dict, List

from config.settings import settings
from models.review import Review
from layer_1_data_import.reader import parse_data
from layer_1_data_import.validator import ReviewValidator
from utils.logger import get_logger

logger = get_logger(__name__)


def clean_data(rows: List[Dict[str, Any]]) -> List[Review]:
    """
    Turn raw rows into Review objects

    Rows missing a required value are skipped without raising. The
    output keeps the input order.

    Args:
        rows: Raw rows from parse_data / parse_csv

    Returns:
        List of cleaned Review objects
    """
    cleaned = []
    for row in rows:
        review = ReviewValidator.process_row(row)
        if review is not None:
            cleaned.append(review)

    logger.debug(f"Kept {len(cleaned)} of {len(rows)} rows after cleaning")
    return cleaned


def import_reviews(file_path: str = None) -> List[Review]:
    """
    Main import workflow

    1. Read and parse the CSV file
    2. Validate and convert every row

    Args:
        file_path: Dataset path (defaults to settings.REVIEWS_CSV_PATH)

    Returns:
        List of cleaned Review objects

    Raises:
        OSError: If the dataset can't be read
    """
    file_path = file_path or settings.REVIEWS_CSV_PATH
    logger.info("Starting review import workflow")

    rows = parse_data(file_path)
    reviews = clean_data(rows)

    logger.info(f"Import complete! Cleaned {len(reviews)} reviews")
    return reviews


# This part runs when you execute this file directly
if __name__ == "__main__":
    reviews = import_reviews()
    print(f"\n✅ Successfully imported {len(reviews)} reviews")
