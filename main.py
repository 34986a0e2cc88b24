"""
Main entry point for the application

This is the main file that runs the entire pipeline. Think of it as the "conductor"
that orchestrates all 3 steps of the process:
1. Import and clean reviews from the CSV dataset
2. Label each review's sentiment and count labels per app and per language
3. Compute summary statistics for the most reviewed app

When you run this file, it goes through all 3 steps in order and prints
a four-line report to stdout. Logs go to stderr and the log file.
"""
import sys
from typing import Any, Dict

from config.settings import settings
from layer_1_data_import.import_reviews import import_reviews
from layer_2_sentiment_analysis.classifier import classify_reviews
from layer_2_sentiment_analysis.aggregator import sentiment_analysis_app, sentiment_analysis_lang
from layer_3_statistics.summary import summary_statistics
from utils.logger import get_logger

# Set up logging so we can see what's happening
logger = get_logger(__name__)


def run_pipeline(file_path: str = None) -> Dict[str, Any]:
    """
    Run every step of the analysis

    Args:
        file_path: Dataset path (defaults to settings.REVIEWS_CSV_PATH)

    Returns:
        Dictionary with the cleaned reviews, both sentiment tallies and the summary

    Raises:
        OSError: If the dataset can't be read
    """
    file_path = file_path or settings.REVIEWS_CSV_PATH

    # ============================================================
    # STEP 1: Import Reviews
    # ============================================================
    logger.info("STEP 1: Importing Reviews")
    cleaned = import_reviews(file_path)

    # ============================================================
    # STEP 2: Sentiment Analysis
    # ============================================================
    logger.info("STEP 2: Sentiment Analysis")
    classified = classify_reviews(cleaned)
    app_sentiments = sentiment_analysis_app(classified)
    lang_sentiments = sentiment_analysis_lang(classified)
    logger.info(f"Counted sentiment for {len(app_sentiments)} apps and {len(lang_sentiments)} languages")

    # ============================================================
    # STEP 3: Summary Statistics
    # ============================================================
    logger.info("STEP 3: Summary Statistics")
    summary = summary_statistics(classified)

    return {
        'cleaned': classified,
        'app_sentiments': app_sentiments,
        'lang_sentiments': lang_sentiments,
        'summary': summary,
    }


def print_report(results: Dict[str, Any]):
    """Print the four report lines to stdout"""
    print('Number of cleaned reviews:', len(results['cleaned']))
    print('Sentiment by app:', [t.to_dict() for t in results['app_sentiments']])
    print('Sentiment by language:', [t.to_dict() for t in results['lang_sentiments']])
    print('Summary statistics:', results['summary'].to_dict())


def main(file_path: str = None) -> int:
    """
    Main entry point - This function runs the complete workflow

    If the dataset can't be read, it will log the error and return 1.

    Args:
        file_path: Dataset path (defaults to settings.REVIEWS_CSV_PATH)

    Returns:
        0 on success, 1 if the dataset couldn't be read
    """
    try:
        logger.info("=" * 60)
        logger.info("App Review Statistics - Starting")
        logger.info("=" * 60)

        # Make sure the logs folder exists
        settings.ensure_directories()

        results = run_pipeline(file_path)
        print_report(results)

        logger.info(f"✅ Analysis complete! {len(results['cleaned'])} cleaned reviews")
        return 0  # Return 0 means "success"

    except OSError as e:
        logger.error(f"Could not read review dataset: {e}", exc_info=True)
        return 1


def cli():
    """Console script: optional first argument overrides the dataset path"""
    file_path = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(main(file_path))


# This part runs when you execute this file directly (not when imported)
if __name__ == "__main__":
    cli()
