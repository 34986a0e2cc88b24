"""
Application settings and configuration

This file contains all the settings for the application.
Think of it like a control panel where you can adjust how the system works.

Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
# This lets you point the pipeline at another dataset without changing code
load_dotenv()


class Settings:
    """
    Application configuration settings

    This class holds all the configuration for the entire application.
    You can change these values by setting environment variables in a .env file.
    """

    # ============================================================
    # Dataset Settings
    # ============================================================
    # Where the review dataset lives
    # The file must be a CSV with a header row (review_id, app_name, rating, ...)
    DATA_DIR = os.getenv("DATA_DIR", "data")  # Main data folder
    REVIEWS_CSV_PATH = os.getenv(
        "REVIEWS_CSV_PATH",
        os.path.join(DATA_DIR, "multilingual_mobile_app_reviews_2025.csv")
    )
    CSV_ENCODING = os.getenv("CSV_ENCODING", "utf-8")  # Text encoding of the dataset

    # ============================================================
    # Logging Settings
    # ============================================================
    # How much detail to log
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "logs/app.log")  # Where to save log files ("" = console only)

    @staticmethod
    def ensure_directories():
        """
        Create necessary directories if they don't exist

        Only the logs folder is needed, the dataset is read-only input.
        """
        if Settings.LOG_FILE:
            os.makedirs(os.path.dirname(Settings.LOG_FILE) or "logs", exist_ok=True)


# Global settings instance
settings = Settings()
