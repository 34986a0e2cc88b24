"""
CSV reader for the review dataset

Reads the dataset file as text and turns it into a list of raw rows
(one dictionary per line, keyed by the header row). No type conversion
happens here - every value stays a string so the cleaner sees exactly
what was in the file.
"""
import io
import warnings
from typing import Any, Dict, List

import pandas as pd

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


def read_csv_text(file_path: str, encoding: str = None) -> str:
    """
    Read the whole dataset file as text

    Args:
        file_path: Path to the CSV file
        encoding: Text encoding (defaults to settings.CSV_ENCODING)

    Bytes that aren't valid in the encoding become U+FFFD instead of
    failing the whole read.

    Returns:
        File content

    Raises:
        OSError: If the file is missing or cannot be read
    """
    encoding = encoding or settings.CSV_ENCODING
    with open(file_path, 'r', encoding=encoding, errors='replace') as f:
        return f.read()


def parse_csv(text: str) -> List[Dict[str, Any]]:
    """
    Parse CSV text with a header row into raw row dictionaries

    Blank lines are skipped. Lines the parser can't make sense of are
    logged and dropped, everything else is kept (best-effort parsing).
    Values are kept as strings: "null", "NA" and "" are NOT turned into
    missing values here, that decision belongs to the cleaner. Short
    rows get NaN for the columns they don't have.

    Args:
        text: CSV content

    Returns:
        List of raw rows in file order
    """
    if not text or not text.strip():
        return []

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", pd.errors.ParserWarning)
        try:
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
                on_bad_lines="warn",
            )
        except pd.errors.EmptyDataError:
            logger.warning("CSV text has no header row, nothing to parse")
            return []

    for warning in caught:
        logger.warning(f"CSV parser: {str(warning.message).strip()}")

    rows = df.to_dict(orient="records")
    logger.debug(f"Parsed {len(rows)} rows with columns {list(df.columns)}")
    return rows


def parse_data(file_path: str) -> List[Dict[str, Any]]:
    """
    Read and parse the review dataset

    Args:
        file_path: Path to the CSV file

    Returns:
        List of raw rows
    """
    logger.info(f"Reading reviews from {file_path}")
    rows = parse_csv(read_csv_text(file_path))
    logger.info(f"Parsed {len(rows)} raw rows")
    return rows
