"""
Performance CSV Service

Template generation and parsing for the performance-data CSV that users can
upload instead of typing metrics into the wizard.

Only the first data row is analyzed. Headers are matched case-insensitively
against CSV_TEMPLATE_HEADERS; unknown columns are ignored.
"""

import csv
import io
import logging
from itertools import islice
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

# Configure module logger
logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

CSV_TEMPLATE_HEADERS: List[str] = [
    'date',
    'campaign_name',
    'impressions',
    'clicks',
    'spend',
    'conversions',
]

NUMERIC_COLUMNS: List[str] = ['impressions', 'clicks', 'spend', 'conversions']

TEXT_COLUMNS: List[str] = ['date', 'campaign_name']

TEMPLATE_SAMPLE_ROW: List[Any] = ['2024-01-01', 'Campaign A', 10000, 500, 200, 50]

TEMPLATE_FILENAME = 'performance_template.csv'


class CsvParseError(ValueError):
    """Raised when uploaded CSV text cannot be turned into performance data."""


def generate_csv_template() -> str:
    """
    Build the downloadable CSV template: header line plus one sample row.

    Returns:
        CSV text terminated by a newline
    """
    df = pd.DataFrame([TEMPLATE_SAMPLE_ROW], columns=CSV_TEMPLATE_HEADERS)
    return df.to_csv(index=False, lineterminator='\n')


def _leading_record_widths(text: str) -> List[int]:
    """Field counts of the header and first data record, skipping blank lines."""
    records = (record for record in csv.reader(io.StringIO(text)) if record)
    return [len(record) for record in islice(records, 2)]


def parse_performance_csv(csv_text: str, max_bytes: Optional[int] = None) -> Dict[str, Any]:
    """
    Parse the first data row of a performance CSV.

    Numeric template columns are converted to floats when parseable and
    dropped otherwise; text columns are kept when non-empty.

    Args:
        csv_text: Raw CSV contents
        max_bytes: Optional size limit on the encoded text

    Returns:
        Dict of template header -> parsed value (only headers that parsed)

    Raises:
        CsvParseError: If the text is too large, has no data row, the first
            row's width doesn't match the header, or no known column parsed
    """
    if max_bytes is not None and len(csv_text.encode('utf-8')) > max_bytes:
        raise CsvParseError(f"CSV exceeds the maximum size of {max_bytes} bytes")

    text = csv_text.strip()
    if not text:
        raise CsvParseError("CSV is empty")

    try:
        raw = pd.read_csv(
            io.StringIO(text),
            header=None,
            nrows=2,
            dtype=str,
            na_filter=False,
            skipinitialspace=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CsvParseError(f"Malformed CSV: {e}") from e

    if len(raw.index) < 2:
        raise CsvParseError("CSV must have a header and at least one data row")

    # The parser pads short rows with empty cells, so widths come from the raw records
    widths = _leading_record_widths(text)
    if len(widths) < 2 or widths[0] != widths[1]:
        raise CsvParseError("First data row does not match the header width")

    headers = [str(h).strip().lower() for h in raw.iloc[0].tolist()]
    values = [str(v).strip() for v in raw.iloc[1].tolist()]

    parsed: Dict[str, Any] = {}
    for header, value in zip(headers, values):
        if header not in CSV_TEMPLATE_HEADERS or value == '':
            continue

        if header in NUMERIC_COLUMNS:
            number = pd.to_numeric(value, errors='coerce')
            if np.isfinite(number):
                parsed[header] = float(number)
        elif header in TEXT_COLUMNS:
            parsed[header] = value

    if not parsed:
        raise CsvParseError(
            "Failed to parse CSV. Please ensure it has a header and at least one "
            "data row matching the template format."
        )

    logger.info(f"Parsed performance CSV row with columns: {sorted(parsed)}")
    return parsed


def performance_metrics_from_row(row: Dict[str, Any]) -> Dict[str, float]:
    """Numeric fields of a parsed row, in template order, ready to submit as metrics."""
    return {
        column: row[column]
        for column in NUMERIC_COLUMNS
        if column in row
    }


__all__ = [
    "CSV_TEMPLATE_HEADERS",
    "NUMERIC_COLUMNS",
    "TEMPLATE_FILENAME",
    "CsvParseError",
    "generate_csv_template",
    "parse_performance_csv",
    "performance_metrics_from_row",
]
