"""
Parsing of raw exchange export text into typed price points.

The vendor format is a comma-separated table whose header cells contain
bracketed column names such as <DTYYYYMMDD>, <CLOSE> and <TICKER>.
"""
import io
import logging
from typing import List, Optional

import pandas as pd

from ..shared.defaults import (
    DATE_COLUMN_MARKER,
    CLOSE_COLUMN_MARKER,
    TICKER_COLUMN_MARKER,
    UNKNOWN_INSTRUMENT_NAME,
)
from ..shared.errors import FormatError
from ..shared.types import ParsedExport, RawPoint


logger = logging.getLogger(__name__)


def _find_column(columns: List[str], marker: str) -> Optional[str]:
    """Return the first header cell containing marker, or None."""
    for column in columns:
        if marker in str(column):
            return column
    return None


def parse_export_csv(text: str) -> ParsedExport:
    """
    Parse vendor export text into ascending RawPoints and an instrument name.

    Rows with an empty date or a non-numeric close are skipped. The name is the
    first non-empty ticker cell, or a fallback literal when there is none.

    Args:
        text: Full export content, header line first

    Returns:
        ParsedExport with points sorted ascending by date

    Raises:
        FormatError: If the date or close column is missing from the header
    """
    body = text.strip()
    try:
        n_columns = len(pd.read_csv(io.StringIO(body), nrows=0).columns)
        # Rows wider than the header (e.g. trailing commas) are cut to the
        # header width; columns are matched by position, never as an index.
        frame = pd.read_csv(
            io.StringIO(body),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            index_col=False,
            engine="python",
            on_bad_lines=lambda row: row[:n_columns],
        )
    except pd.errors.EmptyDataError:
        raise FormatError([DATE_COLUMN_MARKER, CLOSE_COLUMN_MARKER])

    columns = list(frame.columns)
    date_col = _find_column(columns, DATE_COLUMN_MARKER)
    close_col = _find_column(columns, CLOSE_COLUMN_MARKER)
    ticker_col = _find_column(columns, TICKER_COLUMN_MARKER)

    missing = [
        marker
        for marker, col in ((DATE_COLUMN_MARKER, date_col), (CLOSE_COLUMN_MARKER, close_col))
        if col is None
    ]
    if missing:
        raise FormatError(missing)

    name = ""
    if ticker_col is not None:
        tickers = frame[ticker_col].fillna("").str.strip()
        non_empty = tickers[tickers != ""]
        if not non_empty.empty:
            name = non_empty.iloc[0]

    dates = frame[date_col].fillna("").str.strip()
    closes = pd.to_numeric(frame[close_col].fillna("").str.strip(), errors="coerce")
    valid = (dates != "") & closes.notna()

    skipped = int((~valid).sum())
    if skipped:
        logger.debug(f"Skipped {skipped} row(s) with empty date or unparseable close")

    table = pd.DataFrame({"date": dates[valid], "close": closes[valid]})
    table = table.sort_values("date", kind="stable")
    points = [RawPoint(date=d, close=float(c)) for d, c in zip(table["date"], table["close"])]

    logger.debug(f"Parsed {len(points)} point(s) for instrument '{name or UNKNOWN_INSTRUMENT_NAME}'")
    return ParsedExport(points=points, name=name or UNKNOWN_INSTRUMENT_NAME)
