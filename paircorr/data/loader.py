"""
Loading vendor export files and filtering points by date range.

Supports:
- Reading an export file from disk (UTF-8, optional BOM)
- Gregorian date-key range filtering for points or records
- Jalali range bounds converted to Gregorian keys
"""
from pathlib import Path
from typing import Optional, Sequence, Tuple, TypeVar, Union, List

from .alignment import clean_date_key
from .ingest import parse_export_csv
from ..jalali.converter import jalali_to_gregorian
from ..shared.types import ParsedExport

T = TypeVar("T")


class ExportLoader:
    """
    Loads a vendor export file.

    Parsing is delegated to parse_export_csv; this class only owns the file.
    """

    def __init__(self, data_path: Union[str, Path]):
        """
        Initialize the loader.

        Args:
            data_path: Path to the export file
        """
        self.data_path = Path(data_path)
        if not self.data_path.exists():
            raise FileNotFoundError(f"Export file not found: {self.data_path}")

    def load(self) -> ParsedExport:
        """Read and parse the file. Raises FormatError on a bad header."""
        text = self.data_path.read_text(encoding="utf-8-sig")
        return parse_export_csv(text)


def jalali_range_to_gregorian(
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Convert optional Jalali bounds (e.g. "1402/01/01") to Gregorian YYYYMMDD keys.

    Raises:
        InvalidDateError: If either bound is malformed or out of range
    """
    start_key = jalali_to_gregorian(start) if start else None
    end_key = jalali_to_gregorian(end) if end else None
    return start_key, end_key


def filter_by_date_range(
    items: Sequence[T],
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[T]:
    """
    Keep items whose ``date`` falls within [start, end] (Gregorian YYYYMMDD, inclusive).

    Works for anything with a ``date`` attribute (RawPoint, MergedPoint,
    AnalysisRecord). A None bound is open.
    """
    kept = []
    for item in items:
        key = clean_date_key(item.date)
        if start is not None and key < start:
            continue
        if end is not None and key > end:
            continue
        kept.append(item)
    return kept
