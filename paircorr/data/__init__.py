"""
Data ingestion and alignment module.

Provides parsing of vendor exports into typed points, inner joins by
trading date, and date-range filtering.
"""
from .ingest import parse_export_csv
from .alignment import align_by_date, clean_date_key
from .loader import ExportLoader, filter_by_date_range, jalali_range_to_gregorian

__all__ = [
    'parse_export_csv',
    'align_by_date',
    'clean_date_key',
    'ExportLoader',
    'filter_by_date_range',
    'jalali_range_to_gregorian',
]
