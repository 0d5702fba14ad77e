"""
Calendar conversion between Gregorian data keys and Jalali display dates.
"""
from .converter import (
    parse_date_key,
    to_jalali,
    to_gregorian,
    gregorian_to_jalali,
    jalali_to_gregorian,
    format_jalali,
    today_jalali,
    gregorian_timestamp_ms,
)
from .cache import CacheEntry, ConversionCache

__all__ = [
    'parse_date_key',
    'to_jalali',
    'to_gregorian',
    'gregorian_to_jalali',
    'jalali_to_gregorian',
    'format_jalali',
    'today_jalali',
    'gregorian_timestamp_ms',
    'CacheEntry',
    'ConversionCache',
]
