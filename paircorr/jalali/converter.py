"""
Gregorian <-> Jalali (Persian) calendar conversion.

Data is keyed by 8-digit Gregorian strings (YYYYMMDD); Jalali dates are used
for display and for user-supplied date ranges. Conversion is delegated to
jdatetime, which implements the arithmetic calendar locally (no service).
"""
import datetime
import re
from typing import Tuple

import jdatetime

from ..shared.defaults import JALALI_MIN_YEAR, JALALI_MAX_YEAR
from ..shared.errors import InvalidDateError

_NON_DIGITS = re.compile(r"[^0-9]")
_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")

DateTuple = Tuple[int, int, int]


def parse_date_key(value: str) -> DateTuple:
    """
    Split a date string into (year, month, day).

    Separators are ignored, so "20240320", "2024-03-20" and "1403/01/01" all work.

    Raises:
        InvalidDateError: If the value does not contain exactly 8 digits
    """
    if not isinstance(value, str):
        raise InvalidDateError(value, "expected a string")
    digits = _NON_DIGITS.sub("", value)
    if len(digits) != 8:
        raise InvalidDateError(value, "expected 8 digits (YYYYMMDD)")
    return int(digits[:4]), int(digits[4:6]), int(digits[6:8])


def _format_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}{month:02d}{day:02d}"


def _check_jalali_year(year: int, value: object) -> None:
    if not JALALI_MIN_YEAR <= year <= JALALI_MAX_YEAR:
        raise InvalidDateError(
            value,
            f"outside supported range (Jalali years {JALALI_MIN_YEAR}-{JALALI_MAX_YEAR})",
        )


def to_jalali(year: int, month: int, day: int) -> DateTuple:
    """Convert a Gregorian civil date to a Jalali (year, month, day) tuple."""
    try:
        gregorian = datetime.date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(_format_key(year, month, day), str(e)) from e
    jalali = jdatetime.date.fromgregorian(date=gregorian)
    _check_jalali_year(jalali.year, _format_key(year, month, day))
    return jalali.year, jalali.month, jalali.day


def to_gregorian(year: int, month: int, day: int) -> DateTuple:
    """Convert a Jalali date to a Gregorian (year, month, day) tuple."""
    _check_jalali_year(year, _format_key(year, month, day))
    try:
        jalali = jdatetime.date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(_format_key(year, month, day), str(e)) from e
    gregorian = jalali.togregorian()
    return gregorian.year, gregorian.month, gregorian.day


def gregorian_to_jalali(date_key: str) -> str:
    """Convert "YYYYMMDD" (Gregorian) to "YYYYMMDD" (Jalali)."""
    return _format_key(*to_jalali(*parse_date_key(date_key)))


def jalali_to_gregorian(jalali_key: str) -> str:
    """Convert "YYYYMMDD" (Jalali, separators allowed) to "YYYYMMDD" (Gregorian)."""
    return _format_key(*to_gregorian(*parse_date_key(jalali_key)))


def format_jalali(date_key: str, separator: str = "/", persian_digits: bool = False) -> str:
    """
    Render a Gregorian date key as a Jalali display string, e.g. "1403/01/01".

    Args:
        date_key: Gregorian date (YYYYMMDD, separators allowed)
        separator: Placed between year, month and day
        persian_digits: Render with Persian (Eastern Arabic) numerals
    """
    jy, jm, jd = to_jalali(*parse_date_key(date_key))
    text = f"{jy:04d}{separator}{jm:02d}{separator}{jd:02d}"
    if persian_digits:
        text = text.translate(_PERSIAN_DIGITS)
    return text


def today_jalali() -> DateTuple:
    """Today's date in the Jalali calendar, used to initialize date ranges."""
    today = jdatetime.date.today()
    return today.year, today.month, today.day


def gregorian_timestamp_ms(date_key: str) -> int:
    """Epoch milliseconds of local midnight on the given Gregorian date."""
    year, month, day = parse_date_key(date_key)
    try:
        midnight = datetime.datetime(year, month, day)
    except ValueError as e:
        raise InvalidDateError(date_key, str(e)) from e
    return int(midnight.timestamp() * 1000)
