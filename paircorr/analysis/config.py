"""
Analysis configuration.

Validation runs at construction time (fail fast with clear errors).
"""
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..data.loader import jalali_range_to_gregorian
from ..shared.defaults import (
    CORRELATION_WINDOWS,
    REGIME_ENTRY_THRESHOLD,
    REGIME_EXIT_THRESHOLD,
    REGIME_CONFIRM_DAYS,
)
from ..shared.errors import InvalidDateError


def normalize_windows(windows: Sequence[int]) -> Tuple[int, ...]:
    """Sorted, de-duplicated window sizes. Raises ValueError on non-positive or non-integer sizes."""
    normalized = set()
    for w in windows:
        if isinstance(w, bool) or not isinstance(w, numbers.Integral) or w < 1:
            raise ValueError(f"window sizes must be positive integers, got {w!r}")
        normalized.add(int(w))
    return tuple(sorted(normalized))


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Parameters for one pair analysis run.

    Date bounds are Jalali strings (e.g. "1402/01/01"), inclusive; they only
    filter the output, indicators still use the full history.
    """
    windows: Tuple[int, ...] = CORRELATION_WINDOWS
    include_moving_averages: bool = True
    ratio_mode: bool = False
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    persian_digits: bool = False
    regime_entry_threshold: float = REGIME_ENTRY_THRESHOLD
    regime_exit_threshold: float = REGIME_EXIT_THRESHOLD
    regime_confirm_days: int = REGIME_CONFIRM_DAYS

    def __post_init__(self):
        windows = normalize_windows(self.windows)
        if not windows:
            raise ValueError("at least one correlation window is required")
        object.__setattr__(self, "windows", windows)

        if self.regime_exit_threshold >= self.regime_entry_threshold:
            raise ValueError(
                f"regime exit threshold ({self.regime_exit_threshold}) must be less than "
                f"entry threshold ({self.regime_entry_threshold})"
            )
        if self.regime_confirm_days < 1:
            raise ValueError(f"regime_confirm_days must be >= 1, got {self.regime_confirm_days}")

        start_key, end_key = self.gregorian_range()
        if start_key is not None and end_key is not None and start_key > end_key:
            raise ValueError(f"start_date ({self.start_date}) is after end_date ({self.end_date})")

    def gregorian_range(self) -> Tuple[Optional[str], Optional[str]]:
        """Date bounds as Gregorian YYYYMMDD keys (None where open)."""
        try:
            return jalali_range_to_gregorian(self.start_date, self.end_date)
        except InvalidDateError as e:
            raise ValueError(f"invalid date range: {e}") from e
