"""
Simple (trailing arithmetic) moving average.
"""
from typing import Dict, List, Optional, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .base import Indicator
from ..shared.defaults import MA_SHORT_WINDOW
from ..shared.types import RawPoint


def _check_window(window: int) -> None:
    if not isinstance(window, (int, np.integer)) or window < 1:
        raise ValueError(f"window must be a positive integer, got {window!r}")


def moving_average_at(prices: Sequence[float], index: int, window: int) -> Optional[float]:
    """
    Mean of prices[index - window + 1 .. index], or None if index < window - 1.

    Raises:
        ValueError: If window is not a positive integer
        IndexError: If index is past the end of prices
    """
    _check_window(window)
    if index < window - 1:
        return None
    if index >= len(prices):
        raise IndexError(f"index {index} out of range for {len(prices)} prices")
    trailing = np.asarray(prices[index - window + 1:index + 1], dtype=float)
    return float(trailing.mean())


def moving_average(prices: Sequence[float], window: int) -> List[Optional[float]]:
    """Moving average for every index; the first window - 1 entries are None."""
    _check_window(window)
    values = np.asarray(prices, dtype=float)
    result: List[Optional[float]] = [None] * len(values)
    if len(values) < window:
        return result
    means = sliding_window_view(values, window).mean(axis=1)
    for offset, mean in enumerate(means):
        result[window - 1 + offset] = float(mean)
    return result


def moving_average_by_date(points: Sequence[RawPoint], window: int) -> Dict[str, float]:
    """
    Moving average over an instrument's full history, keyed by date.

    Dates inside the warm-up period are absent from the mapping.
    """
    averages = moving_average([p.close for p in points], window)
    return {p.date: avg for p, avg in zip(points, averages) if avg is not None}


class SimpleMovingAverage(Indicator):
    """Trailing arithmetic mean over a fixed window."""

    def __init__(self, window: int = MA_SHORT_WINDOW):
        _check_window(window)
        self.window = window

    def calculate(self, prices: Sequence[float]) -> List[Optional[float]]:
        return moving_average(prices, self.window)

    def get_value_at(self, prices: Sequence[float], index: int) -> Optional[float]:
        return moving_average_at(prices, index, self.window)
