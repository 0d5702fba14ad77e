"""
Percentage distance of a value from its moving average.
"""
from typing import List, Optional, Sequence

from ..indicators.base import Indicator
from ..indicators.moving_average import moving_average
from ..shared.defaults import DISTANCE_DECIMALS, MA_SHORT_WINDOW


def percent_distance(value: Optional[float], average: Optional[float]) -> Optional[float]:
    """
    (value - average) / average * 100.

    Returns None when either input is None or the average is zero.
    """
    if value is None or average is None or average == 0:
        return None
    return (value - average) / average * 100


def rounded_distance(
    value: Optional[float],
    average: Optional[float],
    decimals: int = DISTANCE_DECIMALS,
) -> Optional[float]:
    """percent_distance rounded for display; None passes through."""
    distance = percent_distance(value, average)
    return None if distance is None else round(distance, decimals)


class DistanceFromAverage(Indicator):
    """Unrounded % distance of each price from its trailing moving average."""

    def __init__(self, window: int = MA_SHORT_WINDOW):
        self.window = window

    def calculate(self, prices: Sequence[float]) -> List[Optional[float]]:
        averages = moving_average(prices, self.window)
        return [percent_distance(p, a) for p, a in zip(prices, averages)]

    def get_value_at(self, prices: Sequence[float], index: int) -> Optional[float]:
        return self.calculate(prices[:index + 1])[index]
