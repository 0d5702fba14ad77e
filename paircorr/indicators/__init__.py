"""
Indicator calculation module.

Provides windowed statistics over aligned price arrays:
- Simple moving averages (with warm-up handling)
- Rolling Pearson correlation between two series

Single-series indicators follow the Indicator interface.
"""
from .base import Indicator
from .moving_average import (
    SimpleMovingAverage,
    moving_average,
    moving_average_at,
    moving_average_by_date,
)
from .correlation import (
    pearson,
    rolling_correlation,
    rolling_correlation_at,
    correlations_by_window,
)

__all__ = [
    'Indicator',
    'SimpleMovingAverage',
    'moving_average',
    'moving_average_at',
    'moving_average_by_date',
    'pearson',
    'rolling_correlation',
    'rolling_correlation_at',
    'correlations_by_window',
]
