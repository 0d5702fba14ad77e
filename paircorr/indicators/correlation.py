"""
Rolling Pearson correlation between two aligned price arrays.

r = (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx^2) * (n*Syy - Sy^2))

When either slice has zero variance the result is 0 rather than NaN;
charts downstream rely on that value. Results are rounded to
CORRELATION_DECIMALS places.
"""
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..shared.defaults import CORRELATION_DECIMALS


def _as_pair(x: Sequence[float], y: Sequence[float]):
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.shape != ys.shape:
        raise ValueError(f"price arrays must have equal length, got {len(xs)} and {len(ys)}")
    return xs, ys


def _check_window(window: int) -> None:
    if not isinstance(window, (int, np.integer)) or window < 1:
        raise ValueError(f"window must be a positive integer, got {window!r}")


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson product-moment correlation of two equal-length arrays (unrounded).

    Returns 0.0 for empty input or when either array is constant.
    """
    xs, ys = _as_pair(x, y)
    n = len(xs)
    if n == 0 or np.ptp(xs) == 0 or np.ptp(ys) == 0:
        return 0.0
    # Shifting does not change r but keeps the sums well conditioned
    xs = xs - xs.mean()
    ys = ys - ys.mean()
    sum_x, sum_y = xs.sum(), ys.sum()
    numerator = n * (xs * ys).sum() - sum_x * sum_y
    variance_term = (n * (xs * xs).sum() - sum_x ** 2) * (n * (ys * ys).sum() - sum_y ** 2)
    if variance_term <= 0:
        return 0.0
    return float(numerator / np.sqrt(variance_term))


def rolling_correlation_at(
    prices1: Sequence[float],
    prices2: Sequence[float],
    window: int,
    index: int,
) -> Optional[float]:
    """Rounded correlation of the trailing window ending at index, or None during warm-up."""
    _check_window(window)
    if index < window - 1:
        return None
    if index >= len(prices1):
        raise IndexError(f"index {index} out of range for {len(prices1)} prices")
    start = index - window + 1
    r = pearson(prices1[start:index + 1], prices2[start:index + 1])
    return round(r, CORRELATION_DECIMALS)


def rolling_correlation(
    prices1: Sequence[float],
    prices2: Sequence[float],
    window: int,
) -> List[Optional[float]]:
    """
    Rounded rolling correlation for every index (vectorized over all windows).

    Args:
        prices1: First aligned price array
        prices2: Second aligned price array (same length)
        window: Trailing window length

    Returns:
        List with None for indices < window - 1, rounded r otherwise
    """
    _check_window(window)
    xs, ys = _as_pair(prices1, prices2)
    result: List[Optional[float]] = [None] * len(xs)
    if len(xs) < window:
        return result

    wx = sliding_window_view(xs - xs.mean(), window)
    wy = sliding_window_view(ys - ys.mean(), window)
    constant = (np.ptp(sliding_window_view(xs, window), axis=1) == 0) | (
        np.ptp(sliding_window_view(ys, window), axis=1) == 0
    )

    sum_x = wx.sum(axis=1)
    sum_y = wy.sum(axis=1)
    numerator = window * (wx * wy).sum(axis=1) - sum_x * sum_y
    variance_term = (window * (wx * wx).sum(axis=1) - sum_x ** 2) * (
        window * (wy * wy).sum(axis=1) - sum_y ** 2
    )
    degenerate = constant | (variance_term <= 0)
    safe_term = np.where(degenerate, 1.0, variance_term)
    r = np.where(degenerate, 0.0, numerator / np.sqrt(safe_term))

    for offset, value in enumerate(r):
        result[window - 1 + offset] = round(float(value), CORRELATION_DECIMALS)
    return result


def correlations_by_window(
    prices1: Sequence[float],
    prices2: Sequence[float],
    windows: Iterable[int],
) -> Dict[int, List[Optional[float]]]:
    """Rolling correlation series for each requested window, computed independently."""
    return {w: rolling_correlation(prices1, prices2, w) for w in windows}
