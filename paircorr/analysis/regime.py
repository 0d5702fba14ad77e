"""
Deviation regimes and correlation snapshots for a pair.

A price is in CEILING when it has stayed well above its moving average,
FLOOR when well below, NORMAL otherwise. Transitions need several
consecutive confirming days in both directions (hysteresis), so a single
spike does not flip the regime.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .distance import DistanceFromAverage
from ..indicators.correlation import rolling_correlation_at
from ..shared.defaults import (
    MA_SHORT_WINDOW,
    REGIME_ENTRY_THRESHOLD,
    REGIME_EXIT_THRESHOLD,
    REGIME_CONFIRM_DAYS,
    SNAPSHOT_SHORT_WINDOW,
    SNAPSHOT_LONG_WINDOW,
    HIGH_CORRELATION_THRESHOLD,
)
from ..shared.types import MergedPoint, Regime


def classify_regimes(
    distances: Sequence[Optional[float]],
    entry_threshold: float = REGIME_ENTRY_THRESHOLD,
    exit_threshold: float = REGIME_EXIT_THRESHOLD,
    confirm_days: int = REGIME_CONFIRM_DAYS,
) -> List[Regime]:
    """
    Walk a % distance series and return the regime after each index.

    Args:
        distances: % distance from MA per index (None during warm-up, skipped)
        entry_threshold: Distance beyond which CEILING/FLOOR is entered
        exit_threshold: Distance inside which the regime returns to NORMAL
        confirm_days: Consecutive days required for a transition

    Returns:
        One Regime per input index
    """
    if exit_threshold >= entry_threshold:
        raise ValueError(
            f"exit_threshold ({exit_threshold}) must be less than entry_threshold ({entry_threshold})"
        )
    if confirm_days < 1:
        raise ValueError(f"confirm_days must be >= 1, got {confirm_days}")

    state = Regime.NORMAL
    up_count = 0  # consecutive days confirming CEILING entry or FLOOR exit
    down_count = 0  # consecutive days confirming FLOOR entry or CEILING exit
    regimes = []
    for distance in distances:
        if distance is None:
            regimes.append(state)
            continue

        if state is Regime.NORMAL:
            up_count = up_count + 1 if distance > entry_threshold else 0
            down_count = down_count + 1 if distance < -entry_threshold else 0
            if up_count >= confirm_days:
                state, up_count, down_count = Regime.CEILING, 0, 0
            elif down_count >= confirm_days:
                state, up_count, down_count = Regime.FLOOR, 0, 0
        elif state is Regime.CEILING:
            down_count = down_count + 1 if distance < exit_threshold else 0
            if down_count >= confirm_days:
                state, up_count, down_count = Regime.NORMAL, 0, 0
        else:
            up_count = up_count + 1 if distance > -exit_threshold else 0
            if up_count >= confirm_days:
                state, up_count, down_count = Regime.NORMAL, 0, 0

        regimes.append(state)
    return regimes


def regimes_for_prices(
    prices: Sequence[float],
    window: int = MA_SHORT_WINDOW,
    entry_threshold: float = REGIME_ENTRY_THRESHOLD,
    exit_threshold: float = REGIME_EXIT_THRESHOLD,
    confirm_days: int = REGIME_CONFIRM_DAYS,
) -> List[Regime]:
    """Regime per index for a price array, measured against its own moving average."""
    distances = DistanceFromAverage(window).calculate(prices)
    return classify_regimes(distances, entry_threshold, exit_threshold, confirm_days)


@dataclass(frozen=True)
class CorrelationSnapshot:
    """Short vs long window correlation at one date, with derived flags."""
    date: str
    short_window: int
    long_window: int
    short: Optional[float]
    long: Optional[float]
    anomaly: bool  # short and long correlation disagree in sign
    high_risk: bool  # pair moving together strongly (little diversification)
    hedged: bool  # pair moving strongly against each other


def correlation_snapshot(
    merged: Sequence[MergedPoint],
    index: int = -1,
    short_window: int = SNAPSHOT_SHORT_WINDOW,
    long_window: int = SNAPSHOT_LONG_WINDOW,
    threshold: float = HIGH_CORRELATION_THRESHOLD,
) -> CorrelationSnapshot:
    """
    Compare short and long rolling correlation at a merged index.

    Windows lacking history give None, and None never sets a flag.
    """
    if not merged:
        raise ValueError("merged series is empty")
    if index < 0:
        index += len(merged)
    if not 0 <= index < len(merged):
        raise IndexError(f"index out of range for {len(merged)} merged points")

    prices1 = [m.price1 for m in merged]
    prices2 = [m.price2 for m in merged]
    short = rolling_correlation_at(prices1, prices2, short_window, index)
    long = rolling_correlation_at(prices1, prices2, long_window, index)

    anomaly = short is not None and long is not None and (
        (long > 0 and short < 0) or (long < 0 and short > 0)
    )
    return CorrelationSnapshot(
        date=merged[index].date,
        short_window=short_window,
        long_window=long_window,
        short=short,
        long=long,
        anomaly=anomaly,
        high_risk=short is not None and short > threshold,
        hedged=short is not None and short < -threshold,
    )
