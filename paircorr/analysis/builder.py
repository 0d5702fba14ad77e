"""
Assembly of the per-date analysis record stream for a pair of instruments.

For every aligned trading date a record carries both prices, each side's
MA100/MA200 and distance from them, and one rolling correlation per
requested window. Ratio mode applies the same moving-average and distance
logic to the price1/price2 series, treated as a single instrument.

Either the full record list is produced or a single error is raised; there
is no partial output.
"""
import logging
from typing import Dict, List, Optional, Sequence

from .config import AnalysisConfig, normalize_windows
from .distance import rounded_distance
from ..data.alignment import align_by_date, clean_date_key
from ..data.loader import filter_by_date_range
from ..indicators.correlation import correlations_by_window
from ..indicators.moving_average import SimpleMovingAverage, moving_average_by_date
from ..jalali.cache import ConversionCache
from ..jalali.converter import format_jalali, gregorian_timestamp_ms
from ..shared.defaults import CORRELATION_WINDOWS, MA_SHORT_WINDOW, MA_LONG_WINDOW
from ..shared.errors import InsufficientDataError
from ..shared.types import (
    AnalysisRecord,
    MergedPoint,
    RatioAnalysisRecord,
    RawPoint,
)


logger = logging.getLogger(__name__)


def _require_history(available: int, windows: Sequence[int]) -> None:
    required = min(windows) if windows else 1
    if available < required:
        raise InsufficientDataError(available=available, required=required)


def _side_averages(points: Sequence[RawPoint], window: int) -> Dict[str, float]:
    """Full-history moving average of one instrument, keyed by cleaned date."""
    return {clean_date_key(d): v for d, v in moving_average_by_date(points, window).items()}


def _base_fields(
    series1: Sequence[RawPoint],
    series2: Sequence[RawPoint],
    merged: Sequence[MergedPoint],
    windows: Sequence[int],
    include_moving_averages: bool,
    persian_digits: bool,
    date_cache: ConversionCache,
) -> List[dict]:
    """Keyword arguments shared by both record types, one dict per merged date."""
    prices1 = [m.price1 for m in merged]
    prices2 = [m.price2 for m in merged]
    correlations = correlations_by_window(prices1, prices2, windows)

    if include_moving_averages:
        averages = {
            "ma100_1": _side_averages(series1, MA_SHORT_WINDOW),
            "ma200_1": _side_averages(series1, MA_LONG_WINDOW),
            "ma100_2": _side_averages(series2, MA_SHORT_WINDOW),
            "ma200_2": _side_averages(series2, MA_LONG_WINDOW),
        }
    else:
        averages = {}

    suffix = "fa" if persian_digits else "en"
    rows = []
    for i, point in enumerate(merged):
        display_date = date_cache.get_or_compute(
            f"{point.date}:{suffix}",
            lambda _key: format_jalali(point.date, persian_digits=persian_digits),
        )
        ma = {name: lookup.get(point.date) for name, lookup in averages.items()}
        rows.append({
            "date": point.date,
            "display_date": display_date,
            "timestamp": gregorian_timestamp_ms(point.date),
            "price1": point.price1,
            "price2": point.price2,
            "ma100_1": ma.get("ma100_1"),
            "ma100_2": ma.get("ma100_2"),
            "ma200_1": ma.get("ma200_1"),
            "ma200_2": ma.get("ma200_2"),
            "dist_ma100_1": rounded_distance(point.price1, ma.get("ma100_1")),
            "dist_ma100_2": rounded_distance(point.price2, ma.get("ma100_2")),
            "dist_ma200_1": rounded_distance(point.price1, ma.get("ma200_1")),
            "dist_ma200_2": rounded_distance(point.price2, ma.get("ma200_2")),
            "correlations": {w: correlations[w][i] for w in windows},
        })
    return rows


def build_analysis_records(
    series1: Sequence[RawPoint],
    series2: Sequence[RawPoint],
    windows: Sequence[int] = CORRELATION_WINDOWS,
    include_moving_averages: bool = True,
    persian_digits: bool = False,
    date_cache: Optional[ConversionCache] = None,
) -> List[AnalysisRecord]:
    """
    Build one AnalysisRecord per date common to both series.

    Args:
        series1: First instrument's ascending points
        series2: Second instrument's ascending points
        windows: Rolling correlation window sizes
        include_moving_averages: Compute MA100/MA200 (and distances) per side
        persian_digits: Render display dates with Persian numerals
        date_cache: Cache for display-date conversions (a fresh one if None)

    Raises:
        InsufficientDataError: If fewer aligned dates exist than the smallest window
        InvalidDateError: If an aligned date cannot be converted
    """
    windows = normalize_windows(windows)
    merged = align_by_date(series1, series2)
    _require_history(len(merged), windows)

    rows = _base_fields(
        series1, series2, merged, windows, include_moving_averages, persian_digits,
        date_cache if date_cache is not None else ConversionCache(),
    )
    logger.debug(f"Built {len(rows)} analysis record(s) for windows {list(windows)}")
    return [AnalysisRecord(**row) for row in rows]


def build_ratio_records(
    series1: Sequence[RawPoint],
    series2: Sequence[RawPoint],
    windows: Sequence[int] = CORRELATION_WINDOWS,
    include_moving_averages: bool = True,
    persian_digits: bool = False,
    date_cache: Optional[ConversionCache] = None,
) -> List[RatioAnalysisRecord]:
    """
    Build ratio-mode records: base fields plus price1/price2, its MAs and distances.

    The ratio is 0.0 where price2 is zero. Ratio MAs run over the aligned
    ratio series, so their warm-up counts common trading days.

    Raises:
        InsufficientDataError: If fewer aligned dates exist than the smallest window
    """
    windows = normalize_windows(windows)
    merged = align_by_date(series1, series2)
    _require_history(len(merged), windows)

    ratios = [m.price1 / m.price2 if m.price2 != 0 else 0.0 for m in merged]
    ratio_ma100 = SimpleMovingAverage(MA_SHORT_WINDOW).calculate(ratios)
    ratio_ma200 = SimpleMovingAverage(MA_LONG_WINDOW).calculate(ratios)

    rows = _base_fields(
        series1, series2, merged, windows, include_moving_averages, persian_digits,
        date_cache if date_cache is not None else ConversionCache(),
    )
    records = []
    for row, ratio, ma100, ma200 in zip(rows, ratios, ratio_ma100, ratio_ma200):
        records.append(RatioAnalysisRecord(
            **row,
            ratio=ratio,
            ma100_ratio=ma100,
            ma200_ratio=ma200,
            dist_ma100_ratio=rounded_distance(ratio, ma100),
            dist_ma200_ratio=rounded_distance(ratio, ma200),
        ))
    logger.debug(f"Built {len(records)} ratio record(s) for windows {list(windows)}")
    return records


def run_analysis(
    series1: Sequence[RawPoint],
    series2: Sequence[RawPoint],
    config: AnalysisConfig,
    date_cache: Optional[ConversionCache] = None,
) -> List[AnalysisRecord]:
    """
    Run the pipeline described by config and apply its date range.

    The range filters output only; warm-up uses the whole history, and the
    insufficiency check applies before filtering.
    """
    build = build_ratio_records if config.ratio_mode else build_analysis_records
    records = build(
        series1,
        series2,
        windows=config.windows,
        include_moving_averages=config.include_moving_averages,
        persian_digits=config.persian_digits,
        date_cache=date_cache,
    )
    start_key, end_key = config.gregorian_range()
    if start_key is None and end_key is None:
        return records
    filtered = filter_by_date_range(records, start_key, end_key)
    logger.debug(f"Date range {start_key}..{end_key} kept {len(filtered)}/{len(records)} record(s)")
    return filtered
