"""
Pair analysis: record assembly, ratio mode, distance-from-trend, regimes.

Composes data alignment, moving averages and rolling correlation into
the per-date record stream consumed by charts and exports.
"""
from .config import AnalysisConfig
from .config_loader import load_config_from_yaml
from .builder import build_analysis_records, build_ratio_records, run_analysis
from .distance import percent_distance, rounded_distance, DistanceFromAverage
from .regime import (
    classify_regimes,
    regimes_for_prices,
    correlation_snapshot,
    CorrelationSnapshot,
)
from .export import records_to_frame, write_records

__all__ = [
    "AnalysisConfig",
    "load_config_from_yaml",
    "build_analysis_records",
    "build_ratio_records",
    "run_analysis",
    "percent_distance",
    "rounded_distance",
    "DistanceFromAverage",
    "classify_regimes",
    "regimes_for_prices",
    "correlation_snapshot",
    "CorrelationSnapshot",
    "records_to_frame",
    "write_records",
]
