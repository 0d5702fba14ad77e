"""
Value objects passed between pipeline stages.

All entities are created fresh per calculation and never mutated; each
stage consumes the previous stage's output and returns new objects.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


@dataclass(frozen=True)
class RawPoint:
    """One closing price keyed by an 8-digit Gregorian date (YYYYMMDD)."""
    date: str
    close: float


@dataclass(frozen=True)
class MergedPoint:
    """A trading date present in both series, with each side's close."""
    date: str
    price1: float
    price2: float


@dataclass(frozen=True)
class ParsedExport:
    """Result of parsing a vendor export: ascending points plus instrument name."""
    points: List[RawPoint]
    name: str


@dataclass(frozen=True)
class AnalysisRecord:
    """
    One output row per aligned trading date.

    Windowed statistics are None during their warm-up period, which keeps
    "no signal yet" distinct from a computed zero.
    """
    date: str  # Gregorian key YYYYMMDD
    display_date: str  # Jalali YYYY/MM/DD
    timestamp: int  # epoch millis, local midnight of the Gregorian date
    price1: float
    price2: float
    ma100_1: Optional[float] = None
    ma100_2: Optional[float] = None
    ma200_1: Optional[float] = None
    ma200_2: Optional[float] = None
    dist_ma100_1: Optional[float] = None
    dist_ma100_2: Optional[float] = None
    dist_ma200_1: Optional[float] = None
    dist_ma200_2: Optional[float] = None
    correlations: Dict[int, Optional[float]] = field(default_factory=dict)


@dataclass(frozen=True)
class RatioAnalysisRecord(AnalysisRecord):
    """Analysis record that also carries the price1/price2 ratio series and its trend."""
    ratio: float = 0.0
    ma100_ratio: Optional[float] = None
    ma200_ratio: Optional[float] = None
    dist_ma100_ratio: Optional[float] = None
    dist_ma200_ratio: Optional[float] = None


class Regime(Enum):
    """Where a price sits relative to its moving average, with hysteresis."""
    NORMAL = "normal"
    CEILING = "ceiling"
    FLOOR = "floor"
