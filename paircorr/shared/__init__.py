"""
Shared types, errors and defaults for the analysis pipeline.

This module provides:
- Value objects passed between stages (RawPoint, MergedPoint, AnalysisRecord)
- Tagged error types (FormatError, InsufficientDataError, InvalidDateError)
- Centralized default values
"""
from .types import (
    RawPoint,
    MergedPoint,
    ParsedExport,
    AnalysisRecord,
    RatioAnalysisRecord,
    Regime,
)
from .errors import (
    ErrorKind,
    PairAnalysisError,
    FormatError,
    InsufficientDataError,
    InvalidDateError,
)
from .defaults import (
    MA_SHORT_WINDOW, MA_LONG_WINDOW,
    CORRELATION_WINDOWS, CORRELATION_DECIMALS, DISTANCE_DECIMALS,
)

__all__ = [
    'RawPoint',
    'MergedPoint',
    'ParsedExport',
    'AnalysisRecord',
    'RatioAnalysisRecord',
    'Regime',
    'ErrorKind',
    'PairAnalysisError',
    'FormatError',
    'InsufficientDataError',
    'InvalidDateError',
    'MA_SHORT_WINDOW', 'MA_LONG_WINDOW',
    'CORRELATION_WINDOWS', 'CORRELATION_DECIMALS', 'DISTANCE_DECIMALS',
]
