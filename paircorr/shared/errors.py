"""
Error types raised by the analysis pipeline.

Every error carries an explicit ``kind`` so callers can branch on the
failure mode without inspecting message text. None of these are retried:
the pipeline does no I/O, so the same input always fails the same way.
"""
from enum import Enum
from typing import Sequence


class ErrorKind(Enum):
    """Discriminant for pipeline failures."""
    FORMAT = "format"
    INSUFFICIENT_DATA = "insufficient_data"
    INVALID_DATE = "invalid_date"


class PairAnalysisError(Exception):
    """Base class for all pipeline errors."""
    kind: ErrorKind


class FormatError(PairAnalysisError):
    """Raised when a vendor export lacks required columns."""
    kind = ErrorKind.FORMAT

    def __init__(self, missing_columns: Sequence[str]):
        self.missing_columns = list(missing_columns)
        super().__init__(
            f"Invalid export format: missing required column(s) {', '.join(self.missing_columns)}"
        )


class InsufficientDataError(PairAnalysisError):
    """Raised when aligned history is shorter than the smallest requested window."""
    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient aligned data: {available} common trading day(s), "
            f"at least {required} required"
        )


class InvalidDateError(PairAnalysisError):
    """Raised when a date is malformed or outside the supported calendar range."""
    kind = ErrorKind.INVALID_DATE

    def __init__(self, value: object, reason: str = "malformed date"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")
