"""
Centralized default values for the analysis pipeline.

This is the SINGLE SOURCE OF TRUTH for window sizes, rounding and
vendor export markers. All modules should import from here.
"""

# Moving average windows (trading days)
MA_SHORT_WINDOW = 100
MA_LONG_WINDOW = 200

# Rolling correlation windows offered by default (trading days)
CORRELATION_WINDOWS = (30, 60, 90)

# Output rounding
CORRELATION_DECIMALS = 4
DISTANCE_DECIMALS = 2

# Vendor export column markers (header cells contain these)
DATE_COLUMN_MARKER = "<DTYYYYMMDD>"
CLOSE_COLUMN_MARKER = "<CLOSE>"
TICKER_COLUMN_MARKER = "<TICKER>"
UNKNOWN_INSTRUMENT_NAME = "نامشخص"

# Supported Jalali years (roughly Gregorian 1621-2121)
JALALI_MIN_YEAR = 1000
JALALI_MAX_YEAR = 1500

# Deviation regime (hysteresis around the 100-day average)
REGIME_ENTRY_THRESHOLD = 10.0  # % above/below MA to enter CEILING/FLOOR
REGIME_EXIT_THRESHOLD = 7.0  # % back inside to return to NORMAL
REGIME_CONFIRM_DAYS = 3  # consecutive days needed for any transition

# Correlation snapshot windows and thresholds
SNAPSHOT_SHORT_WINDOW = 60
SNAPSHOT_LONG_WINDOW = 365
HIGH_CORRELATION_THRESHOLD = 0.5
