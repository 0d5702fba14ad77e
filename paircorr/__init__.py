"""
Pair correlation toolkit for irregularly traded instruments.

Provides unified interfaces for:
- Vendor export ingestion and date alignment
- Moving averages and rolling correlation
- Ratio and distance-from-trend series
- Gregorian/Jalali calendar conversion for display and filtering
"""
