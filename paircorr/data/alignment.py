"""
Inner join of two price series on their trading dates.
"""
import logging
from typing import Dict, List, Sequence

from ..shared.types import MergedPoint, RawPoint


logger = logging.getLogger(__name__)


def clean_date_key(date: str) -> str:
    """Normalize "2024-03-20" or "2024-03-20T00:00:00" style dates to "20240320"."""
    return date.replace("-", "")[:8]


def align_by_date(series1: Sequence[RawPoint], series2: Sequence[RawPoint]) -> List[MergedPoint]:
    """
    Keep only dates present in both series, in series1 order.

    Output order is not corrected if series1 is unsorted; callers pass
    ingestor output, which is already ascending. An empty intersection is
    returned as an empty list.

    Args:
        series1: First instrument's points (drives output order)
        series2: Second instrument's points (looked up by date)

    Returns:
        List of MergedPoint with cleaned YYYYMMDD keys
    """
    lookup: Dict[str, float] = {clean_date_key(p.date): p.close for p in series2}
    merged = []
    for point in series1:
        key = clean_date_key(point.date)
        if key in lookup:
            merged.append(MergedPoint(date=key, price1=point.close, price2=lookup[key]))

    if not merged and series1 and series2:
        logger.warning(
            f"No common trading dates between series ({len(series1)} and {len(series2)} points)"
        )
    else:
        logger.debug(f"Aligned {len(merged)} common date(s) from {len(series1)}/{len(series2)} points")
    return merged
