"""
Memoization for repeated calendar conversions.

Each cache is an explicit object owned by its caller; there is no
module-level state. Entries optionally expire after ``ttl_seconds``.
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass(frozen=True)
class CacheEntry:
    """A cached conversion result and the clock reading when it was stored."""
    value: str
    timestamp: float


class ConversionCache:
    """
    Get-or-compute cache for string conversions (e.g. date key -> display date).

    Args:
        ttl_seconds: Entry lifetime; None means entries never expire
        clock: Monotonic clock, injectable for tests
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be > 0, got {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return self.ttl_seconds is None or now - entry.timestamp < self.ttl_seconds

    def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None or not self._is_fresh(entry, self._clock()):
            return None
        return entry.value

    def get_or_compute(self, key: str, compute: Callable[[str], str]) -> str:
        """Return the cached value for key, computing and storing it on a miss."""
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None and self._is_fresh(entry, now):
            self.hits += 1
            return entry.value
        self.misses += 1
        value = compute(key)
        self._entries[key] = CacheEntry(value=value, timestamp=now)
        return value

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> Dict[str, int]:
        """Entry count and hit/miss counters."""
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}

    def __len__(self) -> int:
        return len(self._entries)
