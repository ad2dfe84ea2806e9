"""
Geometry cache keyed by station pair.

Coordinates computed for an origin/destination pair are kept in memory and
on disk for a retention window (seven days by default). Expired or missing
entries are misses and the caller recomputes.
"""

import logging
import threading
import time
from typing import Any, Dict, List, Optional, Sequence

from .disk_cache import DiskCache
from .memory_cache import MemoryCache
from ..managers.config_manager import CacheConfig
from ..utils.geometry import Coordinate, as_coordinate


class CacheKey:
    """Helper class for generating consistent cache keys."""

    @staticmethod
    def geometry_key(origin_code: str, destination_code: str) -> str:
        """Cache key for the geometry between two stations."""
        return f"{origin_code}-{destination_code}"


class GeometryCache:
    """Two-level (memory, then disk) cache of route coordinates."""

    def __init__(self, config: Optional[CacheConfig] = None):
        """
        Initialize the geometry cache.

        Args:
            config: Cache settings; the disk level lives in ``config.cache_dir``
        """
        self.config = config or CacheConfig()
        self.ttl = self.config.ttl_seconds
        self.logger = logging.getLogger(__name__)

        self.memory_cache = MemoryCache(max_size=self.config.memory_max_size, default_ttl=self.ttl)
        self.disk_cache = DiskCache(self.config.cache_dir, max_size_mb=self.config.disk_max_size_mb)

        self._stats = {'memory_hits': 0, 'disk_hits': 0, 'misses': 0}
        self._stats_lock = threading.RLock()

    def _record(self, outcome: str) -> None:
        with self._stats_lock:
            self._stats[outcome] += 1

    def get(self, origin_code: str, destination_code: str) -> Optional[List[Coordinate]]:
        """
        Look up cached coordinates for a station pair.

        A disk hit is promoted to memory for the remainder of its original
        lifetime, so every entry expires ``ttl`` seconds after it was written.

        Returns:
            The coordinate list, or None on a miss
        """
        key = CacheKey.geometry_key(origin_code, destination_code)

        value = self.memory_cache.get(key)
        if value is not None:
            self._record('memory_hits')
            return list(value)

        hit = self.disk_cache.get_with_expiry(key)
        if hit is not None:
            value, expiry = hit
            try:
                coords = [as_coordinate(point) for point in value]
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Discarding malformed cached geometry for {key}: {e}")
                self.disk_cache.delete(key)
            else:
                self._record('disk_hits')
                remaining = expiry - time.time()
                if remaining > 0:
                    self.memory_cache.put(key, tuple(coords), ttl=remaining)
                return coords

        self._record('misses')
        return None

    def put(self, origin_code: str, destination_code: str, coordinates: Sequence[Sequence[float]]) -> None:
        """Store coordinates for a station pair; a later write replaces an earlier one."""
        key = CacheKey.geometry_key(origin_code, destination_code)
        coords = [as_coordinate(point) for point in coordinates]

        self.memory_cache.put(key, tuple(coords), ttl=self.ttl)
        self.disk_cache.put(key, [list(point) for point in coords], ttl=self.ttl)
        self.logger.debug(f"Cached {len(coords)} points for {key}")

    def delete(self, origin_code: str, destination_code: str) -> None:
        key = CacheKey.geometry_key(origin_code, destination_code)
        self.memory_cache.delete(key)
        self.disk_cache.delete(key)

    def clear(self) -> None:
        """Clear both cache levels and reset statistics."""
        self.memory_cache.clear()
        self.disk_cache.clear()
        with self._stats_lock:
            self._stats = {'memory_hits': 0, 'disk_hits': 0, 'misses': 0}

    def cleanup_expired(self) -> int:
        """Drop expired entries from both levels."""
        return self.memory_cache.cleanup_expired() + self.disk_cache.cleanup_expired()

    def get_stats(self) -> Dict[str, Any]:
        """Get hit/miss statistics across both levels."""
        with self._stats_lock:
            stats = dict(self._stats)
        total_requests = sum(stats.values())
        hits = stats['memory_hits'] + stats['disk_hits']
        return {
            **stats,
            'total_requests': total_requests,
            'hit_rate': hits / max(total_requests, 1),
            'memory': self.memory_cache.get_stats(),
            'disk': self.disk_cache.get_stats(),
        }
