"""
In-memory LRU cache implementation.

This module provides a thread-safe in-memory cache with LRU eviction and
per-entry expiry for computed route geometries.
"""

from typing import Any, Dict, Optional, Tuple
from collections import OrderedDict
import time
import threading
import logging


class MemoryCache:
    """Thread-safe LRU cache with TTL support."""

    def __init__(self, max_size: int = 500, default_ttl: int = 3600):
        """
        Initialize memory cache.

        Args:
            max_size: Maximum number of items to store
            default_ttl: Default time-to-live in seconds
        """
        self.max_size = max_size
        self.default_ttl = default_ttl
        self._entries: "OrderedDict[str, Tuple[Any, float]]" = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self.logger = logging.getLogger(__name__)

    def get(self, key: str) -> Optional[Any]:
        """
        Get item from cache.

        Returns:
            Cached value or None if not found/expired
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, expires_at = entry
            if time.time() >= expires_at:
                del self._entries[key]
                self._misses += 1
                return None

            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Put item in cache, replacing any previous value for the key.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time-to-live in seconds (uses default if None)
        """
        with self._lock:
            expires_at = time.time() + (self.default_ttl if ttl is None else ttl)
            self._entries[key] = (value, expires_at)
            self._entries.move_to_end(key)

            while len(self._entries) > self.max_size:
                evicted_key, _ = self._entries.popitem(last=False)
                self.logger.debug(f"Evicted cache key: {evicted_key}")

    def delete(self, key: str) -> bool:
        """Delete item from cache. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Clear all items and statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def cleanup_expired(self) -> int:
        """
        Remove expired items from cache.

        Returns:
            Number of items removed
        """
        with self._lock:
            now = time.time()
            expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
            for key in expired:
                del self._entries[key]

            if expired:
                self.logger.debug(f"Cleaned up {len(expired)} expired cache entries")
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total_requests = self._hits + self._misses
            return {
                'size': len(self._entries),
                'max_size': self.max_size,
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': (self._hits / total_requests) if total_requests > 0 else 0,
            }
