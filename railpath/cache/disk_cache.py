"""
Disk-based cache implementation for persistent storage.

Each entry is one JSON file holding the value and its expiry time, so the
cache survives restarts and concurrent writers simply replace each other's
files.
"""

import hashlib
import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


class DiskCache:
    """Thread-safe disk-based cache with size management."""

    def __init__(self, cache_dir: str = "cache", max_size_mb: int = 50):
        """
        Initialize disk cache.

        Args:
            cache_dir: Directory for cache files
            max_size_mb: Maximum cache size in megabytes
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.max_size_bytes = max_size_mb * 1024 * 1024
        self.logger = logging.getLogger(__name__)
        self._lock = threading.RLock()

    def _get_cache_file(self, key: str) -> Path:
        """Get cache file path for a key."""
        hashed_key = hashlib.md5(key.encode()).hexdigest()
        return self.cache_dir / f"{hashed_key}.json"

    def get(self, key: str) -> Optional[Any]:
        """
        Get item from disk cache.

        Returns:
            Cached value or None if not found, expired or unreadable
        """
        hit = self.get_with_expiry(key)
        return hit[0] if hit is not None else None

    def get_with_expiry(self, key: str) -> Optional[Tuple[Any, float]]:
        """
        Get item from disk cache together with its absolute expiry time.

        Returns:
            (value, expiry timestamp) or None if not found, expired or unreadable
        """
        cache_file = self._get_cache_file(key)
        with self._lock:
            if not cache_file.exists():
                return None

            entry = self._load_entry(cache_file)
            if entry is None or time.time() >= entry['expiry']:
                self._remove_file(cache_file)
                return None

            return entry.get('value'), entry['expiry']

    def put(self, key: str, value: Any, ttl: int = 3600) -> None:
        """
        Put item in disk cache.

        Args:
            key: Cache key
            value: JSON-serialisable value
            ttl: Time-to-live in seconds
        """
        cache_file = self._get_cache_file(key)
        now = time.time()
        entry = {'key': key, 'value': value, 'created': now, 'expiry': now + ttl}

        with self._lock:
            tmp_path = None
            try:
                self._cleanup_if_needed()
                fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix='.tmp')
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(entry, f)
                os.replace(tmp_path, cache_file)
            except (OSError, TypeError, ValueError) as e:
                self.logger.warning(f"Disk cache write error for key {key}: {e}")
                if tmp_path is not None:
                    self._remove_file(Path(tmp_path))

    def delete(self, key: str) -> bool:
        """Delete item from disk cache. Returns True if a file was removed."""
        with self._lock:
            return self._remove_file(self._get_cache_file(key))

    def clear(self) -> None:
        """Clear all items from disk cache."""
        with self._lock:
            for cache_file in self.cache_dir.glob("*.json"):
                self._remove_file(cache_file)
            self.logger.info("Disk cache cleared")

    def cleanup_expired(self) -> int:
        """
        Remove expired and unreadable entries.

        Returns:
            Number of files removed
        """
        removed = 0
        now = time.time()
        with self._lock:
            for cache_file in self.cache_dir.glob("*.json"):
                entry = self._load_entry(cache_file)
                expired = entry is None or now >= entry['expiry']
                if expired and self._remove_file(cache_file):
                    removed += 1

        if removed:
            self.logger.debug(f"Cleaned up {removed} expired disk cache entries")
        return removed

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            files = list(self.cache_dir.glob("*.json"))
            total_size = sum(f.stat().st_size for f in files)
            return {
                'size': len(files),
                'total_size_bytes': total_size,
                'max_size_mb': self.max_size_bytes / (1024 * 1024),
                'cache_dir': str(self.cache_dir),
            }

    def _load_entry(self, cache_file: Path) -> Optional[Dict[str, Any]]:
        """Read a cache file; None if it is unreadable or not an entry with a numeric expiry."""
        try:
            with open(cache_file, 'r', encoding='utf-8') as f:
                entry = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Disk cache read error for {cache_file.name}: {e}")
            return None

        expiry = entry.get('expiry') if isinstance(entry, dict) else None
        if isinstance(expiry, bool) or not isinstance(expiry, (int, float)):
            self.logger.warning(f"Malformed disk cache entry {cache_file.name}")
            return None

        return entry

    def _remove_file(self, cache_file: Path) -> bool:
        try:
            cache_file.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.warning(f"Error removing cache file {cache_file}: {e}")
            return False

    def _cleanup_if_needed(self) -> None:
        """Evict least recently written files once the size limit is exceeded."""
        files = list(self.cache_dir.glob("*.json"))
        total_size = sum(f.stat().st_size for f in files)
        if total_size <= self.max_size_bytes:
            return

        files.sort(key=lambda f: f.stat().st_mtime)
        for cache_file in files:
            size = cache_file.stat().st_size
            if self._remove_file(cache_file):
                total_size -= size
            # Leave 20% headroom
            if total_size <= self.max_size_bytes * 0.8:
                break

        self.logger.info(f"Disk cache cleanup completed, size reduced to {total_size / (1024 * 1024):.1f}MB")
