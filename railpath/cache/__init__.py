"""
Caching system for computed route geometry.

This package provides a memory level and a persistent disk level, combined
by GeometryCache under the station-pair key contract.
"""

from .geometry_cache import GeometryCache, CacheKey
from .memory_cache import MemoryCache
from .disk_cache import DiskCache

__all__ = [
    'GeometryCache',
    'CacheKey',
    'MemoryCache',
    'DiskCache',
]
