"""
Managers Package

Configuration management.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    OverpassConfig,
    GeometryConfig,
    CacheConfig,
    ConfigurationError,
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'OverpassConfig',
    'GeometryConfig',
    'CacheConfig',
    'ConfigurationError',
]
