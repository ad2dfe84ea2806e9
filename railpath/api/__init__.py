"""
API package for external railway data sources.
"""

from .overpass_api_manager import (
    OverpassAPIManager,
    RateLimiter,
    APIException,
    NetworkException,
    RateLimitException,
    ServerBusyException,
    build_railway_query,
    parse_ways,
)

__all__ = [
    'OverpassAPIManager',
    'RateLimiter',
    'APIException',
    'NetworkException',
    'RateLimitException',
    'ServerBusyException',
    'build_railway_query',
    'parse_ways',
]
