"""
Overpass API manager for fetching railway track geometry.

This module handles all communication with the Overpass API, including
rate limiting, retries, error handling and parsing ways into segments.
"""

import asyncio
import aiohttp
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from ..core.interfaces.i_geometry_source import IGeometrySource, GeometrySourceError
from ..core.models.segment import Segment, BoundingBox
from ..managers.config_manager import OverpassConfig

logger = logging.getLogger(__name__)


class APIException(GeometrySourceError):
    """Base exception for API-related errors."""

    pass


class NetworkException(APIException):
    """Exception for network-related errors."""

    pass


class RateLimitException(APIException):
    """Exception for rate limit exceeded errors."""

    pass


class ServerBusyException(APIException):
    """Exception for Overpass gateway timeouts under load."""

    pass


class RateLimiter:
    """Rate limiter for API calls to respect the public Overpass quota."""

    def __init__(self, calls_per_minute: int):
        """
        Initialize rate limiter.

        Args:
            calls_per_minute: Maximum calls allowed per minute
        """
        self.calls_per_minute = calls_per_minute
        self.calls: List[datetime] = []
        self.lock = asyncio.Lock()

    async def wait_if_needed(self):
        """Wait if rate limit would be exceeded."""
        async with self.lock:
            now = datetime.now()
            self.calls = [
                call_time
                for call_time in self.calls
                if now - call_time < timedelta(minutes=1)
            ]

            if len(self.calls) >= self.calls_per_minute:
                oldest_call = min(self.calls)
                wait_time = 60 - (now - oldest_call).total_seconds()
                if wait_time > 0:
                    logger.info(f"Rate limit reached, waiting {wait_time:.1f} seconds")
                    await asyncio.sleep(wait_time)

            self.calls.append(now)


def build_railway_query(bbox: BoundingBox, config: OverpassConfig) -> str:
    """Overpass QL for mainline railway ways in a bounding box, with full geometry."""
    return (
        f"[out:json][timeout:{config.query_timeout_seconds}];\n"
        f"(\n"
        f"  way[\"railway\"=\"rail\"][\"service\"!~\"{config.excluded_services}\"]({bbox.as_overpass()});\n"
        f");\n"
        f"out geom;"
    )


def _way_coordinates(geometry: Any) -> List[Tuple[float, float]]:
    """(lat, lng) pairs of a way's geometry, skipping points that are missing or not numeric."""
    coords = []
    for point in geometry:
        try:
            coords.append((float(point["lat"]), float(point["lon"])))
        except (KeyError, TypeError, ValueError):
            continue
    return coords


def parse_ways(data: Dict[str, Any]) -> List[Segment]:
    """
    Convert an Overpass JSON response into segments.

    Ways without geometry or with fewer than two usable points are dropped.
    """
    segments = []
    for element in data.get("elements", []):
        if element.get("type", "way") != "way":
            continue

        coords = _way_coordinates(element.get("geometry") or [])
        if len(coords) < 2:
            continue

        segments.append(Segment(id=str(element.get("id", len(segments))), coordinates=tuple(coords)))

    return segments


class OverpassAPIManager(IGeometrySource):
    """
    Handles Overpass API communications with rate limiting and error handling.

    Use as an async context manager so the HTTP session is opened and closed
    around a batch of requests.
    """

    def __init__(self, config: Optional[OverpassConfig] = None):
        """
        Initialize API manager.

        Args:
            config: Overpass endpoint and retry settings
        """
        self.config = config or OverpassConfig()
        self.session: Optional[aiohttp.ClientSession] = None
        self.rate_limiter = RateLimiter(self.config.rate_limit_per_minute)

    async def __aenter__(self):
        """Async context manager entry."""
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        self.session = aiohttp.ClientSession(
            timeout=timeout, headers={"User-Agent": self.config.user_agent}
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session:
            await self.session.close()
            self.session = None

    async def fetch_segments(self, bbox: BoundingBox) -> List[Segment]:
        """
        Fetch mainline railway segments inside a bounding box.

        Args:
            bbox: Region to query

        Returns:
            List[Segment]: Track segments with at least two points each

        Raises:
            APIException: For API-related errors
            NetworkException: For network-related errors after all retries
        """
        await self.rate_limiter.wait_if_needed()

        query = build_railway_query(bbox, self.config)

        for attempt in range(self.config.max_retries):
            try:
                if not self.session:
                    raise NetworkException("Session not initialized")

                logger.info(
                    f"Fetching rail geometry for {bbox.as_overpass()} "
                    f"(attempt {attempt + 1}/{self.config.max_retries})"
                )

                async with self.session.post(self.config.base_url, data={"data": query}) as response:
                    if response.status == 200:
                        try:
                            data = await response.json(content_type=None)
                            segments = parse_ways(data)
                        except (ValueError, TypeError, AttributeError) as e:
                            raise APIException(f"Invalid Overpass response: {e}")
                        logger.info(f"Fetched {len(segments)} railway segments")
                        return segments
                    elif response.status == 429:
                        raise RateLimitException("Overpass rate limit exceeded")
                    elif response.status == 504:
                        raise ServerBusyException("Overpass server too busy")
                    else:
                        error_text = await response.text()
                        raise APIException(f"Overpass API error {response.status}: {error_text}")

            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt == self.config.max_retries - 1:
                    raise NetworkException(f"Network error: {str(e)}")

                wait_time = 2**attempt  # Exponential backoff
                logger.warning(
                    f"Network error on attempt {attempt + 1}, retrying in {wait_time}s: {e}"
                )
                await asyncio.sleep(wait_time)

        return []
