"""
Geometry Source Interface

Interface for anything that can supply raw railway track segments for a
region.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.segment import Segment, BoundingBox


class GeometrySourceError(Exception):
    """Raised by a geometry source that could not supply segments."""

    pass


class IGeometrySource(ABC):
    """Interface for railway segment providers."""

    @abstractmethod
    async def fetch_segments(self, bbox: BoundingBox) -> List[Segment]:
        """
        Fetch mainline track segments intersecting a bounding box.

        Args:
            bbox: Region to query

        Returns:
            List of Segment objects, possibly empty

        Raises:
            GeometrySourceError: If the source failed; callers treat this
                as "no segments"
        """
        pass
