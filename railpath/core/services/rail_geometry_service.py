"""
Rail Geometry Service

Derives a plausible track path between stations from raw railway segments:
graph search first, greedy chaining as fallback, then validation and
simplification. Any failure ends in a straight line, never an exception.
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

import aiohttp

from .greedy_path_assembler import GreedyPathAssembler
from .path_simplifier import PathSimplifier
from .path_validator import PathValidator
from .pathfinding_algorithm import ShortestPathFinder
from .segment_graph_builder import SegmentGraphBuilder
from ..interfaces.i_geometry_source import IGeometrySource, GeometrySourceError
from ..models.journey import Journey
from ..models.segment import Segment, BoundingBox
from ..models.station import Station
from ...cache.geometry_cache import GeometryCache
from ...managers.config_manager import GeometryConfig
from ...utils.geometry import Coordinate, as_coordinate


class RailGeometryService:
    """Computes and caches railway geometry for station pairs and journeys."""

    def __init__(self, geometry_source: Optional[IGeometrySource] = None,
                 cache: Optional[GeometryCache] = None,
                 config: Optional[GeometryConfig] = None):
        """
        Initialize the rail geometry service.

        Args:
            geometry_source: Supplier of raw track segments; without one every
                request gets a straight line
            cache: Station-pair geometry cache, optional
            config: Geometry thresholds
        """
        self.geometry_source = geometry_source
        self.cache = cache
        self.config = config or GeometryConfig()
        self.logger = logging.getLogger(__name__)

        self.graph_builder = SegmentGraphBuilder(self.config)
        self.path_finder = ShortestPathFinder()
        self.greedy_assembler = GreedyPathAssembler(self.config)
        self.validator = PathValidator(self.config)
        self.simplifier = PathSimplifier(self.config)

    def find_best_path(self, segments: Iterable[Segment], origin: Sequence[float],
                       destination: Sequence[float]) -> List[Coordinate]:
        """
        Build the most plausible track path between two points.

        Args:
            segments: Raw segments for the region around the points
            origin: (lat, lng) start point, kept verbatim as the first point
            destination: (lat, lng) end point, kept verbatim as the last point

        Returns:
            At least two coordinates; exactly ``[origin, destination]`` when
            the segments cannot support a better path
        """
        if origin is None or destination is None:
            raise ValueError("Both origin and destination are required")

        origin = as_coordinate(origin)
        destination = as_coordinate(destination)
        straight_line = [origin, destination]

        if origin == destination:
            return straight_line

        corridor = BoundingBox.around(origin, destination, self.config.corridor_margin)
        corridor_segments = corridor.filter_segments(segments or [])
        if not corridor_segments:
            self.logger.info("No railway segments near route, using straight line")
            return straight_line

        graph = self.graph_builder.build(corridor_segments)
        edges = self.path_finder.find_node_path(graph, origin, destination)

        if not edges:
            self.logger.info("Graph search found no connected path, trying greedy segment following")
            path = self.greedy_assembler.assemble_greedy(corridor_segments, origin, destination)
        else:
            path = self.path_finder.build_coord_path(edges, origin, destination)

        validated = self.validator.validate(path, origin, destination)
        return self.simplifier.simplify(validated, self.config.min_spacing)

    async def _fetch_segments(self, bbox: BoundingBox) -> Optional[List[Segment]]:
        """Segments from the source, or None if the source is missing or failed."""
        if self.geometry_source is None:
            return None

        try:
            return await self.geometry_source.fetch_segments(bbox)
        except (GeometrySourceError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.warning(f"Failed to fetch rail geometry: {e}")
            return None

    async def get_route_geometry(self, origin: Station, destination: Station) -> List[Coordinate]:
        """
        Railway geometry between two stations, served from cache when possible.

        Args:
            origin: Departure station
            destination: Arrival station

        Returns:
            Coordinates from origin to destination, at least two points
        """
        if origin is None or destination is None:
            raise ValueError("Both origin and destination stations are required")

        if self.cache is not None:
            cached = self.cache.get(origin.code, destination.code)
            if cached:
                self.logger.debug(f"Using cached geometry for {origin.code}-{destination.code}")
                return cached

        bbox = BoundingBox.around(origin.coordinates, destination.coordinates, self.config.query_padding)
        segments = await self._fetch_segments(bbox)

        if segments is None:
            return [origin.coordinates, destination.coordinates]

        geometry = self.find_best_path(segments, origin.coordinates, destination.coordinates)

        if self.cache is not None:
            self.cache.put(origin.code, destination.code, geometry)

        return geometry

    async def get_journey_geometry(self, journey: Journey) -> List[Coordinate]:
        """
        Concatenated geometry for every leg of a journey.

        Legs are computed concurrently. Each leg after the first loses its
        first point, which duplicates the previous leg's last point.
        """
        if journey is None or not journey.legs:
            return []

        leg_geometries = await asyncio.gather(*(
            self.get_route_geometry(leg.origin, leg.destination) for leg in journey.legs
        ))

        all_coords: List[Coordinate] = []
        for leg_geometry in leg_geometries:
            if all_coords:
                all_coords.extend(leg_geometry[1:])
            else:
                all_coords.extend(leg_geometry)

        self.logger.debug(f"Journey geometry: {len(journey.legs)} legs, {len(all_coords)} points")
        return all_coords

    def clear_cache(self) -> None:
        """Forget every cached geometry."""
        if self.cache is not None:
            self.cache.clear()
