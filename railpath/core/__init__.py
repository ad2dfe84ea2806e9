"""
Core Package

Models, interfaces and path-construction services.
"""

from .interfaces import IGeometrySource, GeometrySourceError
from .models import (
    Station, Segment, BoundingBox, Journey, JourneyLeg,
    RailwayGraph, GraphNode, Edge,
)
from .services import (
    SegmentGraphBuilder, ShortestPathFinder, GreedyPathAssembler,
    PathValidator, PathSimplifier, RailGeometryService,
    InterchangeGraph, MAJOR_HUBS, StationService,
)

__all__ = [
    # Interfaces
    'IGeometrySource',
    'GeometrySourceError',

    # Models
    'Station',
    'Segment',
    'BoundingBox',
    'Journey',
    'JourneyLeg',
    'RailwayGraph',
    'GraphNode',
    'Edge',

    # Services
    'SegmentGraphBuilder',
    'ShortestPathFinder',
    'GreedyPathAssembler',
    'PathValidator',
    'PathSimplifier',
    'RailGeometryService',
    'InterchangeGraph',
    'MAJOR_HUBS',
    'StationService',
]
