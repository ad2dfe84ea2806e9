"""
Core Services Package

Path construction services for railway geometry and interchange selection.
"""

from .segment_graph_builder import SegmentGraphBuilder
from .pathfinding_algorithm import ShortestPathFinder
from .greedy_path_assembler import GreedyPathAssembler
from .path_validator import PathValidator
from .path_simplifier import PathSimplifier
from .rail_geometry_service import RailGeometryService
from .interchange_detection_service import InterchangeGraph, MAJOR_HUBS
from .station_service import StationService

__all__ = [
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
