"""
Core Models Package

Data models for stations, track segments, journeys and the railway graph.
"""

from .station import Station
from .segment import Segment, BoundingBox
from .journey import Journey, JourneyLeg
from .railway_graph import RailwayGraph, GraphNode, Edge, SnapKey

__all__ = [
    'Station',
    'Segment',
    'BoundingBox',
    'Journey',
    'JourneyLeg',
    'RailwayGraph',
    'GraphNode',
    'Edge',
    'SnapKey',
]
