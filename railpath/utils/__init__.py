"""
Utility helpers for geometry and data preparation.
"""

from .geometry import (
    Coordinate,
    distance,
    path_length,
    calculate_angle,
    haversine_km,
    as_coordinate,
)
from .routing_guide_parser import (
    parse_routing_guide,
    parse_routing_guide_file,
    write_station_graph,
)

__all__ = [
    'Coordinate',
    'distance',
    'path_length',
    'calculate_angle',
    'haversine_km',
    'as_coordinate',
    'parse_routing_guide',
    'parse_routing_guide_file',
    'write_station_graph',
]
