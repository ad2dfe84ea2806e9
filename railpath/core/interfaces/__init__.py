"""
Core Interfaces Package

Abstract collaborators of the geometry engine.
"""

from .i_geometry_source import IGeometrySource, GeometrySourceError

__all__ = [
    'IGeometrySource',
    'GeometrySourceError',
]
