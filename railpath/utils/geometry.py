"""
Planar geometry helpers.

Every path-construction distance is measured in degree space (plain Euclidean
distance on latitude/longitude), so thresholds such as 0.001 mean roughly
100m. Haversine is only used for human-facing kilometre distances.
"""

import math
from typing import Iterable, Sequence, Tuple

Coordinate = Tuple[float, float]  # (latitude, longitude)

EARTH_RADIUS_KM = 6371.0


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two (lat, lng) points in degrees."""
    d_lat = p2[0] - p1[0]
    d_lng = p2[1] - p1[1]
    return math.sqrt(d_lat * d_lat + d_lng * d_lng)


def path_length(points: Sequence[Sequence[float]]) -> float:
    """Sum of consecutive point distances along a polyline."""
    total = 0.0
    for i in range(1, len(points)):
        total += distance(points[i - 1], points[i])
    return total


def calculate_angle(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """
    Interior angle at vertex b of the polyline a -> b -> c, in degrees.

    180 means the polyline carries straight on, 0 means it folds back onto
    itself. A zero-length leg has no defined angle and reports 180.
    """
    ba = (a[0] - b[0], a[1] - b[1])
    bc = (c[0] - b[0], c[1] - b[1])

    mag_ba = math.sqrt(ba[0] * ba[0] + ba[1] * ba[1])
    mag_bc = math.sqrt(bc[0] * bc[0] + bc[1] * bc[1])
    if mag_ba == 0 or mag_bc == 0:
        return 180.0

    cos_angle = (ba[0] * bc[0] + ba[1] * bc[1]) / (mag_ba * mag_bc)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.degrees(math.acos(cos_angle))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(d_lng / 2) ** 2)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def as_coordinate(point: Iterable[float]) -> Coordinate:
    """Normalise any two-element sequence into a (lat, lng) tuple of floats."""
    lat, lng = point
    return (float(lat), float(lng))
