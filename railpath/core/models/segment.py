"""
Segment Model

Raw railway track geometry as supplied by a geometry source, plus the
bounding boxes used to query for it and to prefilter it.
"""

from dataclasses import dataclass
from typing import Tuple, Sequence, Iterable, Dict, Any

from ...utils.geometry import Coordinate, as_coordinate, path_length


@dataclass(frozen=True)
class Segment:
    """
    One contiguous piece of track: an identifier and a directed sequence of
    at least two coordinates.
    """

    id: str
    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self):
        """Normalise coordinates to tuples and validate the segment."""
        coords = tuple(as_coordinate(point) for point in self.coordinates)
        if len(coords) < 2:
            raise ValueError(f"Segment {self.id} must have at least 2 coordinates")
        object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'coordinates', coords)

    @property
    def start(self) -> Coordinate:
        """First coordinate of the segment."""
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        """Last coordinate of the segment."""
        return self.coordinates[-1]

    @property
    def midpoint(self) -> Coordinate:
        """The middle coordinate of the sequence (not the geometric centre)."""
        return self.coordinates[len(self.coordinates) // 2]

    @property
    def length(self) -> float:
        """Cumulative degree-space length of the segment."""
        return path_length(self.coordinates)

    def reversed(self) -> Tuple[Coordinate, ...]:
        """Coordinates in the opposite direction of travel."""
        return tuple(reversed(self.coordinates))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Segment':
        """Create a Segment from an ``{id, coordinates}`` record."""
        return cls(id=data["id"], coordinates=tuple(data["coordinates"]))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned latitude/longitude box."""

    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float

    def __post_init__(self):
        if self.min_lat > self.max_lat or self.min_lng > self.max_lng:
            raise ValueError("Bounding box minimum must not exceed maximum")

    @classmethod
    def around(cls, start: Sequence[float], end: Sequence[float], margin: float) -> 'BoundingBox':
        """Box spanning two points, expanded by ``margin`` degrees on every side."""
        return cls(
            min_lat=min(start[0], end[0]) - margin,
            min_lng=min(start[1], end[1]) - margin,
            max_lat=max(start[0], end[0]) + margin,
            max_lng=max(start[1], end[1]) + margin,
        )

    def contains(self, point: Sequence[float]) -> bool:
        """Check if a point lies inside the box (edges inclusive)."""
        return (self.min_lat <= point[0] <= self.max_lat and
                self.min_lng <= point[1] <= self.max_lng)

    def intersects_segment(self, segment: Segment) -> bool:
        """Check if at least one of the segment's coordinates is inside the box."""
        return any(self.contains(coord) for coord in segment.coordinates)

    def filter_segments(self, segments: Iterable[Segment]) -> list:
        """Keep the segments that have at least one coordinate inside the box."""
        return [segment for segment in segments if self.intersects_segment(segment)]

    def as_overpass(self) -> str:
        """Format as the ``south,west,north,east`` filter Overpass QL expects."""
        return f"{self.min_lat},{self.min_lng},{self.max_lat},{self.max_lng}"
