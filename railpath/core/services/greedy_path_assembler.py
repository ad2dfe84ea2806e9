"""
Greedy Path Assembler

Fallback path construction for when the graph search cannot connect the
stations. Segments are chained by spatial proximity rather than by shared
graph nodes.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..models.segment import Segment, BoundingBox
from ...managers.config_manager import GeometryConfig
from ...utils.geometry import Coordinate, as_coordinate, distance


@dataclass(frozen=True)
class SegmentCandidate:
    """A corridor segment scored as the next link of a greedy path."""

    index: int
    coordinates: Tuple[Coordinate, ...]
    far_end: Coordinate
    score: float


class GreedyPathAssembler:
    """Chains corridor segments that connect and make progress to the destination."""

    def __init__(self, config: Optional[GeometryConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: Geometry thresholds (corridor margins, connection and
                backtracking tolerances)
        """
        self.config = config or GeometryConfig()
        self.logger = logging.getLogger(__name__)

    def _corridor_segments(self, segments: Iterable[Segment], origin: Sequence[float],
                           destination: Sequence[float], margin: float) -> List[Segment]:
        corridor = BoundingBox.around(origin, destination, margin)
        return corridor.filter_segments(segments)

    def _append_coordinates(self, path: List[Coordinate], coords: Sequence[Coordinate]) -> None:
        """Append a segment's coordinates, merging its first point into the path end if they nearly coincide."""
        for i, coord in enumerate(coords):
            if i == 0 and distance(path[-1], coord) < self.config.junction_tolerance:
                continue
            path.append(coord)

    def _finish(self, path: List[Coordinate], destination: Coordinate) -> List[Coordinate]:
        """Terminate the path at the literal destination, always appended."""
        path.append(destination)
        return path

    def score_candidate(self, index: int, segment: Segment, position: Sequence[float],
                        destination: Sequence[float], dist_to_dest: float) -> Optional[SegmentCandidate]:
        """
        Score one segment as the next link from ``position``.

        Returns None when neither endpoint is within the connection threshold
        or when taking the segment would move further than the backtrack
        tolerance away from the destination. Lower scores are better.
        """
        dist_to_first = distance(position, segment.start)
        dist_to_last = distance(position, segment.end)

        connection = min(dist_to_first, dist_to_last)
        if connection > self.config.connection_threshold:
            return None

        use_reversed = dist_to_last < dist_to_first
        far_end = segment.start if use_reversed else segment.end

        progress = dist_to_dest - distance(far_end, destination)
        if progress < -self.config.backtrack_tolerance:
            return None

        return SegmentCandidate(
            index=index,
            coordinates=segment.reversed() if use_reversed else segment.coordinates,
            far_end=far_end,
            score=connection - progress * 2,
        )

    def assemble_greedy(self, segments: Iterable[Segment], origin: Sequence[float],
                        destination: Sequence[float]) -> List[Coordinate]:
        """
        Greedily follow connected segments from origin toward destination.

        Args:
            segments: Candidate track segments
            origin: Requested (lat, lng) start point
            destination: Requested (lat, lng) end point

        Returns:
            A path that starts at ``origin`` and ends at ``destination``; it
            may be only partially on track if the chain breaks off early
        """
        origin = as_coordinate(origin)
        destination = as_coordinate(destination)

        corridor_segments = self._corridor_segments(
            segments, origin, destination, self.config.corridor_margin
        )
        if not corridor_segments:
            self.logger.debug("No segments in greedy corridor, using straight line")
            return [origin, destination]

        path: List[Coordinate] = [origin]
        used: Set[int] = set()
        position = origin
        dist_to_dest = distance(position, destination)

        while len(used) < len(corridor_segments):
            best: Optional[SegmentCandidate] = None

            for index, segment in enumerate(corridor_segments):
                if index in used:
                    continue
                candidate = self.score_candidate(index, segment, position, destination, dist_to_dest)
                if candidate is not None and (best is None or candidate.score < best.score):
                    best = candidate

            if best is None:
                break

            used.add(best.index)
            self._append_coordinates(path, best.coordinates)

            position = best.far_end
            dist_to_dest = distance(position, destination)

            if dist_to_dest < self.config.arrival_threshold:
                break

        self.logger.debug(
            f"Greedy assembly used {len(used)} of {len(corridor_segments)} corridor segments, "
            f"stopped {dist_to_dest:.4f} from destination"
        )
        return self._finish(path, destination)

    def assemble_by_proximity(self, segments: Iterable[Segment], origin: Sequence[float],
                              destination: Sequence[float]) -> List[Coordinate]:
        """
        Concatenate every corridor segment ordered by how close its middle
        point is to the origin, each oriented toward the current path end.

        Cruder than :meth:`assemble_greedy`: no connectivity or progress
        checks are made, so the result usually needs validating.
        """
        origin = as_coordinate(origin)
        destination = as_coordinate(destination)

        corridor_segments = self._corridor_segments(
            segments, origin, destination, self.config.proximity_corridor_margin
        )
        if not corridor_segments:
            return [origin, destination]

        corridor_segments.sort(key=lambda seg: distance(seg.midpoint, origin))

        path: List[Coordinate] = [origin]
        for segment in corridor_segments:
            to_first = distance(path[-1], segment.start)
            to_last = distance(path[-1], segment.end)
            coords = segment.reversed() if to_last < to_first else segment.coordinates
            self._append_coordinates(path, coords)

        return self._finish(path, destination)
