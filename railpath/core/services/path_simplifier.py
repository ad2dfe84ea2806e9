"""
Path Simplifier

Thins out near-duplicate points and drops vertices where the path folds
back on itself, which usually marks a jump onto the wrong track.
"""

import logging
from typing import List, Optional, Sequence

from ...managers.config_manager import GeometryConfig
from ...utils.geometry import Coordinate, as_coordinate, calculate_angle, distance


class PathSimplifier:
    """Two-pass path cleanup: spacing, then sharp turns."""

    def __init__(self, config: Optional[GeometryConfig] = None):
        self.config = config or GeometryConfig()
        self.logger = logging.getLogger(__name__)

    def remove_close_points(self, path: List[Coordinate], min_spacing: float) -> List[Coordinate]:
        """
        Keep the endpoints and every point further than ``min_spacing`` from
        the last kept one. The final point replaces a kept interior point
        that lies within ``min_spacing`` of it.
        """
        simplified = [path[0]]
        for point in path[1:-1]:
            if distance(simplified[-1], point) > min_spacing:
                simplified.append(point)

        if len(simplified) > 1 and distance(simplified[-1], path[-1]) <= min_spacing:
            simplified[-1] = path[-1]
        else:
            simplified.append(path[-1])
        return simplified

    def remove_sharp_turns(self, path: List[Coordinate]) -> List[Coordinate]:
        """
        Replace any vertex whose interior angle is below ``sharp_turn_angle``
        with the point that follows it.
        """
        result = [path[0], path[1]]

        for point in path[2:]:
            angle = calculate_angle(result[-2], result[-1], point)
            if angle < self.config.sharp_turn_angle:
                result[-1] = point
            else:
                result.append(point)

        return result

    def simplify(self, path: Sequence[Sequence[float]], min_spacing: Optional[float] = None) -> List[Coordinate]:
        """
        Simplify a path.

        Args:
            path: Coordinates to clean up
            min_spacing: Minimum distance between kept points; defaults to
                the configured ``min_spacing``

        Returns:
            The cleaned path, which keeps the first and last input points
        """
        if min_spacing is None:
            min_spacing = self.config.min_spacing

        points = [as_coordinate(point) for point in path]
        if len(points) <= 2:
            return points

        simplified = self.remove_close_points(points, min_spacing)

        if len(simplified) >= 3:
            simplified = self.remove_sharp_turns(simplified)

        if len(simplified) < len(points):
            self.logger.debug(f"Simplified path from {len(points)} to {len(simplified)} points")
        return simplified
