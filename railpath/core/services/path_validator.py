"""
Path Validator

Rejects implausible paths in favour of a straight line.
"""

import logging
from typing import List, Optional, Sequence

from ...managers.config_manager import GeometryConfig
from ...utils.geometry import Coordinate, as_coordinate, distance, path_length


class PathValidator:
    """Checks path length and backtracking against the direct distance."""

    def __init__(self, config: Optional[GeometryConfig] = None):
        self.config = config or GeometryConfig()
        self.logger = logging.getLogger(__name__)

    def count_backtracks(self, path: Sequence[Sequence[float]], destination: Sequence[float]) -> int:
        """Number of steps that move further than the tolerance away from the destination."""
        count = 0
        for i in range(1, len(path)):
            before = distance(path[i - 1], destination)
            after = distance(path[i], destination)
            if after > before + self.config.backtrack_tolerance:
                count += 1
        return count

    def validate(self, path: Optional[Sequence[Sequence[float]]], origin: Sequence[float],
                 destination: Sequence[float]) -> List[Coordinate]:
        """
        Return the path unchanged if plausible, otherwise the straight line.

        A path is implausible when it is longer than ``max_length_ratio``
        times the direct distance, or when more than ``max_backtrack_ratio``
        of its points are backtracking steps.
        """
        straight_line = [as_coordinate(origin), as_coordinate(destination)]

        if not path or len(path) < 2:
            return straight_line

        direct = distance(origin, destination)
        length = path_length(path)

        if length > direct * self.config.max_length_ratio:
            self.logger.warning(
                f"Path too long ({length:.4f} vs direct {direct:.4f}), falling back to straight line"
            )
            return straight_line

        backtracks = self.count_backtracks(path, destination)
        if backtracks > len(path) * self.config.max_backtrack_ratio:
            self.logger.warning(
                f"Path has excessive backtracking ({backtracks} of {len(path)} points), "
                f"falling back to straight line"
            )
            return straight_line

        return [as_coordinate(point) for point in path]
