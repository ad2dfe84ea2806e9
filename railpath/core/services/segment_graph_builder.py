"""
Segment Graph Builder

Turns an unordered set of track segments into a connectivity graph by
snapping nearby endpoints onto shared nodes.
"""

import logging
import math
from typing import Iterable, Optional, Sequence

from ..models.railway_graph import RailwayGraph, Edge, SnapKey
from ..models.segment import Segment
from ...managers.config_manager import GeometryConfig
from ...utils.geometry import path_length


class SegmentGraphBuilder:
    """Builds a fresh RailwayGraph for each path-construction request."""

    def __init__(self, config: Optional[GeometryConfig] = None):
        """
        Initialize the graph builder.

        Args:
            config: Geometry thresholds; ``snap_resolution`` sets the grid
                that endpoints are rounded onto
        """
        self.config = config or GeometryConfig()
        self.logger = logging.getLogger(__name__)

    def snap_key(self, point: Sequence[float]) -> SnapKey:
        """
        Round a coordinate onto the snapping grid.

        Keys are integer grid indices so two endpoints within the same cell
        compare equal without any float formatting. Halves round up.
        """
        resolution = self.config.snap_resolution
        return (
            int(math.floor(point[0] / resolution + 0.5)),
            int(math.floor(point[1] / resolution + 0.5)),
        )

    def build(self, segments: Iterable[Segment]) -> RailwayGraph:
        """
        Build a graph with one node per snapped endpoint and two directed
        edges (forward and reverse) per segment.

        Args:
            segments: Track segments for one request

        Returns:
            RailwayGraph owning every node created from the segments
        """
        graph = RailwayGraph()
        segment_count = 0

        for segment in segments:
            coords = segment.coordinates
            start_key = self.snap_key(coords[0])
            end_key = self.snap_key(coords[-1])

            graph.get_or_create_node(start_key, coords[0])
            graph.get_or_create_node(end_key, coords[-1])

            weight = path_length(coords)

            graph.add_edge(Edge(
                from_key=start_key,
                to_key=end_key,
                coordinates=coords,
                weight=weight,
                segment_id=segment.id,
            ))
            graph.add_edge(Edge(
                from_key=end_key,
                to_key=start_key,
                coordinates=tuple(reversed(coords)),
                weight=weight,
                segment_id=segment.id,
            ))
            segment_count += 1

        self.logger.debug(
            f"Built railway graph from {segment_count} segments: "
            f"{graph.node_count} nodes, {graph.edge_count} edges"
        )
        return graph
