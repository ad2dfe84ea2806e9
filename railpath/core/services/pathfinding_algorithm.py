"""
Pathfinding Algorithm

Dijkstra's shortest path over a snapped railway graph, expanded back into
track coordinates.
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional, Sequence, Set

from ..models.railway_graph import RailwayGraph, GraphNode, Edge, SnapKey
from ...utils.geometry import Coordinate, as_coordinate, distance


class ShortestPathFinder:
    """Finds the shortest track path between the nodes nearest two points."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def find_closest_node(self, graph: RailwayGraph, point: Sequence[float]) -> Optional[GraphNode]:
        """
        Find the node whose representative coordinate is nearest to ``point``.

        Ties go to the node created first.
        """
        closest = None
        min_dist = float('inf')

        for node in graph:
            d = distance(node.coordinate, point)
            if d < min_dist:
                min_dist = d
                closest = node

        return closest

    def dijkstra(self, graph: RailwayGraph, start: SnapKey, end: SnapKey) -> Optional[List[Edge]]:
        """
        Shortest path from ``start`` to ``end`` as the list of edges traversed.

        Returns an empty list when start and end are the same node, and None
        when ``end`` cannot be reached. Frontier ties are broken by insertion
        order so results are reproducible.
        """
        distances: Dict[SnapKey, float] = {key: float('inf') for key in graph.nodes}
        distances[start] = 0.0
        previous: Dict[SnapKey, Edge] = {}
        visited: Set[SnapKey] = set()

        counter = itertools.count()
        frontier = [(0.0, next(counter), start)]
        nodes_explored = 0

        while frontier:
            current_dist, _, current = heapq.heappop(frontier)

            if current in visited:
                continue
            visited.add(current)
            nodes_explored += 1

            if current == end:
                break

            for edge in graph.nodes[current].edges:
                if edge.to_key in visited:
                    continue

                new_dist = current_dist + edge.weight
                if new_dist < distances[edge.to_key]:
                    distances[edge.to_key] = new_dist
                    previous[edge.to_key] = edge
                    heapq.heappush(frontier, (new_dist, next(counter), edge.to_key))

        if end not in previous and start != end:
            self.logger.debug(f"Destination node unreachable after exploring {nodes_explored} nodes")
            return None

        edges: List[Edge] = []
        current = end
        while current != start:
            edge = previous[current]
            edges.append(edge)
            current = edge.from_key
        edges.reverse()

        self.logger.debug(
            f"Found path of {len(edges)} edges, weight {distances[end]:.5f}, "
            f"after exploring {nodes_explored} nodes"
        )
        return edges

    def find_node_path(self, graph: RailwayGraph, origin: Sequence[float],
                       destination: Sequence[float]) -> Optional[List[Edge]]:
        """Run Dijkstra between the nodes nearest to origin and destination."""
        start_node = self.find_closest_node(graph, origin)
        end_node = self.find_closest_node(graph, destination)

        if start_node is None or end_node is None:
            return None

        return self.dijkstra(graph, start_node.key, end_node.key)

    @staticmethod
    def build_coord_path(edges: List[Edge], origin: Sequence[float],
                         destination: Sequence[float]) -> List[Coordinate]:
        """
        Expand traversed edges into a coordinate path.

        Each edge contributes its coordinates minus the first one, which is
        the junction already emitted. The start node position is replaced by
        the literal origin and the end node position by the literal
        destination.
        """
        body: List[Coordinate] = []
        for edge in edges:
            body.extend(edge.coordinates[1:])

        if body:
            body.pop()

        return [as_coordinate(origin)] + body + [as_coordinate(destination)]

    def find_path(self, graph: RailwayGraph, origin: Sequence[float],
                  destination: Sequence[float]) -> Optional[List[Coordinate]]:
        """
        Shortest track path between two points.

        Args:
            graph: Railway graph for this request
            origin: Requested (lat, lng) start point
            destination: Requested (lat, lng) end point

        Returns:
            Coordinates starting at ``origin`` and ending at ``destination``,
            or None if the graph is empty or the nodes are disconnected
        """
        edges = self.find_node_path(graph, origin, destination)
        if edges is None:
            return None
        return self.build_coord_path(edges, origin, destination)
