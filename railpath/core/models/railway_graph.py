"""
Railway Graph Model

Connectivity graph built from track segments. Nodes are snapped segment
endpoints; every segment contributes one directed edge in each direction.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Iterator

from ...utils.geometry import Coordinate

SnapKey = Tuple[int, int]  # (lat, lng) as integer multiples of the snap resolution


@dataclass(frozen=True)
class Edge:
    """Directed traversal of one segment from one node to another."""

    from_key: SnapKey
    to_key: SnapKey
    coordinates: Tuple[Coordinate, ...]
    weight: float
    segment_id: str


@dataclass
class GraphNode:
    """A snapped connection point."""

    key: SnapKey
    coordinate: Coordinate
    edges: List[Edge] = field(default_factory=list)


@dataclass
class RailwayGraph:
    """Owns all nodes of one path-construction request, keyed by snap key."""

    nodes: Dict[SnapKey, GraphNode] = field(default_factory=dict)

    def get_or_create_node(self, key: SnapKey, coordinate: Coordinate) -> GraphNode:
        """Return the node for ``key``, creating it at ``coordinate`` on first use."""
        node = self.nodes.get(key)
        if node is None:
            node = GraphNode(key=key, coordinate=coordinate)
            self.nodes[key] = node
        return node

    def add_edge(self, edge: Edge) -> None:
        self.nodes[edge.from_key].edges.append(edge)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes.values())

    def is_empty(self) -> bool:
        return not self.nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes.values())

    def __contains__(self, key: object) -> bool:
        return key in self.nodes
