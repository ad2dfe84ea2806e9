"""
Interchange Detection Service

Shortest paths over the station-to-station mileage graph, used to choose
which major hubs are worth trying as interchanges for a long journey.
"""

import heapq
import itertools
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

logger = logging.getLogger(__name__)

StationGraph = Dict[str, Dict[str, float]]

# Stations worth splitting a journey at.
MAJOR_HUBS = frozenset({
    'YRK', 'BHM', 'LDS', 'MAN', 'PRE', 'SHF', 'CRE', 'EDB', 'NCL', 'LIV',
    'BRI', 'RDG', 'CBG', 'GLC', 'EUS', 'KGX', 'STP', 'PAD', 'VIC', 'LST',
    'WAT', 'WIJ', 'CLJ', 'DON', 'PBO', 'LEI', 'NOT', 'BNS',
})


class InterchangeGraph:
    """
    Directed station graph keyed by CRS code.

    The adjacency map is used exactly as given: an A -> B link says nothing
    about B -> A.
    """

    def __init__(self, stations: Optional[StationGraph] = None,
                 major_hubs: Optional[Set[str]] = None):
        """
        Initialize the interchange graph.

        Args:
            stations: Mapping of station code to neighbour code to distance.
                None leaves the graph unloaded
            major_hubs: Codes eligible as interchanges, defaults to MAJOR_HUBS
        """
        self._graph: Optional[StationGraph] = None
        self.major_hubs = frozenset(major_hubs) if major_hubs is not None else MAJOR_HUBS
        if stations is not None:
            self.load(stations)

    def load(self, stations: StationGraph) -> None:
        """Replace the adjacency map."""
        for origin, neighbours in stations.items():
            for dest, weight in neighbours.items():
                if weight < 0:
                    raise ValueError(f"Negative distance {weight} on link {origin}->{dest}")
        self._graph = stations
        logger.info(f"Rail graph loaded: {len(stations)} stations")

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'InterchangeGraph':
        """
        Load the adjacency map from a JSON file.

        A missing or unreadable file leaves the graph unloaded so that
        queries simply find nothing.
        """
        graph = cls()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                graph.load(json.load(f))
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.error(f"Failed to load rail graph from {path}: {e}")
        return graph

    @property
    def is_loaded(self) -> bool:
        return self._graph is not None

    @property
    def station_count(self) -> int:
        return len(self._graph) if self._graph else 0

    def find_path(self, start: str, end: str) -> Optional[List[str]]:
        """
        Dijkstra's shortest path between two station codes.

        Args:
            start: Origin CRS code
            end: Destination CRS code

        Returns:
            Codes on the shortest path including both ends, or None if either
            code is not a key of the graph or ``end`` is unreachable
        """
        graph = self._graph
        if not graph or start not in graph or end not in graph:
            return None

        distances: Dict[str, float] = {start: 0.0}
        previous: Dict[str, str] = {}
        visited: Set[str] = set()
        counter = itertools.count()
        queue = [(0.0, next(counter), start)]

        while queue:
            current_dist, _, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)

            if current == end:
                path = [end]
                while path[-1] != start:
                    path.append(previous[path[-1]])
                path.reverse()
                return path

            for neighbour, weight in graph.get(current, {}).items():
                alt = current_dist + weight
                if alt < distances.get(neighbour, float('inf')):
                    distances[neighbour] = alt
                    previous[neighbour] = current
                    heapq.heappush(queue, (alt, next(counter), neighbour))

        logger.debug(f"No path found from {start} to {end}")
        return None

    def find_interchanges(self, start: str, end: str) -> List[str]:
        """
        Major hubs on the shortest path between two stations, in path order,
        excluding the start and end themselves.
        """
        path = self.find_path(start, end)
        if not path:
            return []

        interchanges: List[str] = []
        for station in path:
            if station in (start, end):
                continue
            if station in self.major_hubs and station not in interchanges:
                interchanges.append(station)

        logger.debug(f"Interchanges for {start}->{end}: {interchanges}")
        return interchanges
