"""
Routeing guide parser.

Converts an ATOC routeing-guide distance file (``ORIGIN,DEST,DISTANCE`` rows)
into the station adjacency map used by the interchange graph.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Union

logger = logging.getLogger(__name__)


def parse_routing_guide(lines: Iterable[str]) -> Dict[str, Dict[str, float]]:
    """
    Parse routeing-guide rows into a directed adjacency map.

    Lines starting with ``/`` are headers or comments. Rows are stored in the
    direction they appear; no reverse links are invented.

    Args:
        lines: Text lines of the routeing-guide file

    Returns:
        Mapping of origin code to destination code to distance
    """
    graph: Dict[str, Dict[str, float]] = {}
    count = 0

    for line in lines:
        if line.startswith('/') or not line.strip():
            continue

        parts = line.split(',')
        if len(parts) < 3:
            continue

        origin = parts[0].strip()
        dest = parts[1].strip()
        try:
            weight = float(parts[2].strip())
        except ValueError:
            logger.debug(f"Skipping row with non-numeric distance: {line.strip()}")
            continue

        graph.setdefault(origin, {})[dest] = weight
        count += 1

    logger.info(f"Processed {count} links for {len(graph)} stations")
    return graph


def parse_routing_guide_file(path: Union[str, Path]) -> Dict[str, Dict[str, float]]:
    """Read and parse a routeing-guide file."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_routing_guide(f)


def write_station_graph(graph: Dict[str, Dict[str, float]], path: Union[str, Path]) -> Path:
    """Write the adjacency map as minified JSON, creating parent directories."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        json.dump(graph, f, separators=(',', ':'))
    logger.info(f"Graph saved to {output}")
    return output
