"""
Command line entry point for railpath.

Computes route geometry between stations, lists interchange hubs and
converts routeing-guide data into the station graph JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .api.overpass_api_manager import OverpassAPIManager
from .cache.geometry_cache import GeometryCache
from .core.services.interchange_detection_service import InterchangeGraph
from .core.services.rail_geometry_service import RailGeometryService
from .core.services.station_service import StationService
from .managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from .utils.routing_guide_parser import parse_routing_guide_file, write_station_graph

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Setup logging with console and optional file output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="railpath", description="Railway geometry between stations")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--config", help="path to config.json")
    parser.add_argument("--log-file", help="also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    route = subparsers.add_parser("route", help="print track geometry between two stations as JSON")
    route.add_argument("origin", help="origin CRS code")
    route.add_argument("destination", help="destination CRS code")
    route.add_argument("--no-cache", action="store_true", help="bypass the geometry cache")

    interchanges = subparsers.add_parser("interchanges", help="list major hubs on the shortest path")
    interchanges.add_argument("origin", help="origin CRS code")
    interchanges.add_argument("destination", help="destination CRS code")
    interchanges.add_argument("--graph", help="station graph JSON (defaults to the configured path)")

    build_graph = subparsers.add_parser("build-graph", help="convert a routeing-guide file to graph JSON")
    build_graph.add_argument("input", help="routeing-guide distance file")
    build_graph.add_argument("output", help="output JSON path")

    return parser


async def compute_route(config: ConfigData, origin_code: str, destination_code: str,
                        use_cache: bool = True) -> list:
    """Resolve two CRS codes and fetch the railway geometry between them."""
    stations = StationService()
    origin = stations.get_station_by_code(origin_code)
    destination = stations.get_station_by_code(destination_code)
    if origin is None or destination is None:
        missing = origin_code if origin is None else destination_code
        raise ValueError(f"Unknown station code: {missing}")

    cache = GeometryCache(config.cache) if use_cache and config.cache.enabled else None

    async with OverpassAPIManager(config.overpass) as source:
        service = RailGeometryService(source, cache, config.geometry)
        return await service.get_route_geometry(origin, destination)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = ConfigManager(args.config).load_config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    if args.command == "route":
        try:
            coords = asyncio.run(compute_route(config, args.origin, args.destination, not args.no_cache))
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 1
        print(json.dumps([list(point) for point in coords]))
        return 0

    if args.command == "interchanges":
        graph_path = args.graph or config.interchange_graph_path
        if not graph_path:
            print("No station graph given (use --graph or set interchange_graph_path)", file=sys.stderr)
            return 1
        graph = InterchangeGraph.from_json_file(graph_path)
        print(json.dumps(graph.find_interchanges(args.origin.upper(), args.destination.upper())))
        return 0

    if args.command == "build-graph":
        try:
            graph = parse_routing_guide_file(args.input)
        except OSError as e:
            print(f"Error processing file: {e}", file=sys.stderr)
            return 1
        write_station_graph(graph, args.output)
        return 0

    return 1
