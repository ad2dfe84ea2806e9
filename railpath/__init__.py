"""
railpath - plausible railway track geometry between stations

Builds a drawable coordinate path for a train journey from raw railway line
segments (OpenStreetMap ways via Overpass), falling back to a straight line
whenever the data cannot support a clean path.

Features:
- Endpoint-snapping railway graph with Dijkstra search
- Greedy segment chaining when the graph is disconnected
- Length/backtracking validation and sharp-turn cleanup
- Seven-day station-pair geometry cache
- Major-hub interchange selection over the routeing-guide mileage graph
"""

__version__ = "1.0.0"
__author__ = "railpath contributors"
__description__ = "Railway path construction for journey maps"
