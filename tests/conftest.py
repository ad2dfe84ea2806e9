"""
Global pytest configuration and fixtures.
"""

import pytest

from railpath.core.models.segment import Segment
from railpath.core.models.station import Station
from railpath.managers.config_manager import CacheConfig, GeometryConfig


@pytest.fixture
def geometry_config():
    """Default geometry thresholds."""
    return GeometryConfig()


@pytest.fixture
def cache_config(tmp_path):
    """Cache configuration writing into a temporary directory."""
    return CacheConfig(cache_dir=str(tmp_path / "geometry"), ttl_seconds=3600)


@pytest.fixture
def london_segments():
    """Two segments meeting exactly at (51.51, -0.09)."""
    return [
        Segment(id="A", coordinates=((51.50, -0.10), (51.51, -0.09))),
        Segment(id="B", coordinates=((51.51, -0.09), (51.52, -0.08))),
    ]


@pytest.fixture
def broken_line_segments():
    """A straight line along lng 0 with a 0.003 degree gap in the middle.

    The gap is wider than the snapping grid, so the graph is disconnected,
    but narrower than the greedy connection threshold.
    """
    return [
        Segment(id="north", coordinates=((0.0, 0.0), (0.0, 0.03), (0.0, 0.048))),
        Segment(id="south", coordinates=((0.0, 0.051), (0.0, 0.08), (0.0, 0.1))),
    ]


@pytest.fixture
def york():
    return Station(name="York", code="YRK", lat=53.9579, lng=-1.0926)


@pytest.fixture
def leeds():
    return Station(name="Leeds", code="LDS", lat=53.7950, lng=-1.5474)


@pytest.fixture
def scarborough():
    return Station(name="Scarborough", code="SCA", lat=54.2795, lng=-0.4070)


@pytest.fixture
def sample_station_graph():
    """Directed mileage graph from Blackpool North to Scarborough."""
    return {
        "BPN": {"PRE": 17.5},
        "PRE": {"BPN": 17.5, "MAN": 31.0, "BBN": 12.0},
        "BBN": {"PRE": 12.0, "LDS": 70.0},
        "MAN": {"PRE": 31.0, "LDS": 43.0},
        "LDS": {"MAN": 43.0, "YRK": 25.5},
        "YRK": {"LDS": 25.5, "SEM": 40.0},
        "SEM": {"YRK": 40.0, "SCA": 3.0},
        "SCA": {"SEM": 3.0},
    }
