"""
Unit tests for the Station model.
"""

import pytest

from railpath.core.models.station import Station


class TestStation:
    """Test Station model."""

    def test_station_creation(self):
        """Test creating a station with valid data."""
        station = Station(name="London Kings Cross", code="KGX", lat=51.5308, lng=-0.1238)

        assert station.name == "London Kings Cross"
        assert station.code == "KGX"
        assert station.coordinates == (51.5308, -0.1238)

    def test_code_is_normalised_to_upper_case(self):
        """Test that CRS codes are stored upper case."""
        station = Station(name="York", code=" yrk ", lat=53.9579, lng=-1.0926)
        assert station.code == "YRK"

    def test_empty_name_rejected(self):
        """Test that an empty name raises ValueError."""
        with pytest.raises(ValueError, match="name"):
            Station(name="  ", code="YRK", lat=53.9, lng=-1.0)

    def test_empty_code_rejected(self):
        """Test that an empty code raises ValueError."""
        with pytest.raises(ValueError, match="code"):
            Station(name="York", code="", lat=53.9, lng=-1.0)

    def test_out_of_range_coordinates_rejected(self):
        """Test latitude and longitude range checks."""
        with pytest.raises(ValueError):
            Station(name="Nowhere", code="NOW", lat=91.0, lng=0.0)
        with pytest.raises(ValueError):
            Station(name="Nowhere", code="NOW", lat=0.0, lng=-181.0)

    def test_dict_round_trip(self):
        """Test to_dict and from_dict."""
        station = Station(name="Leeds", code="LDS", lat=53.7950, lng=-1.5474)
        data = station.to_dict()

        assert data == {"name": "Leeds", "code": "LDS", "lat": 53.7950, "lng": -1.5474}
        assert Station.from_dict(data) == station

    def test_str(self):
        station = Station(name="York", code="YRK", lat=53.9579, lng=-1.0926)
        assert str(station) == "York (YRK)"
