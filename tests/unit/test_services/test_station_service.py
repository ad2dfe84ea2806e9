"""
Unit tests for StationService.
"""

import json

import pytest

from railpath.core.models.station import Station
from railpath.core.services.station_service import StationService, bigram_similarity


@pytest.fixture
def station_service(york, leeds, scarborough):
    stations = [
        york,
        leeds,
        scarborough,
        Station(name="London Kings Cross", code="KGX", lat=51.5308, lng=-0.1238),
        Station(name="Leicester", code="LEI", lat=52.6316, lng=-1.1253),
        Station(name="Seamer", code="SEM", lat=54.2386, lng=-0.4355),
    ]
    return StationService(stations)


class TestBigramSimilarity:
    """Test Dice coefficient over bigrams."""

    def test_identical(self):
        assert bigram_similarity("york", "york") == 1.0

    def test_disjoint(self):
        assert bigram_similarity("abc", "xyz") == 0.0

    def test_single_characters(self):
        assert bigram_similarity("a", "b") == 0.0


class TestLookup:
    """Test exact lookups."""

    def test_by_code_ignores_case(self, station_service, york):
        assert station_service.get_station_by_code("yrk") == york
        assert station_service.get_station_by_code("ZZZ") is None

    def test_by_name_ignores_case_and_whitespace(self, station_service, leeds):
        assert station_service.get_station_by_name("  LEEDS ") == leeds
        assert station_service.get_station_by_name("") is None


class TestSearch:
    """Test fuzzy search ranking."""

    def test_short_query_returns_nothing(self, station_service):
        assert station_service.search_stations("y") == []
        assert station_service.search_stations("") == []

    def test_exact_code_first(self, station_service):
        assert station_service.search_stations("SEM")[0].code == "SEM"

    def test_name_prefix_prefers_shorter_name(self, station_service):
        results = station_service.search_stations("le")
        assert [s.code for s in results[:2]] == ["LDS", "LEI"]

    def test_substring(self, station_service):
        assert station_service.search_stations("kings")[0].code == "KGX"

    def test_typo_tolerated(self, station_service):
        assert station_service.search_stations("scarbrough")[0].code == "SCA"

    def test_limit(self, station_service):
        assert len(station_service.search_stations("e", limit=1)) == 0
        assert len(station_service.search_stations("ee", limit=1)) == 1


class TestNearby:
    """Test proximity search."""

    def test_nearest_first(self, station_service):
        results = station_service.get_nearby_stations(54.27, -0.41, radius_km=10)
        assert [s.code for s in results] == ["SCA", "SEM"]

    def test_radius_excludes_far_stations(self, station_service):
        assert station_service.get_nearby_stations(50.0, -5.0, radius_km=20) == []


class TestBundledData:
    """Test the bundled station list."""

    def test_default_stations_loaded(self):
        service = StationService()

        assert service.get_station_by_code("KGX").name == "London Kings Cross"
        assert service.get_station_by_code("YRK") is not None
        assert len(service.stations) > 100

    def test_load_stations(self, tmp_path):
        path = tmp_path / "stations.json"
        path.write_text(json.dumps([{"name": "York", "code": "YRK", "lat": 53.9579, "lng": -1.0926}]))

        assert StationService.load_stations(path) == [Station("York", "YRK", 53.9579, -1.0926)]
