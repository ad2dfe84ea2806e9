"""
Unit tests for the routeing guide parser.
"""

import json

from railpath.utils.routing_guide_parser import (
    parse_routing_guide,
    parse_routing_guide_file,
    write_station_graph,
)


class TestParseRoutingGuide:
    """Test parsing of routeing-guide distance rows."""

    def test_parses_rows(self):
        """Test basic rows, comments and blanks."""
        lines = [
            "/!! Routeing guide distances",
            "",
            "BAA,BOG,1.5",
            "BAA,CDF,12.25\n",
            "BOG,BAA,1.5",
        ]

        assert parse_routing_guide(lines) == {
            "BAA": {"BOG": 1.5, "CDF": 12.25},
            "BOG": {"BAA": 1.5},
        }

    def test_does_not_symmetrise(self):
        """Test that a one-way row only creates a one-way link."""
        graph = parse_routing_guide(["AAA,BBB,3"])

        assert graph == {"AAA": {"BBB": 3.0}}
        assert "BBB" not in graph

    def test_skips_malformed_rows(self):
        graph = parse_routing_guide(["AAA,BBB", "AAA,CCC,abc", " DDD , EEE , 2.0 "])
        assert graph == {"DDD": {"EEE": 2.0}}


class TestRoutingGuideFiles:
    """Test reading and writing graph files."""

    def test_file_round_trip(self, tmp_path):
        source = tmp_path / "RJRG.txt"
        source.write_text("/header\nYRK,LDS,25.5\nLDS,YRK,25.5\n", encoding="utf-8")

        graph = parse_routing_guide_file(source)
        output = write_station_graph(graph, tmp_path / "out" / "stationGraph.json")

        assert output.exists()
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "YRK": {"LDS": 25.5},
            "LDS": {"YRK": 25.5},
        }
        assert " " not in output.read_text(encoding="utf-8")
