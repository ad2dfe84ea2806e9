"""
Unit tests for Segment and BoundingBox models.
"""

import pytest

from railpath.core.models.segment import Segment, BoundingBox


class TestSegment:
    """Test Segment model."""

    def test_coordinates_normalised_to_float_tuples(self):
        """Test that list input is stored as tuples of floats."""
        segment = Segment(id=123, coordinates=[[51, -1], [52, -2]])

        assert segment.id == "123"
        assert segment.coordinates == ((51.0, -1.0), (52.0, -2.0))
        assert isinstance(segment.coordinates[0][0], float)

    def test_requires_two_coordinates(self):
        """Test that a single-point segment is rejected."""
        with pytest.raises(ValueError, match="at least 2"):
            Segment(id="x", coordinates=((51.0, -1.0),))

    def test_endpoints_and_midpoint(self):
        """Test start, end and middle coordinate accessors."""
        segment = Segment(id="s", coordinates=((0.0, 0.0), (0.0, 0.1), (0.0, 0.2)))

        assert segment.start == (0.0, 0.0)
        assert segment.end == (0.0, 0.2)
        assert segment.midpoint == (0.0, 0.1)

    def test_length(self):
        """Test degree-space length."""
        segment = Segment(id="s", coordinates=((0.0, 0.0), (0.3, 0.4), (0.3, 0.5)))
        assert segment.length == pytest.approx(0.6)

    def test_reversed(self):
        segment = Segment(id="s", coordinates=((0.0, 0.0), (0.0, 0.1)))
        assert segment.reversed() == ((0.0, 0.1), (0.0, 0.0))

    def test_from_dict(self):
        segment = Segment.from_dict({"id": "w1", "coordinates": [[1.0, 2.0], [3.0, 4.0]]})
        assert segment == Segment(id="w1", coordinates=((1.0, 2.0), (3.0, 4.0)))


class TestBoundingBox:
    """Test BoundingBox model."""

    def test_around_orders_and_pads(self):
        """Test box construction from two points in either order."""
        bbox = BoundingBox.around((51.52, -0.08), (51.50, -0.10), 0.1)

        assert bbox.min_lat == pytest.approx(51.40)
        assert bbox.max_lat == pytest.approx(51.62)
        assert bbox.min_lng == pytest.approx(-0.20)
        assert bbox.max_lng == pytest.approx(0.02)

    def test_contains_is_inclusive(self):
        bbox = BoundingBox(0.0, 0.0, 1.0, 1.0)

        assert bbox.contains((0.0, 0.0))
        assert bbox.contains((1.0, 0.5))
        assert not bbox.contains((1.01, 0.5))

    def test_filter_segments_keeps_any_overlap(self):
        """Test that one coordinate inside is enough."""
        bbox = BoundingBox(0.0, 0.0, 1.0, 1.0)
        inside = Segment(id="in", coordinates=((2.0, 2.0), (0.5, 0.5)))
        outside = Segment(id="out", coordinates=((2.0, 2.0), (3.0, 3.0)))

        assert bbox.filter_segments([inside, outside]) == [inside]

    def test_invalid_box_rejected(self):
        with pytest.raises(ValueError):
            BoundingBox(1.0, 0.0, 0.0, 1.0)

    def test_as_overpass(self):
        bbox = BoundingBox(51.4, -0.2, 51.6, 0.0)
        assert bbox.as_overpass() == "51.4,-0.2,51.6,0.0"
