"""
Unit tests for PathSimplifier.
"""

from railpath.core.services.path_simplifier import PathSimplifier


class TestRemoveClosePoints:
    """Test the spacing pass."""

    def test_drops_points_within_min_spacing(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.0005), (0.0, 0.002), (0.0, 0.0025), (0.0, 0.01)]

        result = PathSimplifier(geometry_config).simplify(path, 0.001)

        assert result == [(0.0, 0.0), (0.0, 0.002), (0.0, 0.01)]

    def test_last_point_always_kept(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.01), (0.0, 0.0101)]

        result = PathSimplifier(geometry_config).remove_close_points(path, 0.001)

        assert result == [(0.0, 0.0), (0.0, 0.0101)]

    def test_single_interior_point_near_end_absorbed(self, geometry_config):
        """Test that the final point takes the place of a kept point just before it."""
        path = [(0.0, 0.0), (0.0, 0.005), (0.0, 0.01), (0.0, 0.0105)]

        result = PathSimplifier(geometry_config).remove_close_points(path, 0.001)

        assert result == [(0.0, 0.0), (0.0, 0.005), (0.0, 0.0105)]

    def test_origin_never_replaced(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.0002), (0.0, 0.0004)]

        result = PathSimplifier(geometry_config).remove_close_points(path, 0.001)

        assert result == [(0.0, 0.0), (0.0, 0.0004)]

    def test_default_spacing_from_config(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.0005), (0.0, 0.01)]
        assert PathSimplifier(geometry_config).simplify(path) == [(0.0, 0.0), (0.0, 0.01)]


class TestRemoveSharpTurns:
    """Test the sharp turn pass."""

    def test_fold_back_vertex_dropped(self, geometry_config):
        """Test that a vertex where the path doubles back on itself is replaced by the next point."""
        path = [(0.0, 0.0), (0.0, 0.01), (0.0, 0.02), (0.002, 0.01)]

        result = PathSimplifier(geometry_config).simplify(path)

        assert result == [(0.0, 0.0), (0.0, 0.01), (0.002, 0.01)]

    def test_gentle_curve_kept(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.01), (0.003, 0.02), (0.008, 0.028)]
        assert PathSimplifier(geometry_config).simplify(path) == path

    def test_right_angle_kept(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01)]
        assert PathSimplifier(geometry_config).simplify(path) == path

    def test_endpoints_preserved(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.05), (0.0, 0.01), (0.0, 0.1)]

        result = PathSimplifier(geometry_config).simplify(path)

        assert result[0] == (0.0, 0.0)
        assert result[-1] == (0.0, 0.1)


class TestSimplifyShortPaths:
    """Test paths too short to simplify."""

    def test_two_points_unchanged(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.0)]
        assert PathSimplifier(geometry_config).simplify(path) == path

    def test_collapses_to_two_points(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.0002), (0.0, 0.0004)]
        assert PathSimplifier(geometry_config).simplify(path) == [(0.0, 0.0), (0.0, 0.0004)]
