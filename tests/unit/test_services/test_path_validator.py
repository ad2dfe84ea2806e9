"""
Unit tests for PathValidator.
"""

from railpath.core.services.path_validator import PathValidator

ORIGIN = (0.0, 0.0)
DESTINATION = (0.0, 1.0)


class TestPathValidator:
    """Test plausibility checks."""

    def test_plausible_path_preserved(self, geometry_config):
        path = [(0.0, 0.0), (0.0, 0.2), (0.0, 0.4), (0.05, 0.38), (0.05, 0.6), (0.0, 0.8), (0.0, 1.0)]

        assert PathValidator(geometry_config).validate(path, ORIGIN, DESTINATION) == path

    def test_too_short_path_replaced(self, geometry_config):
        validator = PathValidator(geometry_config)

        assert validator.validate([], ORIGIN, DESTINATION) == [ORIGIN, DESTINATION]
        assert validator.validate(None, ORIGIN, DESTINATION) == [ORIGIN, DESTINATION]
        assert validator.validate([ORIGIN], ORIGIN, DESTINATION) == [ORIGIN, DESTINATION]

    def test_overlong_path_replaced(self, geometry_config):
        """Test a path more than three times the direct distance."""
        origin, destination = (0.0, 0.0), (0.0, 0.1)
        path = [origin, (0.2, 0.05), destination]

        assert PathValidator(geometry_config).validate(path, origin, destination) == [origin, destination]

    def test_excessive_backtracking_replaced(self, geometry_config):
        """Test three backtracking steps in nine points."""
        path = [
            (0.0, 0.0), (0.0, 0.3), (0.0, 0.25), (0.0, 0.5), (0.0, 0.45),
            (0.0, 0.7), (0.0, 0.65), (0.0, 0.9), (0.0, 1.0),
        ]
        validator = PathValidator(geometry_config)

        assert validator.count_backtracks(path, DESTINATION) == 3
        assert validator.validate(path, ORIGIN, DESTINATION) == [ORIGIN, DESTINATION]

    def test_single_backtrack_tolerated(self, geometry_config):
        path = [
            (0.0, 0.0), (0.0, 0.2), (0.0, 0.4), (0.0, 0.35), (0.0, 0.6),
            (0.0, 0.8), (0.0, 0.9), (0.0, 0.95), (0.0, 1.0),
        ]
        validator = PathValidator(geometry_config)

        assert validator.count_backtracks(path, DESTINATION) == 1
        assert validator.validate(path, ORIGIN, DESTINATION) == path

    def test_small_retreat_is_not_backtracking(self, geometry_config):
        """Test that moving 0.01 away from the destination is within tolerance."""
        path = [(0.0, 0.5), (0.0, 0.49)]
        assert PathValidator(geometry_config).count_backtracks(path, DESTINATION) == 0
