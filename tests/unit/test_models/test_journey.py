"""
Unit tests for Journey and JourneyLeg models.
"""

import pytest

from railpath.core.models.journey import Journey, JourneyLeg


class TestJourney:
    """Test Journey model."""

    def test_empty_journey(self):
        journey = Journey()

        assert journey.legs == []
        assert journey.origin is None
        assert journey.destination is None
        assert journey.changes_required == 0

    def test_multi_leg_journey(self, leeds, york, scarborough):
        """Test derived properties of a two-leg journey."""
        journey = Journey(legs=[JourneyLeg(leeds, york), JourneyLeg(york, scarborough)])

        assert journey.origin == leeds
        assert journey.destination == scarborough
        assert journey.changes_required == 1
        assert journey.interchanges == [york]

    def test_leg_requires_endpoints(self, york):
        with pytest.raises(ValueError):
            JourneyLeg(origin=york, destination=None)

    def test_from_dict(self):
        """Test building a journey from timetable search output."""
        journey = Journey.from_dict({
            "legs": [{
                "origin": {"name": "Leeds", "code": "LDS", "lat": 53.795, "lng": -1.5474},
                "destination": {"name": "York", "code": "YRK", "lat": 53.9579, "lng": -1.0926},
                "operator": "TransPennine Express",
            }]
        })

        assert len(journey.legs) == 1
        assert journey.legs[0].origin.code == "LDS"
        assert journey.legs[0].operator == "TransPennine Express"

    def test_from_dict_missing_destination(self):
        with pytest.raises(ValueError):
            Journey.from_dict({"legs": [{"origin": {"name": "Leeds", "code": "LDS", "lat": 53.8, "lng": -1.5}}]})
