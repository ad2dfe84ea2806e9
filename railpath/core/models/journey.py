"""
Journey Model

The multi-leg journey structure produced by the timetable search. Only the
leg endpoints matter for geometry.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any

from .station import Station


@dataclass(frozen=True)
class JourneyLeg:
    """A single train ride between two stations."""

    origin: Station
    destination: Station
    operator: Optional[str] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None

    def __post_init__(self):
        """Validate journey leg data."""
        if self.origin is None or self.destination is None:
            raise ValueError("Journey leg requires both an origin and a destination")


@dataclass(frozen=True)
class Journey:
    """A sequence of legs; consecutive legs meet at an interchange station."""

    legs: List[JourneyLeg] = field(default_factory=list)

    @property
    def origin(self) -> Optional[Station]:
        return self.legs[0].origin if self.legs else None

    @property
    def destination(self) -> Optional[Station]:
        return self.legs[-1].destination if self.legs else None

    @property
    def changes_required(self) -> int:
        """Number of changes of train."""
        return max(len(self.legs) - 1, 0)

    @property
    def interchanges(self) -> List[Station]:
        """Stations where the passenger changes train."""
        return [leg.destination for leg in self.legs[:-1]]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Journey':
        """Create a Journey from ``{"legs": [{"origin": {...}, "destination": {...}}]}``."""
        legs = []
        for leg_data in data.get("legs", []):
            if not leg_data.get("origin") or not leg_data.get("destination"):
                raise ValueError("Journey leg requires both an origin and a destination")
            legs.append(JourneyLeg(
                origin=Station.from_dict(leg_data["origin"]),
                destination=Station.from_dict(leg_data["destination"]),
                operator=leg_data.get("operator"),
            ))
        return cls(legs=legs)
