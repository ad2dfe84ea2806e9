"""
Station Model

Pure data model for railway stations identified by CRS code.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ...utils.geometry import Coordinate


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing a railway station.

    The code is the three-letter CRS code and is what geometry cache keys and
    the interchange graph are keyed on.
    """

    name: str
    code: str
    lat: float
    lng: float

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Station name cannot be empty")

        if not self.code or not self.code.strip():
            raise ValueError("Station code cannot be empty")

        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")

        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lng}")

        object.__setattr__(self, 'code', self.code.strip().upper())

    @property
    def coordinates(self) -> Coordinate:
        """The station location as a (lat, lng) tuple."""
        return (self.lat, self.lng)

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "name": self.name,
            "code": self.code,
            "lat": self.lat,
            "lng": self.lng,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Station':
        """Create Station from dictionary representation."""
        return cls(
            name=data["name"],
            code=data["code"],
            lat=float(data["lat"]),
            lng=float(data["lng"]),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
