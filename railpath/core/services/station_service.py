"""
Station Service Implementation

Lookup and fuzzy search over station reference data.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Set, Union

from ..models.station import Station
from ...utils.geometry import haversine_km

DEFAULT_STATIONS_FILE = Path(__file__).resolve().parent.parent.parent / "data" / "stations.json"


def bigram_similarity(str1: str, str2: str) -> float:
    """Dice coefficient over the sets of character bigrams of two strings."""
    def get_bigrams(text: str) -> Set[str]:
        return {text[i:i + 2] for i in range(len(text) - 1)}

    bigrams1 = get_bigrams(str1)
    bigrams2 = get_bigrams(str2)

    total = len(bigrams1) + len(bigrams2)
    if total == 0:
        return 0.0

    return 2 * len(bigrams1 & bigrams2) / total


class StationService:
    """Service implementation for station operations."""

    def __init__(self, stations: Optional[List[Station]] = None):
        """
        Initialize the station service.

        Args:
            stations: Station records; defaults to the bundled station list
        """
        self.logger = logging.getLogger(__name__)
        self._stations = stations if stations is not None else self.load_stations(DEFAULT_STATIONS_FILE)
        self._by_code = {station.code: station for station in self._stations}

        self.logger.info(f"Initialized StationService with {len(self._stations)} stations")

    @staticmethod
    def load_stations(path: Union[str, Path]) -> List[Station]:
        """Load stations from a JSON array of ``{name, code, lat, lng}`` records."""
        with open(path, 'r', encoding='utf-8') as f:
            return [Station.from_dict(record) for record in json.load(f)]

    @property
    def stations(self) -> List[Station]:
        return list(self._stations)

    def get_station_by_code(self, code: str) -> Optional[Station]:
        """Get a station by CRS code, ignoring case."""
        if not code:
            return None
        return self._by_code.get(code.strip().upper())

    def get_station_by_name(self, name: str) -> Optional[Station]:
        """Get a station by exact name, ignoring case and surrounding whitespace."""
        if not name:
            return None
        normalized = name.strip().lower()
        for station in self._stations:
            if station.name.lower() == normalized:
                return station
        return None

    def search_stations(self, query: str, limit: int = 8) -> List[Station]:
        """
        Fuzzy search by name or code.

        Exact code matches rank first, then name prefixes (shorter names
        first), code prefixes, substrings (earlier matches first) and finally
        bigram similarity of at least 0.6 to handle typos.
        """
        if not query or len(query) < 2:
            return []

        normalized = query.lower().strip()
        scored = []

        for station in self._stations:
            name = station.name.lower()
            code = station.code.lower()

            if code == normalized:
                score = 1000.0
            elif name.startswith(normalized):
                score = 100.0 + (100 - len(name))
            elif code.startswith(normalized):
                score = 90.0
            elif normalized in name:
                score = 50.0 - name.index(normalized)
            else:
                similarity = bigram_similarity(normalized, name)
                if similarity < 0.6:
                    continue
                score = similarity * 30

            scored.append((score, station))

        scored.sort(key=lambda item: item[0], reverse=True)
        return [station for _, station in scored[:limit]]

    def get_nearby_stations(self, lat: float, lng: float, radius_km: float = 20,
                            limit: int = 5) -> List[Station]:
        """Stations within ``radius_km`` of a point, nearest first."""
        nearby = []
        for station in self._stations:
            d = haversine_km(lat, lng, station.lat, station.lng)
            if d <= radius_km:
                nearby.append((d, station))

        nearby.sort(key=lambda item: item[0])
        return [station for _, station in nearby[:limit]]
