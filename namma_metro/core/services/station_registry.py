"""
Station Registry

Deduplicates stations by normalized key and hands out dense integer ids.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..exceptions import CapacityExceededError, InvalidStationNameError
from ..models.station import Station
from .station_name_normalizer import StationNameNormalizer

DEFAULT_CAPACITY = 400


class StationRegistry:
    """
    Arena of stations indexed by dense id.

    The first registration of a key wins: later registrations of the same key
    return the existing id without touching its display name or planned flag.
    Only the line list grows afterwards, through tag_line.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 normalizer: Optional[StationNameNormalizer] = None):
        """
        Initialize an empty registry.

        Args:
            capacity: Maximum number of distinct stations
            normalizer: Key builder, defaults to a StationNameNormalizer
        """
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.normalizer = normalizer or StationNameNormalizer()
        self.logger = logging.getLogger(__name__)

        self._stations: List[Station] = []
        self._id_by_key: Dict[str, int] = {}

    def register(self, raw_name: str, planned: bool = False) -> int:
        """
        Find or create the station for a raw name.

        Args:
            raw_name: Station name as written in the line data
            planned: Whether the station is under construction

        Returns:
            The station id

        Raises:
            InvalidStationNameError: If the name normalizes to an empty key
            CapacityExceededError: If a new station would exceed capacity
        """
        key = self.normalizer.normalize(raw_name)
        if not key:
            raise InvalidStationNameError(raw_name)

        existing = self._id_by_key.get(key)
        if existing is not None:
            return existing

        if len(self._stations) >= self.capacity:
            raise CapacityExceededError(self.capacity, raw_name)

        station_id = len(self._stations)
        display_name = raw_name.strip() or key
        self._stations.append(Station(
            station_id=station_id,
            display_name=display_name,
            key_name=key,
            planned=bool(planned),
        ))
        self._id_by_key[key] = station_id
        self.logger.debug(f"Registered station {station_id}: '{display_name}' (key '{key}')")
        return station_id

    def tag_line(self, station_id: int, line_name: str) -> None:
        """Add a line to a station's line list if it is not there yet."""
        self.get(station_id).add_line(line_name)

    def get(self, station_id: int) -> Station:
        """Get a station by id; raises KeyError for unknown ids."""
        if 0 <= station_id < len(self._stations):
            return self._stations[station_id]
        raise KeyError(f"Unknown station id: {station_id}")

    def find_by_key(self, key: str) -> Optional[int]:
        """Get the id registered for an already-normalized key."""
        return self._id_by_key.get(key)

    def lookup(self, raw_name: str) -> Optional[int]:
        """Normalize a raw name and return its station id, if registered."""
        key = self.normalizer.normalize(raw_name)
        if not key:
            return None
        return self._id_by_key.get(key)

    def keys_with_prefix(self, prefix: str) -> List[int]:
        """Ids of stations whose key starts with prefix, in id order."""
        return [station.station_id for station in self._stations
                if station.key_name.startswith(prefix)]

    @property
    def station_count(self) -> int:
        return len(self._stations)

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self._stations)

    def __contains__(self, station_id: object) -> bool:
        return isinstance(station_id, int) and 0 <= station_id < len(self._stations)
