"""
Station Service Interface

Interface for station lookup helpers used around route queries.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.station import Station


class IStationService(ABC):
    """Interface for station services."""

    @abstractmethod
    def get_station_suggestions(self, partial: str, limit: int = 20) -> List[str]:
        """
        Get station names whose key starts with the normalized input.

        Args:
            partial: Partial station name
            limit: Maximum number of suggestions

        Returns:
            Display names in station id order
        """
        pass

    @abstractmethod
    def list_stations(self) -> List[Station]:
        """
        Get every visible station in id order.

        Returns:
            List of Station objects
        """
        pass
