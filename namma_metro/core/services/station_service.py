"""
Station Service Implementation

Station suggestions and listings for callers around route queries.
"""

import logging
from typing import List, Optional

from ..interfaces.i_station_service import IStationService
from ..models.station import Station
from .route_service import RouteService

DEFAULT_SUGGESTION_LIMIT = 20


class StationService(IStationService):
    """Service implementation for station operations."""

    def __init__(self, route_service: RouteService):
        """
        Initialize the station service.

        Args:
            route_service: Route service owning the active network build
        """
        self.route_service = route_service
        self.logger = logging.getLogger(__name__)

    def get_station_suggestions(self, partial: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        """
        Get station name suggestions based on partial input.

        The input is normalized the same way station names are, then matched
        as a prefix of each station key.
        """
        prefix = self.route_service.normalizer.normalize(partial or "")
        if not prefix or limit <= 0:
            return []

        graph = self.route_service.graph
        suggestions = []
        for station_id in graph.registry.keys_with_prefix(prefix):
            if not graph.is_visible(station_id):
                continue
            suggestions.append(graph.station(station_id).name)
            if len(suggestions) >= limit:
                break

        self.logger.debug(f"{len(suggestions)} suggestions for '{partial}'")
        return suggestions

    def list_stations(self) -> List[Station]:
        """Get every visible station in id order."""
        graph = self.route_service.graph
        return [station for station in graph.registry if graph.is_visible(station.station_id)]

    def get_interchange_stations(self) -> List[Station]:
        """Visible stations served by more than one line."""
        return [station for station in self.list_stations() if station.is_interchange]

    def resolve_station(self, raw_name: str) -> Optional[Station]:
        """Get the visible station for a raw name, if any."""
        station_id = self.route_service.station_id(raw_name)
        if station_id is None:
            return None
        return self.route_service.graph.station(station_id)

    def get_station_statistics(self) -> dict:
        """Counts for the active build."""
        graph = self.route_service.graph
        stations = self.list_stations()
        return {
            "stations": len(stations),
            "interchanges": sum(1 for station in stations if station.is_interchange),
            "planned": sum(1 for station in stations if station.planned),
            "connections": graph.edge_count,
            "lines": graph.line_names,
        }
