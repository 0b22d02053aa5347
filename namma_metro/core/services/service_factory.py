"""
Service Factory

Factory for creating and managing core service instances.
"""

import logging
from typing import Optional, Dict, Any

from ..interfaces.i_network_repository import INetworkRepository
from ...managers.config_manager import ConfigData
from .json_network_repository import JsonNetworkRepository
from .route_service import RouteService
from .station_service import StationService


class ServiceFactory:
    """Factory for creating and managing core service instances."""

    def __init__(self, config: Optional[ConfigData] = None,
                 data_repository: Optional[INetworkRepository] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults to ConfigData()
            data_repository: Network data source, defaults to the JSON repository
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()

        # Service instances (singletons)
        self._data_repository: Optional[INetworkRepository] = data_repository
        self._route_service: Optional[RouteService] = None
        self._station_service: Optional[StationService] = None

        self.logger.info("Initialized ServiceFactory")

    def get_data_repository(self) -> INetworkRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = JsonNetworkRepository(self.config.network.data_directory)
            self.logger.info("Created JsonNetworkRepository instance")

        return self._data_repository

    def get_route_service(self) -> RouteService:
        """Get or create the route service, building the network on first use."""
        if self._route_service is None:
            route_service = RouteService(self.config)
            route_service.build(self.get_data_repository().load_lines())
            self._route_service = route_service
            self.logger.info("Created RouteService instance")

        return self._route_service

    def get_station_service(self) -> StationService:
        """Get or create the station service instance."""
        if self._station_service is None:
            self._station_service = StationService(self.get_route_service())
            self.logger.info("Created StationService instance")

        return self._station_service

    def refresh_all_services(self) -> bool:
        """Reload network data and rebuild the active network."""
        data_repository = self.get_data_repository()
        if not data_repository.refresh_data():
            self.logger.error("Failed to refresh data repository")
            return False

        if self._route_service is not None:
            self._route_service.build(data_repository.load_lines())

        self.logger.info("All services refreshed successfully")
        return True

    def get_service_statistics(self) -> Dict[str, Any]:
        """Get statistics from all services."""
        stats: Dict[str, Any] = {}
        if self._station_service is not None:
            stats['station_service'] = self._station_service.get_station_statistics()
        if self._route_service is not None and self._route_service.is_built:
            stats['include_planned'] = self._route_service.include_planned
        return stats

    def shutdown(self) -> None:
        """Drop all service instances."""
        self._data_repository = None
        self._route_service = None
        self._station_service = None
        self.logger.info("All services shut down successfully")


# Global service factory instance
_service_factory: Optional[ServiceFactory] = None


def get_service_factory(config: Optional[ConfigData] = None) -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory(config)

    return _service_factory


def get_data_repository() -> INetworkRepository:
    """Get the data repository service."""
    return get_service_factory().get_data_repository()


def get_route_service() -> RouteService:
    """Get the route service."""
    return get_service_factory().get_route_service()


def get_station_service() -> StationService:
    """Get the station service."""
    return get_service_factory().get_station_service()


def refresh_all_services() -> bool:
    """Refresh all services."""
    return get_service_factory().refresh_all_services()


def shutdown_services() -> None:
    """Shutdown all services."""
    global _service_factory

    if _service_factory:
        _service_factory.shutdown()
        _service_factory = None
