"""
Core Package

Core services, interfaces, and models for the metro route finder.
"""

# Import interfaces
from .interfaces import IStationService, IRouteService, INetworkRepository

# Import models
from .models import (
    Station, MetroLine, StationEntry, Route, RouteSegment, EdgeLabel, UNKNOWN_LINE,
    Endpoint, RouteFound, InvalidName, StationNotFound, NoRoute, RouteResult
)

# Import exceptions
from .exceptions import (
    MetroRouterError, CapacityExceededError, InvalidStationNameError, NetworkDataError
)

# Import services
from .services import (
    StationNameNormalizer, StationRegistry, NetworkGraph, NetworkGraphBuilder,
    PathfindingAlgorithm, AlternateRouteFinder, LineSegmenter, RouteService,
    StationService, ServiceFactory, get_service_factory, get_route_service,
    get_station_service, refresh_all_services, shutdown_services
)

__all__ = [
    # Interfaces
    'IStationService',
    'IRouteService',
    'INetworkRepository',

    # Models
    'Station',
    'MetroLine',
    'StationEntry',
    'Route',
    'RouteSegment',
    'EdgeLabel',
    'UNKNOWN_LINE',
    'Endpoint',
    'RouteFound',
    'InvalidName',
    'StationNotFound',
    'NoRoute',
    'RouteResult',

    # Exceptions
    'MetroRouterError',
    'CapacityExceededError',
    'InvalidStationNameError',
    'NetworkDataError',

    # Services
    'StationNameNormalizer',
    'StationRegistry',
    'NetworkGraph',
    'NetworkGraphBuilder',
    'PathfindingAlgorithm',
    'AlternateRouteFinder',
    'LineSegmenter',
    'RouteService',
    'StationService',
    'ServiceFactory',

    # Service Factory Functions
    'get_service_factory',
    'get_route_service',
    'get_station_service',
    'refresh_all_services',
    'shutdown_services'
]
