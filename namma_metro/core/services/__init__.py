"""
Core Services Package

Service implementations for the metro route finder.
"""

from .station_name_normalizer import StationNameNormalizer, normalize_station_name
from .station_registry import StationRegistry
from .network_graph import NetworkGraph
from .network_graph_builder import NetworkGraphBuilder
from .pathfinding_algorithm import PathfindingAlgorithm, BlockedEdgeSet, block_edges
from .alternate_route_finder import AlternateRouteFinder
from .line_segmenter import LineSegmenter
from .journey_estimator import JourneyEstimator, JourneyEstimate
from .route_formatter import RouteFormatter
from .json_network_repository import JsonNetworkRepository
from .route_service import RouteService
from .station_service import StationService
from .service_factory import (
    ServiceFactory,
    get_service_factory,
    get_data_repository,
    get_route_service,
    get_station_service,
    refresh_all_services,
    shutdown_services
)

__all__ = [
    'StationNameNormalizer',
    'normalize_station_name',
    'StationRegistry',
    'NetworkGraph',
    'NetworkGraphBuilder',
    'PathfindingAlgorithm',
    'BlockedEdgeSet',
    'block_edges',
    'AlternateRouteFinder',
    'LineSegmenter',
    'JourneyEstimator',
    'JourneyEstimate',
    'RouteFormatter',
    'JsonNetworkRepository',
    'RouteService',
    'StationService',
    'ServiceFactory',
    'get_service_factory',
    'get_data_repository',
    'get_route_service',
    'get_station_service',
    'refresh_all_services',
    'shutdown_services'
]
