"""
Route Service Implementation

Query facade over the metro network: building, route lookup, alternates
and line annotation.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..interfaces.i_route_service import IRouteService
from ..models.metro_line import MetroLine
from ..models.results import (
    Endpoint, InvalidName, NoRoute, RouteFound, RouteResult, StationNotFound
)
from ..models.route import EdgeLabel, Route
from ...managers.config_manager import ConfigData
from .alternate_route_finder import AlternateRouteFinder
from .journey_estimator import JourneyEstimate, JourneyEstimator
from .line_segmenter import LineSegmenter
from .network_graph import NetworkGraph
from .network_graph_builder import NetworkGraphBuilder
from .pathfinding_algorithm import PathfindingAlgorithm
from .station_name_normalizer import StationNameNormalizer


@dataclass(frozen=True)
class NetworkSnapshot:
    """One build of the network together with the searchers bound to it."""

    graph: NetworkGraph
    pathfinder: PathfindingAlgorithm
    alternate_finder: AlternateRouteFinder
    segmenter: LineSegmenter

    @classmethod
    def for_graph(cls, graph: NetworkGraph) -> 'NetworkSnapshot':
        pathfinder = PathfindingAlgorithm(graph)
        return cls(
            graph=graph,
            pathfinder=pathfinder,
            alternate_finder=AlternateRouteFinder(pathfinder),
            segmenter=LineSegmenter(graph),
        )


class RouteService(IRouteService):
    """
    Service implementation for route queries.

    A build never mutates the active network: a new snapshot is built on the
    side and swapped in with one assignment, and every query reads the
    snapshot reference once. Station ids are only valid for the snapshot
    that produced them, so paths must not be reused across rebuilds.
    """

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the route service.

        Args:
            config: Application configuration, defaults to ConfigData()
        """
        self.config = config or ConfigData()
        self.logger = logging.getLogger(__name__)
        self.normalizer = StationNameNormalizer(self.config.network.key_max_length)
        self.builder = NetworkGraphBuilder(capacity=self.config.network.max_stations,
                                           normalizer=self.normalizer)
        self.estimator = JourneyEstimator(self.config.journey)

        self._lines: List[MetroLine] = []
        self._snapshot: Optional[NetworkSnapshot] = None
        self._build_lock = threading.Lock()

        self.logger.info("Initialized RouteService")

    # Building

    def build(self, lines: Sequence[MetroLine], include_planned: Optional[bool] = None) -> None:
        """Build the network and make it active; the old build stays on failure."""
        if include_planned is None:
            include_planned = self.config.network.include_planned

        with self._build_lock:
            graph = self.builder.build(list(lines), include_planned=include_planned)
            self._lines = list(lines)
            self._snapshot = NetworkSnapshot.for_graph(graph)

    def rebuild(self, include_planned: bool) -> None:
        """Rebuild from the last line definitions with a new planned visibility."""
        if not self._lines:
            raise RuntimeError("Network has not been built yet")
        self.logger.info(f"Rebuilding network (include_planned={include_planned})")
        self.build(self._lines, include_planned=include_planned)

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None

    @property
    def graph(self) -> NetworkGraph:
        return self._require_snapshot().graph

    @property
    def include_planned(self) -> bool:
        return self._require_snapshot().graph.include_planned

    def _require_snapshot(self) -> NetworkSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise RuntimeError("Network has not been built yet")
        return snapshot

    # Queries

    def find_route(self, raw_source_name: str, raw_dest_name: str) -> RouteResult:
        """Find the minimum-hop route between two station names."""
        snapshot = self._require_snapshot()

        source_key = self.normalizer.normalize(raw_source_name)
        dest_key = self.normalizer.normalize(raw_dest_name)
        invalid = self._endpoint_failure(not source_key, not dest_key,
                                         raw_source_name, raw_dest_name)
        if invalid is not None:
            self.logger.info(f"Invalid station name in query: {raw_source_name!r} -> {raw_dest_name!r}")
            return InvalidName(*invalid)

        source_id = self._visible_id(snapshot.graph, source_key)
        dest_id = self._visible_id(snapshot.graph, dest_key)
        missing = self._endpoint_failure(source_id is None, dest_id is None,
                                         raw_source_name, raw_dest_name)
        if missing is not None:
            self.logger.info(f"Station lookup failed: {raw_source_name!r} -> {raw_dest_name!r}")
            return StationNotFound(*missing)

        path = snapshot.pathfinder.shortest_path(source_id, dest_id)
        if path is None:
            self.logger.info(f"No route between '{raw_source_name}' and '{raw_dest_name}'")
            return NoRoute(source_id=source_id, dest_id=dest_id)

        return RouteFound(path=tuple(path))

    @staticmethod
    def _endpoint_failure(source_failed: bool, dest_failed: bool,
                          raw_source_name: str, raw_dest_name: str):
        if source_failed and dest_failed:
            return Endpoint.BOTH, (raw_source_name, raw_dest_name)
        if source_failed:
            return Endpoint.SOURCE, (raw_source_name,)
        if dest_failed:
            return Endpoint.DESTINATION, (raw_dest_name,)
        return None

    @staticmethod
    def _visible_id(graph: NetworkGraph, key: str) -> Optional[int]:
        station_id = graph.registry.find_by_key(key)
        if station_id is None or not graph.is_visible(station_id):
            return None
        return station_id

    def find_alternates(self, primary_path: Sequence[int],
                        max_alternates: Optional[int] = None) -> List[List[int]]:
        """Find alternates to a primary path by blocking its edges one at a time."""
        snapshot = self._require_snapshot()
        if max_alternates is None:
            max_alternates = self.config.routing.max_alternates
        self._check_path(snapshot.graph, primary_path)
        return snapshot.alternate_finder.find_alternates(primary_path, max_alternates)

    def segment_by_line(self, path: Sequence[int]) -> List[EdgeLabel]:
        """Label each hop of a path with its line."""
        snapshot = self._require_snapshot()
        self._check_path(snapshot.graph, path)
        return snapshot.segmenter.annotate(path)

    def describe_route(self, path: Sequence[int]) -> Route:
        """Build a display model for a path."""
        snapshot = self._require_snapshot()
        self._check_path(snapshot.graph, path)
        graph = snapshot.graph

        interchange_ids = snapshot.segmenter.interchange_stations(path)
        return Route(
            path=tuple(path),
            station_names=tuple(graph.station(station_id).name for station_id in path),
            edge_labels=tuple(snapshot.segmenter.annotate(path)),
            segments=tuple(snapshot.segmenter.segments(path)),
            interchange_stations=tuple(graph.station(station_id).name for station_id in interchange_ids),
            interchange_lines={graph.station(station_id).name: list(graph.station(station_id).lines)
                               for station_id in interchange_ids},
        )

    def estimate(self, route: Route) -> JourneyEstimate:
        """Distance, time and fare estimate for a described route."""
        return self.estimator.estimate(route.hops, len(route.interchange_stations))

    @staticmethod
    def _check_path(graph: NetworkGraph, path: Sequence[int]) -> None:
        for station_id in path:
            if station_id not in graph.registry:
                raise KeyError(f"Station id {station_id} is not part of the current network")

    # Station accessors

    def station_id(self, raw_name: str) -> Optional[int]:
        """Id of a visible station matching a raw name."""
        graph = self._require_snapshot().graph
        key = self.normalizer.normalize(raw_name)
        if not key:
            return None
        return self._visible_id(graph, key)

    def display_name(self, station_id: int) -> str:
        return self.graph.station(station_id).name

    def lines_of(self, station_id: int) -> List[str]:
        return list(self.graph.station(station_id).lines)

    def is_planned(self, station_id: int) -> bool:
        return self.graph.station(station_id).planned
