"""
Network Graph Builder

Replays declarative line definitions into a fresh NetworkGraph.
"""

import logging
from typing import List, Optional, Sequence

from ..interfaces.i_network_repository import INetworkRepository
from ..models.metro_line import MetroLine
from .network_graph import NetworkGraph
from .station_registry import DEFAULT_CAPACITY
from .station_name_normalizer import StationNameNormalizer


class NetworkGraphBuilder:
    """
    Builds NetworkGraph values from line definitions.

    Every build starts from an empty graph and replays the lines in the given
    order, which makes station ids deterministic for a given input. There is
    no incremental update: toggling planned stations means building again.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 normalizer: Optional[StationNameNormalizer] = None,
                 data_repository: Optional[INetworkRepository] = None):
        """
        Initialize the network graph builder.

        Args:
            capacity: Station capacity for every graph built
            normalizer: Key builder shared by the built graphs
            data_repository: Source of line definitions for build_from_repository
        """
        self.capacity = capacity
        self.normalizer = normalizer or StationNameNormalizer()
        self.data_repository = data_repository
        self.logger = logging.getLogger(__name__)

    def build(self, lines: Sequence[MetroLine], include_planned: bool = True) -> NetworkGraph:
        """
        Build a network graph from line definitions.

        Args:
            lines: Lines in build order
            include_planned: When False, planned entries are dropped from each
                line before chaining, joining their operational neighbours.
                Those joined pairs are edges that were never adjacent in the
                declared station sequence.

        Returns:
            The new graph

        Raises:
            CapacityExceededError: If the lines reference too many stations
            InvalidStationNameError: If a station name has an empty key
        """
        self.logger.info(f"Building metro network from {len(lines)} lines "
                         f"(include_planned={include_planned})")
        graph = NetworkGraph(capacity=self.capacity, normalizer=self.normalizer,
                             include_planned=include_planned)

        for line in lines:
            if not include_planned:
                operational = line.operational_only()
                if operational is None:
                    self.logger.info(f"Skipping line '{line.name}': all stations are planned")
                    continue
                if operational.station_count != line.station_count:
                    self.logger.debug(f"Line '{line.name}': hiding "
                                      f"{line.station_count - operational.station_count} planned stations")
                line = operational

            graph.build_line(line.name, line.station_names, line.planned_flags)

        self.logger.info(f"Built metro network with {graph.station_count} stations "
                         f"and {graph.edge_count} connections")
        return graph

    def build_from_repository(self, include_planned: bool = True) -> NetworkGraph:
        """Build a graph from the lines held by the data repository."""
        if self.data_repository is None:
            raise ValueError("No data repository configured")
        lines: List[MetroLine] = self.data_repository.load_lines()
        return self.build(lines, include_planned=include_planned)
