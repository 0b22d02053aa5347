"""
Network Graph

Undirected station adjacency for one build of the metro network.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from ..exceptions import InvalidStationNameError
from ..models.station import Station
from .station_registry import StationRegistry, DEFAULT_CAPACITY
from .station_name_normalizer import StationNameNormalizer


class NetworkGraph:
    """
    Stations plus the set of unordered edges between them.

    Adjacency is kept as one neighbour set per station id and grows with the
    registry, so its size follows the real station count. The registry's
    capacity is the only bound.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 normalizer: Optional[StationNameNormalizer] = None,
                 include_planned: bool = True):
        """
        Initialize an empty graph.

        Args:
            capacity: Maximum number of stations
            normalizer: Key builder shared with the registry
            include_planned: Whether planned stations are visible in this build
        """
        self.registry = StationRegistry(capacity=capacity, normalizer=normalizer)
        self.include_planned = include_planned
        self.logger = logging.getLogger(__name__)
        self._adjacency: List[Set[int]] = []
        self._edge_count = 0
        self._line_names: List[str] = []

    def _ensure_slot(self, station_id: int) -> None:
        while len(self._adjacency) <= station_id:
            self._adjacency.append(set())

    def connect(self, a_id: int, b_id: int) -> bool:
        """
        Add the unordered edge (a, b).

        Returns:
            True if a new edge was added; False for self loops and repeats
        """
        if a_id not in self.registry or b_id not in self.registry:
            raise KeyError(f"Cannot connect unknown stations {a_id} and {b_id}")
        if a_id == b_id:
            return False

        self._ensure_slot(max(a_id, b_id))
        if b_id in self._adjacency[a_id]:
            return False

        self._adjacency[a_id].add(b_id)
        self._adjacency[b_id].add(a_id)
        self._edge_count += 1
        return True

    def build_line(self, line_name: str, ordered_station_names: Sequence[str],
                   planned_flags: Optional[Sequence[bool]] = None) -> List[int]:
        """
        Register a line's stations and chain consecutive ones with edges.

        Args:
            line_name: Line name to tag every station with
            ordered_station_names: Raw station names in line order
            planned_flags: Planned flag per position, defaults to all False

        Returns:
            The station ids in line order
        """
        if planned_flags is None:
            planned_flags = [False] * len(ordered_station_names)
        if len(planned_flags) != len(ordered_station_names):
            raise ValueError(f"Line '{line_name}' has {len(ordered_station_names)} stations "
                             f"but {len(planned_flags)} planned flags")

        ids: List[int] = []
        for raw_name, planned in zip(ordered_station_names, planned_flags):
            try:
                station_id = self.registry.register(raw_name, planned)
            except InvalidStationNameError as e:
                raise InvalidStationNameError(raw_name, line_name) from e
            self._ensure_slot(station_id)
            self.registry.tag_line(station_id, line_name)
            ids.append(station_id)

        for a_id, b_id in zip(ids, ids[1:]):
            self.connect(a_id, b_id)

        if line_name not in self._line_names:
            self._line_names.append(line_name)
        self.logger.debug(f"Built line '{line_name}' with {len(ids)} stations")
        return ids

    def connected(self, a_id: int, b_id: int) -> bool:
        """Check whether an edge joins two stations (order does not matter)."""
        if 0 <= a_id < len(self._adjacency):
            return b_id in self._adjacency[a_id]
        return False

    def neighbors(self, station_id: int) -> List[int]:
        """Neighbour ids in increasing order."""
        if 0 <= station_id < len(self._adjacency):
            return sorted(self._adjacency[station_id])
        return []

    def degree(self, station_id: int) -> int:
        if 0 <= station_id < len(self._adjacency):
            return len(self._adjacency[station_id])
        return 0

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Each edge once, as (smaller id, larger id)."""
        for a_id, neighbours in enumerate(self._adjacency):
            for b_id in sorted(neighbours):
                if a_id < b_id:
                    yield a_id, b_id

    def station(self, station_id: int) -> Station:
        return self.registry.get(station_id)

    def is_visible(self, station_id: int) -> bool:
        """Planned stations are hidden unless this build includes them."""
        return self.include_planned or not self.registry.get(station_id).planned

    @property
    def line_names(self) -> List[str]:
        """Names of the lines built into this graph, in build order."""
        return list(self._line_names)

    @property
    def station_count(self) -> int:
        return len(self.registry)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self.registry)
