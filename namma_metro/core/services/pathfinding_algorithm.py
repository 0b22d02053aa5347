"""
Pathfinding Algorithm

Minimum-hop breadth-first search over a NetworkGraph.
"""

import logging
from collections import deque
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .network_graph import NetworkGraph

BlockedEdgeSet = FrozenSet[FrozenSet[int]]

NO_BLOCKED_EDGES: BlockedEdgeSet = frozenset()


def block_edges(*pairs: Tuple[int, int]) -> BlockedEdgeSet:
    """Build a blocked edge set from (a, b) pairs; orientation is ignored."""
    return frozenset(frozenset(pair) for pair in pairs)


def is_blocked(blocked: BlockedEdgeSet, a_id: int, b_id: int) -> bool:
    return bool(blocked) and frozenset((a_id, b_id)) in blocked


class PathfindingAlgorithm:
    """Breadth-first shortest paths on an unweighted graph."""

    def __init__(self, graph: NetworkGraph):
        """
        Initialize the pathfinding algorithm.

        Args:
            graph: Graph to search; never modified by searches
        """
        self.graph = graph
        self.logger = logging.getLogger(__name__)

    def shortest_path(self, source_id: int, dest_id: int,
                      blocked: Optional[Iterable[Iterable[int]]] = None) -> Optional[List[int]]:
        """
        Find a minimum-hop path with BFS.

        Neighbours are expanded in increasing id order, so among equally short
        paths the one found by a left-to-right scan of ids wins. The search
        stops when the destination is dequeued.

        Args:
            source_id: Start station id
            dest_id: Destination station id
            blocked: Edges to ignore for this call, as unordered pairs

        Returns:
            The path as a list of station ids, or None if none exists
        """
        if source_id not in self.graph.registry or dest_id not in self.graph.registry:
            raise KeyError(f"Unknown station id in query: {source_id} -> {dest_id}")

        blocked_set = self._as_blocked_set(blocked)

        parent: Dict[int, Optional[int]] = {source_id: None}
        queue = deque([source_id])
        nodes_explored = 0

        while queue:
            current = queue.popleft()
            nodes_explored += 1

            if current == dest_id:
                path = self._reconstruct(parent, dest_id)
                self.logger.debug(f"Found {len(path) - 1}-hop path {source_id} -> {dest_id} "
                                  f"after exploring {nodes_explored} nodes")
                return path

            for neighbour in self.graph.neighbors(current):
                if neighbour in parent:
                    continue
                if is_blocked(blocked_set, current, neighbour):
                    continue
                parent[neighbour] = current
                queue.append(neighbour)

        self.logger.debug(f"No path {source_id} -> {dest_id} "
                          f"({len(blocked_set)} blocked edges, {nodes_explored} nodes explored)")
        return None

    @staticmethod
    def _as_blocked_set(blocked: Optional[Iterable[Iterable[int]]]) -> BlockedEdgeSet:
        if not blocked:
            return NO_BLOCKED_EDGES
        if isinstance(blocked, frozenset):
            return blocked
        return frozenset(frozenset(pair) for pair in blocked)

    @staticmethod
    def _reconstruct(parent: Dict[int, Optional[int]], dest_id: int) -> List[int]:
        path = []
        current: Optional[int] = dest_id
        while current is not None:
            path.append(current)
            current = parent[current]
        path.reverse()
        return path
