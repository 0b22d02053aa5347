"""
Alternate Route Finder

Finds detours by blocking one edge of the primary path at a time.
"""

import logging
from typing import List, Sequence

from .pathfinding_algorithm import PathfindingAlgorithm, block_edges

DEFAULT_MAX_ALTERNATES = 3


class AlternateRouteFinder:
    """
    Suggests alternates to a primary path.

    Each primary edge is blocked on its own and the search is repeated
    between the same endpoints. This finds "avoid this segment" detours; it
    is not a k-shortest-paths algorithm and may miss other simple paths.
    """

    def __init__(self, pathfinder: PathfindingAlgorithm):
        self.pathfinder = pathfinder
        self.logger = logging.getLogger(__name__)

    def find_alternates(self, primary: Sequence[int],
                        max_alternates: int = DEFAULT_MAX_ALTERNATES) -> List[List[int]]:
        """
        Collect distinct alternates, first-edge-blocked first.

        Args:
            primary: The primary path
            max_alternates: Upper bound on the number of alternates

        Returns:
            Alternate paths, each different from the primary and from each other
        """
        primary_path = list(primary)
        alternates: List[List[int]] = []
        if len(primary_path) < 2 or max_alternates <= 0:
            return alternates

        source_id, dest_id = primary_path[0], primary_path[-1]

        for a_id, b_id in zip(primary_path, primary_path[1:]):
            if len(alternates) >= max_alternates:
                break

            candidate = self.pathfinder.shortest_path(
                source_id, dest_id, blocked=block_edges((a_id, b_id)))
            if candidate is None:
                self.logger.debug(f"No detour around edge {a_id}-{b_id}")
                continue
            if candidate == primary_path or candidate in alternates:
                continue

            alternates.append(candidate)

        self.logger.debug(f"Found {len(alternates)} alternates for {source_id} -> {dest_id}")
        return alternates
