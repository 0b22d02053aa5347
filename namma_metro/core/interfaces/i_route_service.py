"""
Route Service Interface

Interface for route queries over a built metro network.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models.metro_line import MetroLine
from ..models.results import RouteResult
from ..models.route import EdgeLabel, Route


class IRouteService(ABC):
    """Interface for route query services."""

    @abstractmethod
    def build(self, lines: Sequence[MetroLine], include_planned: Optional[bool] = None) -> None:
        """
        Build the network from line definitions, replacing any previous build.

        Args:
            lines: Line definitions in build order
            include_planned: Whether planned stations take part in this build
        """
        pass

    @abstractmethod
    def find_route(self, raw_source_name: str, raw_dest_name: str) -> RouteResult:
        """
        Find the minimum-hop route between two station names.

        Args:
            raw_source_name: Starting station as typed
            raw_dest_name: Destination station as typed

        Returns:
            RouteFound, InvalidName, StationNotFound or NoRoute
        """
        pass

    @abstractmethod
    def find_alternates(self, primary_path: Sequence[int],
                        max_alternates: Optional[int] = None) -> List[List[int]]:
        """
        Find alternates to a primary path by blocking its edges one at a time.

        Args:
            primary_path: Path returned by find_route
            max_alternates: Upper bound on results, defaults to configuration

        Returns:
            Distinct alternate paths
        """
        pass

    @abstractmethod
    def segment_by_line(self, path: Sequence[int]) -> List[EdgeLabel]:
        """
        Label each hop of a path with its line.

        Args:
            path: Station ids in travel order

        Returns:
            One EdgeLabel per hop
        """
        pass

    @abstractmethod
    def describe_route(self, path: Sequence[int]) -> Route:
        """
        Build a display model for a path.

        Args:
            path: Station ids in travel order

        Returns:
            Route with names, segments and interchanges filled in
        """
        pass
