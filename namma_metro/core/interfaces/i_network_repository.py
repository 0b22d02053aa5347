"""
Network Repository Interface

Interface for loading the declarative line definitions of a network.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.metro_line import MetroLine


class INetworkRepository(ABC):
    """Interface for network data sources."""

    @abstractmethod
    def load_lines(self) -> List[MetroLine]:
        """
        Load all line definitions in build order.

        Returns:
            List of MetroLine objects
        """
        pass

    @abstractmethod
    def get_line_by_name(self, name: str) -> Optional[MetroLine]:
        """
        Get a line definition by its name.

        Args:
            name: Line name to search for

        Returns:
            MetroLine if found, None otherwise
        """
        pass

    @abstractmethod
    def refresh_data(self) -> bool:
        """
        Drop cached data so the next load reads the source again.

        Returns:
            True if the data could be reloaded
        """
        pass
