"""
Station Model

Data model for a metro station inside one built network.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class Station:
    """
    A station registered in a StationRegistry.

    The identity (station_id) is a dense index that is only meaningful within
    the network build that created it. The line list keeps first-insertion
    order and never holds duplicates.
    """

    station_id: int
    display_name: str
    key_name: str
    planned: bool = False
    lines: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate station data after initialization."""
        if self.station_id < 0:
            raise ValueError("Station id cannot be negative")
        if not self.key_name:
            raise ValueError("Station key cannot be empty")

    @property
    def name(self) -> str:
        """Name for display, falling back to the matching key."""
        return self.display_name or self.key_name

    @property
    def line_count(self) -> int:
        """Number of lines serving this station."""
        return len(self.lines)

    @property
    def is_interchange(self) -> bool:
        """Check if this station is an interchange."""
        return len(self.lines) > 1

    def serves_line(self, line_name: str) -> bool:
        """Check if this station serves a specific line."""
        return line_name in self.lines

    def add_line(self, line_name: str) -> bool:
        """Add a line to this station. Returns False if it was already present."""
        if line_name in self.lines:
            return False
        self.lines.append(line_name)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "station_id": self.station_id,
            "display_name": self.display_name,
            "key_name": self.key_name,
            "planned": self.planned,
            "lines": list(self.lines),
            "is_interchange": self.is_interchange,
        }

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Station(id={self.station_id}, key='{self.key_name}', lines={self.lines})"
