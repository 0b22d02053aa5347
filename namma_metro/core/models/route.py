"""
Route Model

Data models for describing a path through the network for reporting.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple


UNKNOWN_LINE = "unknown"


@dataclass(frozen=True)
class EdgeLabel:
    """The line that justifies one hop of a path."""

    edge_index: int
    line_name: str

    @property
    def is_unknown(self) -> bool:
        return self.line_name == UNKNOWN_LINE


@dataclass(frozen=True)
class RouteSegment:
    """
    A run of consecutive hops travelled on the same line.

    start_index and end_index are station positions in the path, so a
    segment covers end_index - start_index hops.
    """

    line_name: str
    start_index: int
    end_index: int
    from_station: str
    to_station: str

    def __post_init__(self):
        """Validate route segment data."""
        if not self.from_station or not self.to_station:
            raise ValueError("From and to stations cannot be empty")
        if not self.line_name:
            raise ValueError("Line name cannot be empty")
        if self.end_index <= self.start_index:
            raise ValueError("Segment must cover at least one hop")

    @property
    def stops(self) -> int:
        """Number of hops travelled in this segment."""
        return self.end_index - self.start_index


@dataclass(frozen=True)
class Route:
    """
    A path annotated for display.

    Built by RouteService.describe_route from a path of station ids; it is
    produced fresh per query and never persisted.
    """

    path: Tuple[int, ...]
    station_names: Tuple[str, ...]
    edge_labels: Tuple[EdgeLabel, ...]
    segments: Tuple[RouteSegment, ...]
    interchange_stations: Tuple[str, ...] = field(default_factory=tuple)
    interchange_lines: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Validate route data."""
        if not self.path:
            raise ValueError("Route must contain at least one station")
        if len(self.station_names) != len(self.path):
            raise ValueError("Station names must match the path length")
        if len(self.edge_labels) != len(self.path) - 1:
            raise ValueError("Route needs one edge label per hop")

    @property
    def from_station(self) -> str:
        return self.station_names[0]

    @property
    def to_station(self) -> str:
        return self.station_names[-1]

    @property
    def hops(self) -> int:
        """Number of stations travelled."""
        return len(self.path) - 1

    @property
    def lines_used(self) -> List[str]:
        """Lines used in travel order, without repeats."""
        lines: List[str] = []
        for segment in self.segments:
            if segment.line_name not in lines:
                lines.append(segment.line_name)
        return lines

    @property
    def changes_required(self) -> int:
        """Line changes between consecutive segments."""
        return max(len(self.segments) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            "path": list(self.path),
            "stations": list(self.station_names),
            "hops": self.hops,
            "segments": [
                {
                    "line": segment.line_name,
                    "from": segment.from_station,
                    "to": segment.to_station,
                    "stops": segment.stops,
                }
                for segment in self.segments
            ],
            "interchanges": list(self.interchange_stations),
            "changes_required": self.changes_required,
        }

    def __str__(self) -> str:
        return " -> ".join(self.station_names)
