"""
Metro Line Model

Declarative line definitions used as input when building the network graph.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Tuple, Union


@dataclass(frozen=True)
class StationEntry:
    """One position in a line's station sequence."""

    name: str
    planned: bool = False

    @classmethod
    def from_value(cls, value: Union[str, Dict[str, Any]]) -> 'StationEntry':
        """Create an entry from a plain name or a {"name", "planned"} mapping."""
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, dict) and "name" in value:
            planned = value.get("planned", False)
            if not isinstance(planned, bool):
                raise ValueError(f"'planned' must be true or false, got {planned!r}")
            return cls(name=value["name"], planned=planned)
        raise ValueError(f"Unsupported station entry: {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "planned": self.planned}


@dataclass(frozen=True)
class MetroLine:
    """
    A named, ordered sequence of station entries.

    Lines are transient input: they only exist while a network is being
    built. A single-station line is allowed and yields an isolated station.
    """

    name: str
    stations: Tuple[StationEntry, ...]
    color: str = ""

    def __post_init__(self):
        """Validate line data."""
        if not self.name or not self.name.strip():
            raise ValueError("Line name cannot be empty")

        if not self.stations:
            raise ValueError(f"Line '{self.name}' must have at least 1 station")

        # Accept any iterable of entries or names, store a tuple
        entries = tuple(
            entry if isinstance(entry, StationEntry) else StationEntry.from_value(entry)
            for entry in self.stations
        )
        object.__setattr__(self, 'stations', entries)

    @property
    def station_names(self) -> List[str]:
        """Raw station names in line order."""
        return [entry.name for entry in self.stations]

    @property
    def planned_flags(self) -> List[bool]:
        """Planned flags in line order."""
        return [entry.planned for entry in self.stations]

    @property
    def station_count(self) -> int:
        return len(self.stations)

    @property
    def terminus_stations(self) -> List[str]:
        """Get the terminus stations (first and last)."""
        return [self.stations[0].name, self.stations[-1].name]

    def operational_only(self) -> Optional['MetroLine']:
        """Copy of this line without planned entries, or None if nothing is left."""
        entries = tuple(entry for entry in self.stations if not entry.planned)
        if not entries:
            return None
        return MetroLine(name=self.name, stations=entries, color=self.color)

    def to_dict(self) -> Dict[str, Any]:
        """Convert line to dictionary representation."""
        return {
            "name": self.name,
            "color": self.color,
            "stations": [entry.to_dict() for entry in self.stations],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetroLine':
        """Create MetroLine from dictionary representation."""
        return cls(
            name=data["name"],
            stations=tuple(StationEntry.from_value(value) for value in data["stations"]),
            color=data.get("color", ""),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.station_count} stations)"

    def __len__(self) -> int:
        return self.station_count

    def __iter__(self):
        return iter(self.stations)
