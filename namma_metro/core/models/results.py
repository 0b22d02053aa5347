"""
Route Query Results

Outcomes of a route query. Lookup and search failures are returned as
values so callers branch on them instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union


class Endpoint(Enum):
    """Which end of a query a failure refers to."""
    SOURCE = "source"
    DESTINATION = "destination"
    BOTH = "both"


@dataclass(frozen=True)
class RouteFound:
    """A minimum-hop path between the requested stations."""

    path: Tuple[int, ...]

    @property
    def source_id(self) -> int:
        return self.path[0]

    @property
    def dest_id(self) -> int:
        return self.path[-1]

    @property
    def hops(self) -> int:
        return len(self.path) - 1

    def as_list(self) -> List[int]:
        return list(self.path)


@dataclass(frozen=True)
class InvalidName:
    """An input name that normalizes to an empty key."""

    which: Endpoint
    raw_names: Tuple[str, ...]

    @property
    def message(self) -> str:
        names = ", ".join(repr(name) for name in self.raw_names)
        return f"Invalid station name for {self.which.value}: {names}"


@dataclass(frozen=True)
class StationNotFound:
    """A name that matches no registered (visible) station."""

    which: Endpoint
    raw_names: Tuple[str, ...]

    @property
    def message(self) -> str:
        if self.which is Endpoint.BOTH:
            return (f"Stations not found:\n - From: {self.raw_names[0]}\n"
                    f" - To: {self.raw_names[1]}")
        if self.which is Endpoint.SOURCE:
            return f"Start station not found: {self.raw_names[0]}"
        return f"Destination station not found: {self.raw_names[0]}"


@dataclass(frozen=True)
class NoRoute:
    """Both endpoints exist but no path connects them."""

    source_id: int
    dest_id: int

    @property
    def message(self) -> str:
        return f"No route found between stations {self.source_id} and {self.dest_id}"


RouteResult = Union[RouteFound, InvalidName, StationNotFound, NoRoute]
