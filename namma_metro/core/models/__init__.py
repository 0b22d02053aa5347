"""
Core Models Package

Data models for the metro route finder.
"""

from .station import Station
from .metro_line import MetroLine, StationEntry
from .route import Route, RouteSegment, EdgeLabel, UNKNOWN_LINE
from .results import (
    Endpoint, RouteFound, InvalidName, StationNotFound, NoRoute, RouteResult
)

__all__ = [
    'Station',
    'MetroLine',
    'StationEntry',
    'Route',
    'RouteSegment',
    'EdgeLabel',
    'UNKNOWN_LINE',
    'Endpoint',
    'RouteFound',
    'InvalidName',
    'StationNotFound',
    'NoRoute',
    'RouteResult'
]
