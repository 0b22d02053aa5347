"""Custom exceptions for the metro route finder.

Only build-time problems are raised. Query failures (unknown station,
no route) are returned as result values from RouteService.
"""


class MetroRouterError(Exception):
    """Base exception for metro route finder errors."""

    pass


class CapacityExceededError(MetroRouterError):
    """Raised when a network build registers more stations than allowed."""

    def __init__(self, capacity: int, station_name: str = ""):
        self.capacity = capacity
        self.station_name = station_name
        message = f"Station capacity of {capacity} exceeded"
        if station_name:
            message += f" while registering '{station_name}'"
        super().__init__(message)


class InvalidStationNameError(MetroRouterError):
    """Raised when a line definition contains a name with an empty key."""

    def __init__(self, raw_name: str, line_name: str = ""):
        self.raw_name = raw_name
        self.line_name = line_name
        location = f" on line '{line_name}'" if line_name else ""
        super().__init__(f"Station name {raw_name!r}{location} normalizes to an empty key")


class NetworkDataError(MetroRouterError):
    """Raised when network definition files are missing or malformed."""

    pass
