"""
Version information for the Namma Metro route finder.

Centralized version management for the package, the CLI and reports.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "NammaMetro"
__app_display_name__ = "Namma Metro Route Finder"
__description__ = "Minimum-hop route finder for the Namma Metro network"

# Feature information
__features__ = [
    "Station name matching tolerant of punctuation and spacing",
    "Minimum-hop routes with deterministic tie-breaking",
    "Alternate routes avoiding one segment of the primary route",
    "Line segments and interchanges for every route",
    "Distance, time and fare estimates",
    "Planned station visibility toggle",
]

__python_version_required__ = "3.9+"
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_display_name__} v{__version__}"
