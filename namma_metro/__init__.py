"""
Namma Metro route finder.

Minimum-hop routes, alternates and line segments over a fixed multi-line
metro network.
"""

from .version import __version__, __app_name__, __app_display_name__

__all__ = ["__version__", "__app_name__", "__app_display_name__"]
