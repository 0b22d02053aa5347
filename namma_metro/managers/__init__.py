"""
Managers package for the Namma Metro route finder.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    NetworkConfig,
    RoutingConfig,
    JourneyConfig,
    FareSlab,
    ConfigurationError,
)

__all__ = [
    "ConfigManager",
    "ConfigData",
    "NetworkConfig",
    "RoutingConfig",
    "JourneyConfig",
    "FareSlab",
    "ConfigurationError",
]
