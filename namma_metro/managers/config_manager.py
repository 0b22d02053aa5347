"""
Configuration management for the Namma Metro route finder.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

from ..version import __app_name__

logger = logging.getLogger(__name__)


class NetworkConfig(BaseModel):
    """Configuration for building the network graph."""

    include_planned: bool = True
    max_stations: int = Field(default=400, ge=1, description="Station capacity per build")
    key_max_length: int = Field(default=79, ge=8, description="Longest normalized station key")
    data_directory: Optional[str] = Field(
        default=None, description="Directory holding network_index.json; packaged data if unset"
    )


class RoutingConfig(BaseModel):
    """Configuration for route queries."""

    max_alternates: int = Field(default=3, ge=0, le=20)
    suggestion_limit: int = Field(default=20, ge=1, le=100)


class FareSlab(BaseModel):
    """Fare charged for trips up to max_km."""

    max_km: float = Field(..., gt=0)
    fare: int = Field(..., ge=0)


def _default_fare_slabs() -> List[FareSlab]:
    return [
        FareSlab(max_km=2, fare=10),
        FareSlab(max_km=4, fare=20),
        FareSlab(max_km=6, fare=30),
        FareSlab(max_km=8, fare=40),
        FareSlab(max_km=10, fare=50),
        FareSlab(max_km=15, fare=60),
        FareSlab(max_km=20, fare=70),
        FareSlab(max_km=25, fare=80),
    ]


class JourneyConfig(BaseModel):
    """Constants for journey distance, time and fare estimates."""

    km_per_hop: float = Field(default=1.1, gt=0, description="Approximate km between stations")
    minutes_per_hop: int = Field(default=2, ge=0, description="Travel time between adjacent stations")
    interchange_minutes: int = Field(default=3, ge=0, description="Extra time per interchange station")
    fare_slabs: List[FareSlab] = Field(default_factory=_default_fare_slabs)
    max_fare: int = Field(default=90, ge=0, description="Fare beyond the last slab")
    currency: str = "Rs"

    @field_validator("fare_slabs")
    @classmethod
    def validate_fare_slabs(cls, slabs: List[FareSlab]) -> List[FareSlab]:
        """Slabs must be listed by increasing distance."""
        distances = [slab.max_km for slab in slabs]
        if distances != sorted(distances) or len(set(distances)) != len(distances):
            raise ValueError("fare_slabs must have strictly increasing max_km")
        return slabs


class ConfigData(BaseModel):
    """Main configuration data model."""

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    journey: JourneyConfig = Field(default_factory=JourneyConfig)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses APPDATA/NammaMetro/config.json
        Elsewhere, uses XDG_CONFIG_HOME/NammaMetro/config.json or
        ~/.config/NammaMetro/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / __app_name__ / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / __app_name__
        else:
            config_dir = Path.home() / ".config" / __app_name__
        return config_dir / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()
            return self.config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load config: {e}") from e

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            self.config = config
            return True
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        default_config = ConfigData()
        if not self.save_config(default_config):
            # Keep working with defaults even if the file cannot be written
            self.config = default_config

    def update_include_planned(self, include_planned: bool) -> None:
        """
        Update planned station visibility and save to file.

        Args:
            include_planned: Whether planned stations are part of the network
        """
        if self.config is None:
            self.load_config()

        self.config.network.include_planned = include_planned
        self.save_config(self.config)

    def update_max_alternates(self, max_alternates: int) -> None:
        """
        Update the alternate route cap and save to file.

        Args:
            max_alternates: Number of alternates to suggest (0-20)
        """
        if self.config is None:
            self.load_config()

        if 0 <= max_alternates <= 20:
            self.config.routing.max_alternates = max_alternates
            self.save_config(self.config)

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "config_path": str(self.config_path),
            "include_planned": self.config.network.include_planned,
            "max_stations": self.config.network.max_stations,
            "max_alternates": self.config.routing.max_alternates,
            "km_per_hop": self.config.journey.km_per_hop,
            "minutes_per_hop": self.config.journey.minutes_per_hop,
            "interchange_minutes": self.config.journey.interchange_minutes,
            "log_level": self.config.log_level,
        }
