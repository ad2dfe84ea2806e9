"""
Configuration management for the railpath geometry engine.

This module handles loading, saving, and validating configuration using
Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SEVEN_DAYS_SECONDS = 7 * 24 * 60 * 60


class OverpassConfig(BaseModel):
    """Configuration for Overpass API access."""

    base_url: str = "https://overpass-api.de/api/interpreter"
    query_timeout_seconds: int = Field(25, gt=0, description="Server-side Overpass QL timeout")
    timeout_seconds: int = Field(30, gt=0, description="Client-side request timeout")
    max_retries: int = Field(3, ge=1)
    rate_limit_per_minute: int = Field(10, gt=0)
    user_agent: str = "railpath/1.0"
    excluded_services: str = "siding|yard|crossover|spur"


class GeometryConfig(BaseModel):
    """Thresholds used by path construction, all in degrees unless noted."""

    snap_resolution: float = Field(0.001, gt=0, description="Endpoint snapping grid (~100m)")
    query_padding: float = Field(0.1, gt=0, description="Padding around the stations when querying segments")
    corridor_margin: float = Field(0.1, gt=0, description="Corridor margin for graph and greedy assembly")
    proximity_corridor_margin: float = Field(0.15, gt=0, description="Corridor margin for proximity ordering")
    connection_threshold: float = Field(0.005, gt=0, description="Max gap between chained segments (~500m)")
    backtrack_tolerance: float = Field(0.02, gt=0, description="Allowed move away from destination (~2km)")
    junction_tolerance: float = Field(0.002, gt=0, description="Gap under which junction points merge (~200m)")
    arrival_threshold: float = Field(0.01, gt=0, description="Distance counted as arrived (~1km)")
    max_length_ratio: float = Field(3.0, gt=0, description="Max path length relative to the direct distance")
    max_backtrack_ratio: float = Field(0.2, gt=0, description="Max share of backtracking steps")
    min_spacing: float = Field(0.001, gt=0, description="Min spacing between kept points (~100m)")
    sharp_turn_angle: float = Field(60.0, gt=0, lt=180, description="Interior angle in degrees below which a vertex is dropped")


class CacheConfig(BaseModel):
    """Configuration for the geometry cache."""

    enabled: bool = True
    cache_dir: str = Field(default_factory=lambda: str(ConfigManager.get_default_cache_dir()))
    ttl_seconds: int = Field(SEVEN_DAYS_SECONDS, gt=0)
    memory_max_size: int = Field(500, gt=0)
    disk_max_size_mb: int = Field(50, gt=0)


class ConfigData(BaseModel):
    """Main configuration data model."""

    overpass: OverpassConfig = Field(default_factory=OverpassConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    interchange_graph_path: Optional[str] = None


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def _get_app_dir(xdg_variable: str, fallback: Path) -> Path:
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "railpath"
        xdg_dir = os.environ.get(xdg_variable)
        if xdg_dir:
            return Path(xdg_dir) / "railpath"
        return fallback / "railpath"

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/railpath/config.json
        On Linux, uses XDG_CONFIG_HOME/railpath/config.json or ~/.config/railpath/config.json

        Returns:
            Path: Default configuration file path
        """
        config_dir = ConfigManager._get_app_dir("XDG_CONFIG_HOME", Path.home() / ".config")
        return config_dir / "config.json"

    @staticmethod
    def get_default_cache_dir() -> Path:
        """Default directory for the persistent geometry cache."""
        cache_root = ConfigManager._get_app_dir("XDG_CACHE_HOME", Path.home() / ".cache")
        return cache_root / "geometry"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file, creating defaults if the file is missing.

        Returns:
            ConfigData: Loaded configuration

        Raises:
            ConfigurationError: If the file cannot be parsed or validated
        """
        if not self.config_path.exists():
            logger.info(f"No configuration at {self.config_path}, creating defaults")
            self.config = ConfigData()
            self.save_config(self.config)
            return self.config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.info(f"Configuration loaded from {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read config file: {e}")

    def save_config(self, config: Optional[ConfigData] = None) -> None:
        """
        Save configuration to file.

        Args:
            config: Configuration to save. If None, saves the current config

        Raises:
            ConfigurationError: If there is no configuration or it cannot be written
        """
        config_to_save = config or self.config
        if config_to_save is None:
            raise ConfigurationError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config_to_save.model_dump(), f, indent=2)
            self.config = config_to_save
            logger.debug(f"Configuration saved to {self.config_path}")
        except OSError as e:
            raise ConfigurationError(f"Failed to save config: {e}")
