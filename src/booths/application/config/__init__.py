"""Configuration schema and loading system for booth specifications.

This package provides JSON-based configuration loading and validation
for booths: Pydantic models for the schema, a loader with clear error
reporting, and an adapter that builds the domain layout.

Public API:
    - BoothConfiguration: Root configuration model
    - FloorConfig, WallsConfig, GraphicsConfig, OptionsConfig: Sections
    - ComponentConfig: Discriminated union of component configurations
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_layout: Build a BoothLayout and placement warnings

Example:
    >>> from pathlib import Path
    >>> from booths.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("booth.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from booths.application.config.adapter import (
    config_to_floor,
    config_to_layout,
    config_to_options,
)
from booths.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from booths.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BoothConfiguration,
    ComponentConfig,
    CounterConfig,
    FloorConfig,
    FurnitureConfig,
    GraphicsConfig,
    OptionsConfig,
    PlantConfig,
    ShelfConfig,
    SpeakerConfig,
    StorageConfig,
    TrussConfig,
    TvConfig,
    WallsConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoothConfiguration",
    "ComponentConfig",
    "ConfigError",
    "CounterConfig",
    "FloorConfig",
    "FurnitureConfig",
    "GraphicsConfig",
    "OptionsConfig",
    "PlantConfig",
    "ShelfConfig",
    "SpeakerConfig",
    "StorageConfig",
    "TrussConfig",
    "TvConfig",
    "WallsConfig",
    "config_to_floor",
    "config_to_layout",
    "config_to_options",
    "load_config",
    "load_config_from_dict",
]
