"""Configuration loading for deck projects.

This package provides:
- schema.py: Pydantic models for JSON configuration files
- loader.py: File/dict loading with ConfigError reporting
- adapter.py: Conversion from configuration models to domain objects
"""

from decks.application.config.adapter import (
    config_to_footprint,
    config_to_framing,
    config_to_materials,
)
from decks.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from decks.application.config.schema import (
    SUPPORTED_VERSIONS,
    DeckConfiguration,
    FootprintConfig,
    FramingConfigSchema,
    MaterialsConfig,
    PointConfig,
)

__all__ = [
    "ConfigError",
    "DeckConfiguration",
    "FootprintConfig",
    "FramingConfigSchema",
    "MaterialsConfig",
    "PointConfig",
    "SUPPORTED_VERSIONS",
    "config_to_footprint",
    "config_to_framing",
    "config_to_materials",
    "load_config",
    "load_config_from_dict",
]
