"""Adapters from configuration models to domain objects."""

from decks.application.config.loader import ConfigError
from decks.application.config.schema import DeckConfiguration
from decks.domain.services.framing import FramingConfig
from decks.domain.value_objects import (
    DeckFootprint,
    InvalidFootprint,
    MaterialChoice,
    Point,
)


def config_to_footprint(config: DeckConfiguration) -> DeckFootprint:
    """Build a validated DeckFootprint from a configuration.

    Raises:
        ConfigError: With error_type "geometry" if the outline cannot be framed.
    """
    try:
        return DeckFootprint(
            points=tuple(Point(p.x, p.y) for p in config.footprint.points),
            height=config.footprint.height,
        )
    except InvalidFootprint as e:
        raise ConfigError(
            message=f"Invalid footprint: {e.message}",
            error_type="geometry",
            details=[
                {
                    "path": "footprint.points",
                    "message": e.message,
                    "error_type": e.error_type,
                    "reason": e.reason or None,
                }
            ],
        ) from e


def config_to_materials(config: DeckConfiguration) -> MaterialChoice:
    """Build the MaterialChoice from a configuration."""
    return MaterialChoice(
        timber_grade=config.materials.timber_grade,
        decking_type=config.materials.decking_type,
    )


def config_to_framing(config: DeckConfiguration) -> FramingConfig:
    """Build FramingConfig, applying any overrides from the configuration.

    Raises:
        ConfigError: With error_type "validation" if the overrides are
            rejected by FramingConfig.
    """
    if config.framing is None:
        return FramingConfig()

    overrides = config.framing.model_dump(exclude_none=True)
    try:
        return FramingConfig(**overrides)
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid framing configuration: {e}",
            error_type="validation",
            details=[{"path": "framing", "message": str(e)}],
        ) from e
