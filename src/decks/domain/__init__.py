"""Domain layer - deck geometry, framing rules and quantities."""

from .services import (
    CalculationResult,
    DeckCalculator,
    FramingConfig,
    calculate_deck,
)
from .value_objects import (
    BoundingBox,
    DeckFootprint,
    DeckingType,
    InvalidFootprint,
    MaterialChoice,
    Point,
    TimberGrade,
)

__all__ = [
    "BoundingBox",
    "CalculationResult",
    "DeckCalculator",
    "DeckFootprint",
    "DeckingType",
    "FramingConfig",
    "InvalidFootprint",
    "MaterialChoice",
    "Point",
    "TimberGrade",
    "calculate_deck",
]
