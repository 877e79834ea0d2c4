"""Domain services for deck geometry and framing."""

from .geometry import (
    bounding_box,
    horizontal_intersections,
    paired_spans,
    point_in_polygon,
    polygon_area,
    polygon_perimeter,
    signed_area,
    to_shapely,
    validate_footprint,
    vertical_intersections,
)
from .framing import (
    CalculationResult,
    DeckCalculator,
    FramingConfig,
    calculate_deck,
)

__all__ = [
    "bounding_box",
    "horizontal_intersections",
    "paired_spans",
    "point_in_polygon",
    "polygon_area",
    "polygon_perimeter",
    "signed_area",
    "to_shapely",
    "validate_footprint",
    "vertical_intersections",
    "CalculationResult",
    "DeckCalculator",
    "FramingConfig",
    "calculate_deck",
]
