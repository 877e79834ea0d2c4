"""Value objects for the deck domain.

All coordinates and lengths are in millimeters unless a name says
otherwise (``*_m`` for meters, ``*_m2`` for square meters).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class InvalidFootprint(ValueError):
    """Raised when a footprint polygon cannot be framed.

    Attributes:
        message: Human-readable description of the problem.
        error_type: One of "too_few_points", "non_finite", "degenerate",
            "self_intersecting", "invalid_height".
        reason: Validity explanation from the geometry check, when applicable.
    """

    VALID_ERROR_TYPES = frozenset(
        {
            "too_few_points",
            "non_finite",
            "degenerate",
            "self_intersecting",
            "invalid_height",
        }
    )

    def __init__(
        self,
        message: str,
        error_type: str,
        reason: str = "",
    ) -> None:
        if error_type not in self.VALID_ERROR_TYPES:
            raise ValueError(
                f"error_type must be one of {sorted(self.VALID_ERROR_TYPES)}, "
                f"got '{error_type}'"
            )
        self.message = message
        self.error_type = error_type
        self.reason = reason
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class TimberGrade(str, Enum):
    """Structural timber grades available for framing."""

    SG8_WET = "sg8_wet"
    SG8_DRY = "sg8_dry"
    SG10_WET = "sg10_wet"


class DeckingType(str, Enum):
    """Decking board profiles."""

    PREMIUM_PINE_90 = "premium_pine_90"
    PREMIUM_PINE_140 = "premium_pine_140"
    KWILA_90 = "kwila_90"


@dataclass(frozen=True)
class Point:
    """Planar point in plan coordinates (mm).

    Negative values are valid; the footprint may sit anywhere on the plane.
    """

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a footprint.

    ``width`` is the x-extent and ``projection`` is the y-extent, matching
    how a deck is measured along the house wall and out from it.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def projection(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class DeckFootprint:
    """Deck outline plus the height of the deck surface above ground.

    Points are ordered; edge i joins point i to point (i + 1) mod N. The
    closing point is implied and must not be repeated.

    Construction validates the polygon (see
    ``decks.domain.services.geometry.validate_footprint``) and raises
    ``InvalidFootprint`` for anything the framing engine cannot handle.

    Attributes:
        points: Ordered polygon vertices in mm.
        height: Deck surface height above ground in mm.
    """

    points: tuple[Point, ...]
    height: float = 0.0

    def __post_init__(self) -> None:
        # Accept any sequence of points but store an immutable tuple
        object.__setattr__(self, "points", tuple(self.points))

        if not math.isfinite(self.height) or self.height < 0:
            raise InvalidFootprint(
                f"Deck height must be a finite, non-negative value, got {self.height}",
                error_type="invalid_height",
            )

        from decks.domain.services.geometry import validate_footprint

        validate_footprint(self.points)

    @classmethod
    def rectangle(cls, width: float, depth: float, height: float = 0.0) -> DeckFootprint:
        """Rectangular footprint with one corner at the origin.

        Args:
            width: Extent along the x axis in mm.
            depth: Extent along the y axis in mm.
            height: Deck height above ground in mm.

        Returns:
            Four-point footprint listed counter-clockwise from (0, 0).
        """
        return cls(
            points=(
                Point(0.0, 0.0),
                Point(width, 0.0),
                Point(width, depth),
                Point(0.0, depth),
            ),
            height=height,
        )

    @classmethod
    def from_coordinates(
        cls, coordinates: Sequence[tuple[float, float]], height: float = 0.0
    ) -> DeckFootprint:
        """Build a footprint from plain (x, y) pairs."""
        return cls(points=tuple(Point(x, y) for x, y in coordinates), height=height)

    @property
    def bounding_box(self) -> BoundingBox:
        from decks.domain.services.geometry import bounding_box

        return bounding_box(self.points)


@dataclass(frozen=True)
class MaterialChoice:
    """Timber grade and decking profile selected for a deck."""

    timber_grade: TimberGrade = TimberGrade.SG8_WET
    decking_type: DeckingType = DeckingType.PREMIUM_PINE_90
