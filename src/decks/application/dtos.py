"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from decks.domain import CalculationResult, DeckFootprint, MaterialChoice
from decks.domain.value_objects import DeckingType, TimberGrade


@dataclass
class DeckInput:
    """Input DTO for a deck outline and material selection.

    Attributes:
        points: Outline vertices as (x, y) pairs in mm.
        height: Deck height above ground in mm.
        timber_grade: Framing timber grade.
        decking_type: Decking board profile.
    """

    points: list[tuple[float, float]]
    height: float = 600.0
    timber_grade: TimberGrade = TimberGrade.SG8_WET
    decking_type: DeckingType = DeckingType.PREMIUM_PINE_90

    @classmethod
    def rectangle(cls, width: float, depth: float, height: float = 600.0) -> DeckInput:
        """Rectangular deck with one corner at the origin."""
        return cls(
            points=[(0.0, 0.0), (width, 0.0), (width, depth), (0.0, depth)],
            height=height,
        )

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if len(self.points) < 3:
            errors.append("Footprint needs at least 3 points")
        if not math.isfinite(self.height) or self.height < 0:
            errors.append("Height must be a non-negative number")
        if self.height > 10000:
            errors.append("Height exceeds maximum (10000 mm)")
        return errors


@dataclass
class DeckOutput:
    """Output DTO for a deck calculation.

    Attributes:
        footprint: The validated footprint, if it could be built.
        materials: Material selection used.
        result: Calculation result, None when errors prevented calculation.
        errors: Error messages.
    """

    footprint: DeckFootprint | None = None
    materials: MaterialChoice = field(default_factory=MaterialChoice)
    result: CalculationResult | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation produced a result without errors."""
        return not self.errors and self.result is not None

    @property
    def advisories(self) -> list[str]:
        """Non-fatal notes a reviewer should see."""
        notes: list[str] = []
        if self.result is None:
            return notes
        if self.result.cantilever_warning:
            notes.append(self.result.cantilever_warning)
        if self.result.balustrade_required:
            notes.append("Balustrade required for this deck height.")
        if self.result.consent_required:
            notes.append("Building consent required for this deck height.")
        return notes
