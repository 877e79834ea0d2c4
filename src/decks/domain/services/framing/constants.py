"""Framing constants: member sizes, decking profiles and takeoff factors.

This module provides:
- Joist and bearer size labels with their span breakpoints
- Joist cantilever caps keyed by size label
- Decking board profiles and timber grade reference data
- Fixed factors used for quantity takeoff (footing depth, waste)

The size tables follow a simplified light timber framing table. They are
illustrative and do not replace an engineer's sign-off.
"""

from __future__ import annotations

from dataclasses import dataclass

from decks.domain.value_objects import DeckingType, TimberGrade


# --- Member size labels ---

JOIST_LIGHT = "140x45mm H3.2"
JOIST_MEDIUM = "190x45mm H3.2"
JOIST_HEAVY = "240x45mm H3.2"
JOIST_BALUSTRADE = "190x45mm H3.2 (Structural Balustrade Required)"

BEARER_LIGHT = "140x70mm H3.2"
BEARER_MEDIUM = "190x70mm H3.2"
BEARER_HEAVY = "240x70mm H3.2 (Heavy Duty)"

PILE_SPEC = "125x125mm H5"


# Span breakpoints as (maximum span in mm, size label), smallest first.
# Spans beyond the last breakpoint take the fallback label.
JOIST_SPAN_TABLE: tuple[tuple[float, str], ...] = (
    (2500.0, JOIST_LIGHT),
    (3400.0, JOIST_MEDIUM),
)
JOIST_FALLBACK = JOIST_HEAVY

BEARER_SPAN_TABLE: tuple[tuple[float, str], ...] = (
    (1600.0, BEARER_LIGHT),
    (2000.0, BEARER_MEDIUM),
)
BEARER_FALLBACK = BEARER_HEAVY


# Joist section used to look up the cantilever cap for a label.
# The balustrade-rated joist is a 190x45 section and shares its cap.
JOIST_SECTIONS: dict[str, str] = {
    JOIST_LIGHT: "140x45",
    JOIST_MEDIUM: "190x45",
    JOIST_BALUSTRADE: "190x45",
    JOIST_HEAVY: "240x45",
}


# --- Decking ---


@dataclass(frozen=True)
class DeckingSpec:
    """Physical dimensions of a decking board profile.

    Attributes:
        label: Display name as sold.
        width: Board face width in mm.
        thickness: Board thickness in mm.
    """

    label: str
    width: float
    thickness: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.thickness <= 0:
            raise ValueError("Decking board dimensions must be positive")


DECKING_SPECS: dict[DeckingType, DeckingSpec] = {
    DeckingType.PREMIUM_PINE_90: DeckingSpec("90x19mm Premium Pine", 90.0, 19.0),
    DeckingType.PREMIUM_PINE_140: DeckingSpec("140x32mm Premium Pine", 140.0, 32.0),
    DeckingType.KWILA_90: DeckingSpec("90x19mm Kwila", 90.0, 19.0),
}


@dataclass(frozen=True)
class TimberGradeSpec:
    """Reference data for a structural timber grade.

    Attributes:
        label: Display name, e.g. "SG8 Wet".
        stress_grade: Machine stress grade ("SG8", "SG10").
        in_service_moisture: "wet" or "dry" in-service condition.
        treatment: Preservative hazard class for framing.
    """

    label: str
    stress_grade: str
    in_service_moisture: str
    treatment: str = "H3.2"


TIMBER_GRADE_SPECS: dict[TimberGrade, TimberGradeSpec] = {
    TimberGrade.SG8_WET: TimberGradeSpec("SG8 Wet", "SG8", "wet"),
    TimberGrade.SG8_DRY: TimberGradeSpec("SG8 Dry", "SG8", "dry"),
    TimberGrade.SG10_WET: TimberGradeSpec("SG10 Wet", "SG10", "wet"),
}


# --- Takeoff factors ---

FOOTING_DEPTH: float = 300.0  # mm of pile below ground
WASTE_FACTOR: float = 1.1  # 10% waste on linear-meter orders
CONCRETE_BAG_KG: float = 25.0
SCREWS_PER_BOX: int = 100


def get_decking_spec(decking_type: DeckingType) -> DeckingSpec:
    """Look up board dimensions for a decking profile.

    Args:
        decking_type: Decking profile.

    Returns:
        DeckingSpec for the profile.

    Raises:
        KeyError: If the profile has no entry in DECKING_SPECS.
    """
    return DECKING_SPECS[decking_type]


def get_timber_grade_spec(timber_grade: TimberGrade) -> TimberGradeSpec:
    """Look up reference data for a timber grade."""
    return TIMBER_GRADE_SPECS[timber_grade]
