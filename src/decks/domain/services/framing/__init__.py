"""Deck framing domain services and data models.

This package provides:
- Framing constants and member size tables
- FramingConfig for the engineering constants
- GridOptimizer for pile and bearer row spacing
- QuantityCalculator for the pile/bearer/joist/decking takeoff
- Sizing rules for joists and bearers with cantilever checks
- DeckCalculator facade and the calculate_deck function
"""

from __future__ import annotations

from .constants import (
    BEARER_HEAVY,
    BEARER_LIGHT,
    BEARER_MEDIUM,
    DECKING_SPECS,
    FOOTING_DEPTH,
    JOIST_BALUSTRADE,
    JOIST_HEAVY,
    JOIST_LIGHT,
    JOIST_MEDIUM,
    PILE_SPEC,
    TIMBER_GRADE_SPECS,
    WASTE_FACTOR,
    DeckingSpec,
    TimberGradeSpec,
    get_decking_spec,
    get_timber_grade_spec,
)
from .config import FramingConfig
from .models import (
    CalculationResult,
    FramingLayout,
    GridAxis,
    GridLayout,
    MemberSizing,
    QuantityTakeoff,
)
from .grid_optimizer import GridOptimizer
from .quantity_calculator import QuantityCalculator
from .sizing import (
    cantilever_cap,
    resolve_bearer_size,
    resolve_joist_size,
    resolve_member_sizes,
)
from .deck_calculator import DeckCalculator, calculate_deck

__all__ = [
    # Constants
    "BEARER_HEAVY",
    "BEARER_LIGHT",
    "BEARER_MEDIUM",
    "DECKING_SPECS",
    "FOOTING_DEPTH",
    "JOIST_BALUSTRADE",
    "JOIST_HEAVY",
    "JOIST_LIGHT",
    "JOIST_MEDIUM",
    "PILE_SPEC",
    "TIMBER_GRADE_SPECS",
    "WASTE_FACTOR",
    "DeckingSpec",
    "TimberGradeSpec",
    "get_decking_spec",
    "get_timber_grade_spec",
    # Config
    "FramingConfig",
    # Models
    "CalculationResult",
    "FramingLayout",
    "GridAxis",
    "GridLayout",
    "MemberSizing",
    "QuantityTakeoff",
    # Services
    "GridOptimizer",
    "QuantityCalculator",
    "cantilever_cap",
    "resolve_bearer_size",
    "resolve_joist_size",
    "resolve_member_sizes",
    # Facade
    "DeckCalculator",
    "calculate_deck",
]
