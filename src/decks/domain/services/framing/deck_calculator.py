"""DeckCalculator facade service.

This module provides the DeckCalculator class, which runs the grid
optimizer, the quantity takeoff and the sizing rules in order and
assembles a CalculationResult, plus the ``calculate_deck`` shortcut.
"""

from __future__ import annotations

import logging

from decks.domain.services.geometry import polygon_area
from decks.domain.value_objects import DeckFootprint, MaterialChoice

from .config import FramingConfig
from .constants import get_decking_spec
from .grid_optimizer import GridOptimizer
from .models import CalculationResult
from .quantity_calculator import QuantityCalculator
from .sizing import resolve_member_sizes

logger = logging.getLogger(__name__)

MM_PER_M = 1000.0


class DeckCalculator:
    """Structural layout engine for a deck footprint.

    Stateless apart from its configuration: every call to ``calculate``
    works on its own values and returns a new result, so one instance may
    be shared between threads.

    Example:
        >>> from decks.domain import DeckFootprint, MaterialChoice
        >>> calc = DeckCalculator()
        >>> result = calc.calculate(DeckFootprint.rectangle(4000, 3000, 600), MaterialChoice())
        >>> result.bearer_rows, result.piles_per_row
        (4, 4)
    """

    def __init__(self, config: FramingConfig | None = None) -> None:
        """Initialize the calculator.

        Args:
            config: Optional framing constants. Uses defaults if not provided.
        """
        self.config = config or FramingConfig()
        self._grid_optimizer = GridOptimizer(self.config)
        self._quantity_calculator = QuantityCalculator(self.config)

    def calculate(
        self,
        footprint: DeckFootprint,
        materials: MaterialChoice | None = None,
    ) -> CalculationResult:
        """Compute the framing layout and quantities.

        Args:
            footprint: Validated deck footprint.
            materials: Timber grade and decking profile. Uses defaults if
                not provided.

        Returns:
            CalculationResult for the footprint.
        """
        materials = materials or MaterialChoice()
        config = self.config
        bbox = footprint.bounding_box

        grid = self._grid_optimizer.optimize(bbox)
        logger.debug(
            "Pile grid: %d bearer rows at %.1fmm, %d piles per row at %.1fmm",
            grid.bearer_rows,
            grid.joist_span,
            grid.piles_per_row,
            grid.bearer_span,
        )

        takeoff = self._quantity_calculator.calculate(
            footprint, grid, get_decking_spec(materials.decking_type)
        )
        logger.debug(
            "Takeoff: %d piles inside footprint, governing joist cantilever %.1fmm",
            takeoff.inside_piles,
            takeoff.max_joist_cantilever,
        )

        sizing = resolve_member_sizes(
            joist_span=grid.joist_span,
            bearer_span=grid.bearer_span,
            max_joist_cantilever=takeoff.max_joist_cantilever,
            height=footprint.height,
            config=config,
        )
        if sizing.cantilever_warning:
            logger.warning(sizing.cantilever_warning)

        return CalculationResult(
            piles_per_row=grid.piles_per_row,
            bearer_rows=grid.bearer_rows,
            total_piles=takeoff.total_piles,
            bearer_size=sizing.bearer_size,
            joist_size=sizing.joist_size,
            joist_count=takeoff.joist_count,
            decking_board_count=takeoff.decking_board_rows,
            concrete_bags=takeoff.concrete_bags,
            screws_count=takeoff.screws_count,
            bearer_span=grid.bearer_span,
            joist_span=grid.joist_span,
            area=polygon_area(footprint.points),
            cantilever_warning=sizing.cantilever_warning,
            max_joist_cantilever=takeoff.max_joist_cantilever,
            width=bbox.width,
            projection=bbox.projection,
            bearer_linear_m=takeoff.bearer_length / MM_PER_M,
            joist_linear_m=takeoff.joist_length / MM_PER_M,
            perimeter_linear_m=takeoff.perimeter_length / MM_PER_M,
            balustrade_required=footprint.height > config.balustrade_height,
            consent_required=footprint.height > config.consent_height,
            layout=self._quantity_calculator.build_layout(footprint, grid),
        )


def calculate_deck(
    footprint: DeckFootprint,
    materials: MaterialChoice | None = None,
    config: FramingConfig | None = None,
) -> CalculationResult:
    """Compute the framing layout for a footprint.

    Args:
        footprint: Validated deck footprint.
        materials: Timber grade and decking profile.
        config: Optional framing constants.

    Returns:
        CalculationResult for the footprint.
    """
    return DeckCalculator(config).calculate(footprint, materials)
