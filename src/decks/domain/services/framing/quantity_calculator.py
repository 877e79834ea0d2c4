"""Quantity takeoff for a framed footprint.

This module provides QuantityCalculator, which walks the pile grid and
the joist lines against the footprint polygon to count piles, total the
member lengths and find the governing joist cantilever.
"""

from __future__ import annotations

import math
from typing import Iterator

from decks.domain.services.geometry import (
    horizontal_intersections,
    paired_spans,
    point_in_polygon,
    polygon_area,
    polygon_perimeter,
    vertical_intersections,
)
from decks.domain.value_objects import DeckFootprint, Point

from .config import FramingConfig
from .constants import DeckingSpec
from .models import FramingLayout, GridLayout, QuantityTakeoff


class QuantityCalculator:
    """Counts and lengths for piles, bearers, joists and decking.

    Joists are laid on a fixed pitch across the full bounding box width,
    independent of the pile columns.
    """

    def __init__(self, config: FramingConfig | None = None) -> None:
        self.config = config or FramingConfig()

    def joist_positions(self, footprint: DeckFootprint) -> tuple[float, ...]:
        """X-position of every joist line, starting at the left bounding box edge."""
        bbox = footprint.bounding_box
        count = math.ceil(bbox.width / self.config.joist_spacing) + 1
        return tuple(bbox.min_x + c * self.config.joist_spacing for c in range(count))

    def _pile_points(self, grid: GridLayout) -> Iterator[Point]:
        for y in grid.rows.positions:
            for x in grid.columns.positions:
                yield Point(x, y)

    def _bearer_spans(
        self, footprint: DeckFootprint, grid: GridLayout
    ) -> Iterator[tuple[float, float, float]]:
        for y in grid.rows.positions:
            for x_start, x_end in paired_spans(horizontal_intersections(y, footprint.points)):
                yield y, x_start, x_end

    def _joist_spans(
        self, footprint: DeckFootprint
    ) -> Iterator[tuple[float, float, float]]:
        for x in self.joist_positions(footprint):
            for y_start, y_end in paired_spans(vertical_intersections(x, footprint.points)):
                yield x, y_start, y_end

    def max_joist_cantilever(self, footprint: DeckFootprint, grid: GridLayout) -> float:
        """Largest joist overhang beyond the first or last bearer row.

        For every joist span, the overhang at the low end is measured from
        the span start to the first bearer row and at the high end from the
        last bearer row to the span end. Spans that start or end between
        bearer rows contribute negative overhangs and never govern.

        Returns:
            Governing cantilever in mm, never below 0.
        """
        first_row = grid.rows.first
        last_row = grid.rows.last
        governing = 0.0
        for _, y_start, y_end in self._joist_spans(footprint):
            governing = max(governing, first_row - y_start, y_end - last_row)
        return governing

    def calculate(
        self,
        footprint: DeckFootprint,
        grid: GridLayout,
        decking: DeckingSpec,
    ) -> QuantityTakeoff:
        """Walk the grid against the footprint.

        Args:
            footprint: Validated deck footprint.
            grid: Pile grid from the GridOptimizer.
            decking: Decking board profile.

        Returns:
            QuantityTakeoff with raw counts and lengths.
        """
        points = footprint.points
        config = self.config
        bbox = footprint.bounding_box

        inside_piles = sum(1 for p in self._pile_points(grid) if point_in_polygon(p, points))
        total_piles = max(inside_piles, config.min_piles)

        bearer_length = sum(x_end - x_start for _, x_start, x_end in self._bearer_spans(footprint, grid))
        joist_length = sum(y_end - y_start for _, y_start, y_end in self._joist_spans(footprint))
        perimeter_length = polygon_perimeter(points)

        # Normalized by depth; a zero projection falls back to one meter
        projection = bbox.projection or 1000.0
        joist_count = math.ceil((joist_length + perimeter_length) / projection)

        decking_board_rows = math.ceil(bbox.projection / (decking.width + config.decking_gap))

        return QuantityTakeoff(
            inside_piles=inside_piles,
            total_piles=total_piles,
            bearer_length=bearer_length,
            joist_length=joist_length,
            perimeter_length=perimeter_length,
            max_joist_cantilever=self.max_joist_cantilever(footprint, grid),
            joist_count=joist_count,
            decking_board_rows=decking_board_rows,
            concrete_bags=total_piles * config.bags_per_pile,
            screws_count=math.ceil(polygon_area(points) * config.screws_per_m2),
        )

    def build_layout(self, footprint: DeckFootprint, grid: GridLayout) -> FramingLayout:
        """Member positions for drawing the framing plan.

        Args:
            footprint: Validated deck footprint.
            grid: Pile grid from the GridOptimizer.

        Returns:
            FramingLayout with inside piles and bearer/joist spans.
        """
        return FramingLayout(
            piles=tuple(
                p for p in self._pile_points(grid) if point_in_polygon(p, footprint.points)
            ),
            bearers=tuple(self._bearer_spans(footprint, grid)),
            joists=tuple(self._joist_spans(footprint)),
        )
