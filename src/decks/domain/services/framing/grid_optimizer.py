"""Pile grid optimizer.

This module provides GridOptimizer, which spaces bearer rows and pile
columns evenly across a footprint's bounding box so that no span exceeds
its configured maximum.
"""

from __future__ import annotations

import math

from decks.domain.value_objects import BoundingBox

from .config import FramingConfig
from .models import GridAxis, GridLayout


class GridOptimizer:
    """Spaces bearer rows and piles across a bounding box.

    For each axis the outermost lines sit ``edge_offset`` inside the
    bounding box edges and the lines between them are evenly spaced at or
    under the maximum span. Rows run along the projection (y) axis and are
    limited by the joist span; columns run along the width (x) axis and are
    limited by pile spacing.
    """

    def __init__(self, config: FramingConfig | None = None) -> None:
        self.config = config or FramingConfig()

    def optimize_axis(self, origin: float, extent: float, max_span: float) -> GridAxis:
        """Evenly space grid lines along one axis.

        Args:
            origin: Minimum coordinate of the axis extent in mm.
            extent: Length of the axis extent in mm.
            max_span: Largest allowed spacing between lines in mm.

        Returns:
            GridAxis with at least two lines. Degenerate extents collapse to
            two coincident lines with zero spacing.
        """
        offset = self.config.edge_offset
        effective = max(0.0, extent - offset * 2)
        count = max(2, math.ceil(effective / max_span) + 1)
        spacing = effective / (count - 1)
        return GridAxis(
            start=origin + offset,
            count=count,
            spacing=spacing,
            effective_extent=effective,
        )

    def optimize(self, bbox: BoundingBox) -> GridLayout:
        """Compute the pile grid for a bounding box.

        Args:
            bbox: Footprint bounding box.

        Returns:
            GridLayout with bearer rows and pile columns.
        """
        rows = self.optimize_axis(bbox.min_y, bbox.projection, self.config.max_joist_span)
        columns = self.optimize_axis(bbox.min_x, bbox.width, self.config.max_pile_spacing)
        return GridLayout(rows=rows, columns=columns)
