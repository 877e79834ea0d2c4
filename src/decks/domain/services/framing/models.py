"""Framing data models.

This module provides dataclasses for:
- GridAxis: evenly spaced pile/bearer positions along one axis
- GridLayout: the pile grid for a footprint (bearer rows x piles per row)
- MemberSizing: resolved joist/bearer sizes plus the cantilever warning
- QuantityTakeoff: raw counts and lengths walked off the footprint
- FramingLayout: member positions for drawing collaborators
- CalculationResult: the engine's single output record
"""

from __future__ import annotations

from dataclasses import dataclass, field

from decks.domain.value_objects import Point


@dataclass(frozen=True)
class GridAxis:
    """Evenly spaced grid lines along one axis.

    The first line sits at ``start`` and the last at
    ``start + (count - 1) * spacing``.

    Attributes:
        start: Position of the first line in mm.
        count: Number of lines, at least 2.
        spacing: Actual distance between adjacent lines in mm.
        effective_extent: Extent covered by the lines (first to last) in mm.
    """

    start: float
    count: int
    spacing: float
    effective_extent: float

    def __post_init__(self) -> None:
        if self.count < 2:
            raise ValueError("Grid axis needs at least 2 lines")
        if self.spacing < 0:
            raise ValueError("Grid spacing must be non-negative")

    @property
    def positions(self) -> tuple[float, ...]:
        """Absolute position of every line in mm."""
        return tuple(self.start + i * self.spacing for i in range(self.count))

    @property
    def first(self) -> float:
        return self.start

    @property
    def last(self) -> float:
        return self.start + (self.count - 1) * self.spacing


@dataclass(frozen=True)
class GridLayout:
    """Pile grid for a footprint.

    Attributes:
        rows: Bearer rows along the projection (y) axis. Row spacing is the
            joist span.
        columns: Pile positions along the width (x) axis. Column spacing is
            the bearer span.
    """

    rows: GridAxis
    columns: GridAxis

    @property
    def bearer_rows(self) -> int:
        return self.rows.count

    @property
    def piles_per_row(self) -> int:
        return self.columns.count

    @property
    def joist_span(self) -> float:
        return self.rows.spacing

    @property
    def bearer_span(self) -> float:
        return self.columns.spacing


@dataclass(frozen=True)
class MemberSizing:
    """Outcome of the sizing rules.

    Attributes:
        joist_size: Joist size label after the balustrade override.
        bearer_size: Bearer size label.
        cantilever_warning: Advisory text when a cantilever cap is exceeded.
        balustrade_override: True if the balustrade rule replaced the
            span-based joist size.
    """

    joist_size: str
    bearer_size: str
    cantilever_warning: str | None = None
    balustrade_override: bool = False

    @property
    def has_warning(self) -> bool:
        return bool(self.cantilever_warning)


@dataclass(frozen=True)
class QuantityTakeoff:
    """Raw quantities walked off the footprint and pile grid.

    Lengths are in mm. Counts are unrounded except where noted.

    Attributes:
        inside_piles: Grid intersections inside the footprint (no floor).
        total_piles: Reported pile count, floored at the configured minimum.
        bearer_length: Sum of bearer row spans inside the footprint.
        joist_length: Sum of joist spans inside the footprint.
        perimeter_length: Footprint perimeter (boundary joists).
        max_joist_cantilever: Largest joist overhang past the outer bearer rows.
        joist_count: Joist material length normalized by deck projection.
        decking_board_rows: Decking board rows across the projection.
        concrete_bags: Bags of concrete for the pile footings.
        screws_count: Decking screw estimate.
    """

    inside_piles: int
    total_piles: int
    bearer_length: float
    joist_length: float
    perimeter_length: float
    max_joist_cantilever: float
    joist_count: int
    decking_board_rows: int
    concrete_bags: int
    screws_count: int


@dataclass(frozen=True)
class FramingLayout:
    """Positions of framing members for drawing collaborators.

    Attributes:
        piles: Pile centers inside the footprint.
        bearers: (y, x_start, x_end) for every bearer span inside the footprint.
        joists: (x, y_start, y_end) for every joist span inside the footprint.
    """

    piles: tuple[Point, ...] = field(default_factory=tuple)
    bearers: tuple[tuple[float, float, float], ...] = field(default_factory=tuple)
    joists: tuple[tuple[float, float, float], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CalculationResult:
    """Structural layout and quantities for one footprint and material choice.

    Spans and dimensions are in mm, ``area`` in m², linear totals in meters.
    Produced fresh on every calculation and never mutated.

    Attributes:
        piles_per_row: Piles along each bearer row.
        bearer_rows: Number of bearer rows.
        total_piles: Piles inside the footprint, at least the configured minimum.
        bearer_size: Bearer size label.
        joist_size: Joist size label.
        joist_count: Joist material length normalized by projection.
        decking_board_count: Rows of decking boards.
        concrete_bags: 25kg bags of concrete.
        screws_count: Decking screw estimate.
        bearer_span: Actual distance between piles along a bearer.
        joist_span: Actual distance between bearer rows.
        area: Footprint area in m².
        cantilever_warning: Advisory text, None when within limits.
        max_joist_cantilever: Governing joist cantilever.
        width: Bounding box x-extent.
        projection: Bounding box y-extent.
        bearer_linear_m: Bearer spans inside the footprint, meters.
        joist_linear_m: Joist spans inside the footprint, meters.
        perimeter_linear_m: Footprint perimeter, meters.
        balustrade_required: Deck height exceeds the balustrade threshold.
        consent_required: Deck height exceeds the building consent threshold.
        layout: Member positions for drawing.
    """

    piles_per_row: int
    bearer_rows: int
    total_piles: int
    bearer_size: str
    joist_size: str
    joist_count: int
    decking_board_count: int
    concrete_bags: int
    screws_count: int
    bearer_span: float
    joist_span: float
    area: float
    cantilever_warning: str | None = None
    max_joist_cantilever: float = 0.0
    width: float = 0.0
    projection: float = 0.0
    bearer_linear_m: float = 0.0
    joist_linear_m: float = 0.0
    perimeter_linear_m: float = 0.0
    balustrade_required: bool = False
    consent_required: bool = False
    layout: FramingLayout = field(default_factory=FramingLayout)

    @property
    def within_limits(self) -> bool:
        """True when no cantilever warning was raised."""
        return not self.cantilever_warning

    def to_dict(self, include_layout: bool = False) -> dict:
        """Plain dict for JSON serialization."""
        data = {
            "piles_per_row": self.piles_per_row,
            "bearer_rows": self.bearer_rows,
            "total_piles": self.total_piles,
            "bearer_size": self.bearer_size,
            "joist_size": self.joist_size,
            "joist_count": self.joist_count,
            "decking_board_count": self.decking_board_count,
            "concrete_bags": self.concrete_bags,
            "screws_count": self.screws_count,
            "bearer_span": self.bearer_span,
            "joist_span": self.joist_span,
            "area": self.area,
            "cantilever_warning": self.cantilever_warning,
            "max_joist_cantilever": self.max_joist_cantilever,
            "width": self.width,
            "projection": self.projection,
            "bearer_linear_m": self.bearer_linear_m,
            "joist_linear_m": self.joist_linear_m,
            "perimeter_linear_m": self.perimeter_linear_m,
            "balustrade_required": self.balustrade_required,
            "consent_required": self.consent_required,
        }
        if include_layout:
            data["layout"] = {
                "piles": [{"x": p.x, "y": p.y} for p in self.layout.piles],
                "bearers": [
                    {"y": y, "x_start": x0, "x_end": x1}
                    for y, x0, x1 in self.layout.bearers
                ],
                "joists": [
                    {"x": x, "y_start": y0, "y_end": y1}
                    for x, y0, y1 in self.layout.joists
                ],
            }
        return data
