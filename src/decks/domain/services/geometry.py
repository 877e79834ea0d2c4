"""Polygon geometry for deck footprints.

This module provides the measurement and scanline routines the framing
engine is built on:
- polygon_area / signed_area: shoelace area of a simple polygon
- point_in_polygon: ray-casting containment test
- horizontal_intersections / vertical_intersections: scanline crossings
- polygon_perimeter, bounding_box
- validate_footprint: rejects polygons the scanlines cannot handle, using
  shapely for the simplicity check

Polygons are ordered point sequences without a repeated closing point.
Edge i joins point i to point (i + 1) mod N.
"""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..value_objects import BoundingBox, InvalidFootprint, Point

__all__ = [
    "signed_area",
    "polygon_area",
    "point_in_polygon",
    "horizontal_intersections",
    "vertical_intersections",
    "paired_spans",
    "polygon_perimeter",
    "bounding_box",
    "to_shapely",
    "validate_footprint",
]

MM2_PER_M2 = 1_000_000.0


def _edges(polygon: Sequence[Point]):
    count = len(polygon)
    for i in range(count):
        yield polygon[i], polygon[(i + 1) % count]


def signed_area(polygon: Sequence[Point]) -> float:
    """Shoelace signed area in mm².

    Positive for counter-clockwise ordering, negative for clockwise.
    """
    total = 0.0
    for p1, p2 in _edges(polygon):
        total += p1.x * p2.y - p2.x * p1.y
    return total / 2


def polygon_area(polygon: Sequence[Point]) -> float:
    """Area of a simple polygon in square meters.

    Works for convex and concave polygons in either orientation.

    Args:
        polygon: Ordered vertices in mm.

    Returns:
        Absolute area in m².
    """
    return abs(signed_area(polygon)) / MM2_PER_M2


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Ray-casting containment test.

    Casts a ray from ``point`` towards +x and toggles on every edge it
    crosses. Points lying exactly on an edge may land on either side.

    Args:
        point: Point to test.
        polygon: Ordered vertices.

    Returns:
        True if the ray crosses the boundary an odd number of times.
    """
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y
        if (yi > point.y) != (yj > point.y):
            crossing_x = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < crossing_x:
                inside = not inside
        j = i
    return inside


def horizontal_intersections(y: float, polygon: Sequence[Point]) -> list[float]:
    """X-coordinates where the horizontal line at ``y`` crosses the boundary.

    An edge counts when one endpoint is at or below ``y`` and the other is
    strictly above it. The half-open test makes vertices shared by two
    edges count once, so a simple polygon always yields an even number of
    crossings that pair up as (entry, exit) spans.

    Args:
        y: Scanline height in mm.
        polygon: Ordered vertices.

    Returns:
        Crossing x-values sorted ascending.
    """
    crossings: list[float] = []
    for p1, p2 in _edges(polygon):
        if (p1.y <= y < p2.y) or (p2.y <= y < p1.y):
            crossings.append(p1.x + (y - p1.y) * (p2.x - p1.x) / (p2.y - p1.y))
    crossings.sort()
    return crossings


def vertical_intersections(x: float, polygon: Sequence[Point]) -> list[float]:
    """Y-coordinates where the vertical line at ``x`` crosses the boundary.

    Mirror image of ``horizontal_intersections`` with the axes swapped.
    """
    crossings: list[float] = []
    for p1, p2 in _edges(polygon):
        if (p1.x <= x < p2.x) or (p2.x <= x < p1.x):
            crossings.append(p1.y + (x - p1.x) * (p2.y - p1.y) / (p2.x - p1.x))
    crossings.sort()
    return crossings


def paired_spans(crossings: Sequence[float]) -> list[tuple[float, float]]:
    """Group sorted crossings two at a time into inside spans.

    A trailing unpaired crossing is dropped; it only occurs for polygons
    that ``validate_footprint`` would have rejected.
    """
    return [
        (crossings[i], crossings[i + 1]) for i in range(0, len(crossings) - 1, 2)
    ]


def polygon_perimeter(polygon: Sequence[Point]) -> float:
    """Sum of edge lengths in mm, including the implied closing edge."""
    return sum(math.hypot(p2.x - p1.x, p2.y - p1.y) for p1, p2 in _edges(polygon))


def bounding_box(polygon: Sequence[Point]) -> BoundingBox:
    """Axis-aligned bounding box of the polygon vertices."""
    if not polygon:
        raise ValueError("Cannot compute bounding box of an empty polygon")
    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    return BoundingBox(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def to_shapely(polygon: Sequence[Point]) -> Polygon:
    """Shapely polygon for the footprint outline."""
    return Polygon([(p.x, p.y) for p in polygon])


def validate_footprint(polygon: Sequence[Point]) -> None:
    """Check that a polygon is usable as a deck footprint.

    Simplicity is judged by shapely: an outline whose edges cross or touch
    anywhere other than at shared neighbouring vertices is invalid.

    Args:
        polygon: Ordered vertices.

    Raises:
        InvalidFootprint: If the polygon has fewer than 3 points, contains a
            non-finite coordinate, has zero area, or crosses itself.
    """
    if len(polygon) < 3:
        raise InvalidFootprint(
            f"Footprint needs at least 3 points, got {len(polygon)}",
            error_type="too_few_points",
        )

    for index, point in enumerate(polygon):
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InvalidFootprint(
                f"Point {index} has a non-finite coordinate ({point.x}, {point.y})",
                error_type="non_finite",
            )

    shape = to_shapely(polygon)
    if shape.area == 0:
        raise InvalidFootprint("Footprint has zero area", error_type="degenerate")

    if not shape.is_valid:
        reason = explain_validity(shape)
        raise InvalidFootprint(
            f"Footprint outline must not intersect itself ({reason})",
            error_type="self_intersecting",
            reason=reason,
        )
