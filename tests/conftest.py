"""Pytest configuration and shared fixtures for deck tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from decks.domain import DeckFootprint, Point


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests spanning several layers")


# =============================================================================
# Footprints
# =============================================================================


@pytest.fixture
def rectangle_points() -> list[Point]:
    """4m x 3m rectangle listed counter-clockwise from the origin."""
    return [Point(0, 0), Point(4000, 0), Point(4000, 3000), Point(0, 3000)]


@pytest.fixture
def l_shape_points() -> list[Point]:
    """L-shaped outline: 4m x 2m base with a 2m x 2m leg on the left."""
    return [
        Point(0, 0),
        Point(4000, 0),
        Point(4000, 2000),
        Point(2000, 2000),
        Point(2000, 4000),
        Point(0, 4000),
    ]


@pytest.fixture
def u_shape_points() -> list[Point]:
    """U-shaped outline, 5m x 3m with a 3m x 2m notch from the top."""
    return [
        Point(0, 0),
        Point(5000, 0),
        Point(5000, 3000),
        Point(4000, 3000),
        Point(4000, 1000),
        Point(1000, 1000),
        Point(1000, 3000),
        Point(0, 3000),
    ]


@pytest.fixture
def bowtie_points() -> list[Point]:
    """Self-intersecting outline with non-zero signed area."""
    return [Point(0, 0), Point(2000, 2000), Point(2000, 0), Point(0, 1000)]


@pytest.fixture
def standard_deck() -> DeckFootprint:
    """The default 4m x 3m deck at 600mm height."""
    return DeckFootprint.rectangle(4000, 3000, height=600)


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def deck_config_dict() -> dict[str, Any]:
    """Minimal valid configuration for the standard deck."""
    return {
        "schema_version": "1.0",
        "name": "backyard",
        "footprint": {
            "points": [
                {"x": 0, "y": 0},
                {"x": 4000, "y": 0},
                {"x": 4000, "y": 3000},
                {"x": 0, "y": 3000},
            ],
            "height": 600,
        },
        "materials": {
            "timber_grade": "sg8_wet",
            "decking_type": "premium_pine_90",
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a configuration (dict or raw text) to a temp file."""

    def _write(data: Any, name: str = "deck.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
