"""Unit tests for the quantity takeoff."""

from __future__ import annotations

import pytest

from decks.domain import DeckFootprint, Point
from decks.domain.services.framing import (
    DECKING_SPECS,
    FramingConfig,
    GridOptimizer,
    QuantityCalculator,
)
from decks.domain.value_objects import DeckingType

PINE_90 = DECKING_SPECS[DeckingType.PREMIUM_PINE_90]


def _takeoff(footprint: DeckFootprint, config: FramingConfig | None = None):
    config = config or FramingConfig()
    grid = GridOptimizer(config).optimize(footprint.bounding_box)
    return QuantityCalculator(config).calculate(footprint, grid, PINE_90)


class TestRectangleTakeoff:
    """Quantities for the standard 4m x 3m deck."""

    def test_piles(self, standard_deck: DeckFootprint) -> None:
        takeoff = _takeoff(standard_deck)

        assert takeoff.inside_piles == 16
        assert takeoff.total_piles == 16
        assert takeoff.concrete_bags == 32

    def test_member_lengths(self, standard_deck: DeckFootprint) -> None:
        takeoff = _takeoff(standard_deck)

        assert takeoff.bearer_length == pytest.approx(16000)
        assert takeoff.joist_length == pytest.approx(27000)
        assert takeoff.perimeter_length == pytest.approx(14000)
        assert takeoff.joist_count == 14

    def test_decking_and_screws(self, standard_deck: DeckFootprint) -> None:
        takeoff = _takeoff(standard_deck)

        assert takeoff.decking_board_rows == 32
        assert takeoff.screws_count == 540

    def test_cantilever_equals_edge_offset(self, standard_deck: DeckFootprint) -> None:
        assert _takeoff(standard_deck).max_joist_cantilever == pytest.approx(250)

    def test_joist_positions_start_at_left_edge(self, standard_deck: DeckFootprint) -> None:
        positions = QuantityCalculator().joist_positions(standard_deck)

        assert len(positions) == 10
        assert positions[0] == 0
        assert positions[-1] == 4050


class TestConcaveTakeoff:
    """Quantities for a U-shaped deck."""

    def test_piles_in_notch_are_excluded(self, u_shape_points: list[Point]) -> None:
        takeoff = _takeoff(DeckFootprint(points=u_shape_points))

        # 5 piles on the full-width row, 2 per arm row above the notch
        assert takeoff.inside_piles == 11

    def test_member_lengths(self, u_shape_points: list[Point]) -> None:
        takeoff = _takeoff(DeckFootprint(points=u_shape_points))

        assert takeoff.bearer_length == pytest.approx(11000)
        assert takeoff.joist_length == pytest.approx(24000)
        assert takeoff.perimeter_length == pytest.approx(20000)
        assert takeoff.joist_count == 15
        assert takeoff.max_joist_cantilever == pytest.approx(250)


class TestEdgeCases:
    """Minimum pile floor and long cantilevers."""

    def test_min_piles_floor(self) -> None:
        """A sliver below the first bearer row still reports four piles."""
        sliver = DeckFootprint.from_coordinates([(0, 0), (2000, 0), (0, 200)])
        takeoff = _takeoff(sliver)

        assert takeoff.inside_piles == 0
        assert takeoff.total_piles == 4
        assert takeoff.concrete_bags == 8

    def test_large_edge_offset_gives_long_cantilever(self) -> None:
        config = FramingConfig(edge_offset=1200)
        takeoff = _takeoff(DeckFootprint.rectangle(4000, 5000), config)

        assert takeoff.max_joist_cantilever == pytest.approx(1200)

    def test_translation_invariance(self, l_shape_points: list[Point]) -> None:
        moved = [Point(p.x - 7000, p.y + 3500) for p in l_shape_points]

        original = _takeoff(DeckFootprint(points=l_shape_points))
        shifted = _takeoff(DeckFootprint(points=moved))

        assert shifted.inside_piles == original.inside_piles
        assert shifted.joist_count == original.joist_count
        assert shifted.bearer_length == pytest.approx(original.bearer_length)


class TestBuildLayout:
    """Tests for QuantityCalculator.build_layout."""

    def test_layout_matches_takeoff(self, standard_deck: DeckFootprint) -> None:
        grid = GridOptimizer().optimize(standard_deck.bounding_box)
        layout = QuantityCalculator().build_layout(standard_deck, grid)

        assert len(layout.piles) == 16
        assert len(layout.bearers) == 4
        assert len(layout.joists) == 9
        assert layout.bearers[0] == (250, 0, 4000)
        assert layout.joists[0] == (0, 0, 3000)
