"""Unit tests for joist and bearer sizing rules.

These tests verify:
- Span breakpoints for joists and bearers (inclusive upper bounds)
- The balustrade override for high decks with long cantilevers
- Cantilever caps for 140x45 and 190x45 joists
- That the rules apply in order: size, override, cap
"""

from __future__ import annotations

import pytest

from decks.domain.services.framing import (
    BEARER_HEAVY,
    BEARER_LIGHT,
    BEARER_MEDIUM,
    JOIST_BALUSTRADE,
    JOIST_HEAVY,
    JOIST_LIGHT,
    JOIST_MEDIUM,
    FramingConfig,
    cantilever_cap,
    resolve_bearer_size,
    resolve_joist_size,
    resolve_member_sizes,
)


class TestSpanTables:
    """Tests for span-based size lookup."""

    @pytest.mark.parametrize(
        "span,expected",
        [
            (0, JOIST_LIGHT),
            (833.3, JOIST_LIGHT),
            (2500, JOIST_LIGHT),
            (2500.1, JOIST_MEDIUM),
            (3400, JOIST_MEDIUM),
            (3401, JOIST_HEAVY),
        ],
    )
    def test_joist_sizes(self, span: float, expected: str) -> None:
        assert resolve_joist_size(span) == expected

    @pytest.mark.parametrize(
        "span,expected",
        [
            (1166.7, BEARER_LIGHT),
            (1600, BEARER_LIGHT),
            (1601, BEARER_MEDIUM),
            (2000, BEARER_MEDIUM),
            (2001, BEARER_HEAVY),
        ],
    )
    def test_bearer_sizes(self, span: float, expected: str) -> None:
        assert resolve_bearer_size(span) == expected

    def test_labels(self) -> None:
        assert JOIST_LIGHT == "140x45mm H3.2"
        assert JOIST_BALUSTRADE == "190x45mm H3.2 (Structural Balustrade Required)"
        assert BEARER_HEAVY == "240x70mm H3.2 (Heavy Duty)"


class TestCantileverCap:
    """Tests for cantilever_cap."""

    def test_caps_by_section(self) -> None:
        config = FramingConfig()

        assert cantilever_cap(JOIST_LIGHT, config) == 1100
        assert cantilever_cap(JOIST_MEDIUM, config) == 1500
        assert cantilever_cap(JOIST_BALUSTRADE, config) == 1500
        assert cantilever_cap(JOIST_HEAVY, config) is None


class TestResolveMemberSizes:
    """Tests for the ordered sizing rules."""

    def test_within_limits(self) -> None:
        sizing = resolve_member_sizes(833.3, 1166.7, 250, height=600)

        assert sizing.joist_size == JOIST_LIGHT
        assert sizing.bearer_size == BEARER_LIGHT
        assert sizing.cantilever_warning is None
        assert not sizing.has_warning
        assert not sizing.balustrade_override

    def test_balustrade_override(self) -> None:
        sizing = resolve_member_sizes(833.3, 1166.7, 401, height=1600)

        assert sizing.joist_size == JOIST_BALUSTRADE
        assert sizing.balustrade_override

    @pytest.mark.parametrize(
        "height,cantilever",
        [(1600, 400), (1000, 900), (600, 900)],
    )
    def test_no_override_at_or_below_thresholds(
        self, height: float, cantilever: float
    ) -> None:
        """Both the height and the cantilever must strictly exceed their limits."""
        sizing = resolve_member_sizes(833.3, 1166.7, cantilever, height=height)

        assert sizing.joist_size == JOIST_LIGHT
        assert not sizing.balustrade_override

    def test_light_joist_cap_exceeded(self) -> None:
        sizing = resolve_member_sizes(833.3, 1166.7, 1101, height=600)

        assert sizing.joist_size == JOIST_LIGHT
        assert sizing.cantilever_warning == (
            "CRITICAL: Joist cantilever of 1101mm exceeds 1100mm limit for 140x45."
        )

    def test_light_joist_cap_is_inclusive(self) -> None:
        sizing = resolve_member_sizes(833.3, 1166.7, 1100, height=600)
        assert sizing.cantilever_warning is None

    def test_override_moves_to_medium_cap(self) -> None:
        """A balustrade joist is judged against the 190x45 cap."""
        sizing = resolve_member_sizes(833.3, 1166.7, 1200, height=1600)

        assert sizing.joist_size == JOIST_BALUSTRADE
        assert sizing.cantilever_warning is None

        sizing = resolve_member_sizes(833.3, 1166.7, 1501, height=1600)
        assert sizing.cantilever_warning is not None
        assert "1500mm limit for 190x45" in sizing.cantilever_warning

    def test_medium_joist_cap(self) -> None:
        sizing = resolve_member_sizes(3000, 1166.7, 1501, height=0)

        assert sizing.joist_size == JOIST_MEDIUM
        assert "1500mm" in sizing.cantilever_warning

    def test_heavy_joist_uncapped(self) -> None:
        sizing = resolve_member_sizes(4000, 2500, 5000, height=0)

        assert sizing.joist_size == JOIST_HEAVY
        assert sizing.bearer_size == BEARER_HEAVY
        assert sizing.cantilever_warning is None

    def test_bearer_unaffected_by_override(self) -> None:
        sizing = resolve_member_sizes(833.3, 1800, 500, height=1600)

        assert sizing.joist_size == JOIST_BALUSTRADE
        assert sizing.bearer_size == BEARER_MEDIUM

    def test_custom_caps(self) -> None:
        config = FramingConfig(light_joist_cantilever_cap=500)
        sizing = resolve_member_sizes(833.3, 1166.7, 600, height=0, config=config)

        assert "500mm limit" in sizing.cantilever_warning
