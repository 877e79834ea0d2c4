"""Framing engine configuration.

This module provides FramingConfig, the immutable set of engineering
constants the grid optimizer, quantity calculator and sizing rules read.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FramingConfig:
    """Engineering constants for deck framing.

    All lengths are in millimeters.

    Attributes:
        max_joist_span: Largest allowed distance between bearer rows.
        max_pile_spacing: Largest allowed distance between piles along a bearer.
        edge_offset: Set-back of the outermost pile rows/columns from the
            bounding box edges.
        joist_spacing: Joist centers across the deck width.
        decking_gap: Gap between decking boards.
        balustrade_height: Deck heights above this need a balustrade.
        balustrade_cantilever: Cantilever above which a balustrade deck
            must use the balustrade-rated joist.
        light_joist_cantilever_cap: Cantilever limit for 140x45 joists.
        medium_joist_cantilever_cap: Cantilever limit for 190x45 joists.
        consent_height: Deck heights above this need building consent.
        min_piles: Floor applied to the reported pile count.
        bags_per_pile: Concrete bags per pile footing.
        screws_per_m2: Decking screws per square meter of deck.
    """

    max_joist_span: float = 1200.0
    max_pile_spacing: float = 1300.0
    edge_offset: float = 250.0
    joist_spacing: float = 450.0
    decking_gap: float = 5.0
    balustrade_height: float = 1000.0
    balustrade_cantilever: float = 400.0
    light_joist_cantilever_cap: float = 1100.0
    medium_joist_cantilever_cap: float = 1500.0
    consent_height: float = 1500.0
    min_piles: int = 4
    bags_per_pile: int = 2
    screws_per_m2: float = 45.0

    def __post_init__(self) -> None:
        if self.max_joist_span <= 0:
            raise ValueError("max_joist_span must be positive")
        if self.max_pile_spacing <= 0:
            raise ValueError("max_pile_spacing must be positive")
        if self.edge_offset < 0:
            raise ValueError("edge_offset must be non-negative")
        if self.joist_spacing <= 0:
            raise ValueError("joist_spacing must be positive")
        if self.decking_gap < 0:
            raise ValueError("decking_gap must be non-negative")
        if self.balustrade_height < 0 or self.consent_height < 0:
            raise ValueError("height thresholds must be non-negative")
        if self.balustrade_cantilever < 0:
            raise ValueError("balustrade_cantilever must be non-negative")
        if self.light_joist_cantilever_cap <= 0:
            raise ValueError("light_joist_cantilever_cap must be positive")
        if self.medium_joist_cantilever_cap <= 0:
            raise ValueError("medium_joist_cantilever_cap must be positive")
        if self.min_piles < 1:
            raise ValueError("min_piles must be at least 1")
        if self.bags_per_pile < 0:
            raise ValueError("bags_per_pile must be non-negative")
        if self.screws_per_m2 < 0:
            raise ValueError("screws_per_m2 must be non-negative")

