"""Member sizing rules.

Resolves joist and bearer sizes from spans and flags joist cantilevers
that exceed the limit for the chosen section. The rules run as a short
ordered decision list:

1. Joist size from the joist span.
2. Balustrade override: a high deck with a long cantilever takes the
   balustrade-rated joist regardless of span.
3. Cantilever caps for 140x45 and 190x45 joists raise an advisory warning.
4. Bearer size from the bearer span.

The warning never changes quantities; it marks the layout for review.
"""

from __future__ import annotations

from .config import FramingConfig
from .constants import (
    BEARER_FALLBACK,
    BEARER_SPAN_TABLE,
    JOIST_BALUSTRADE,
    JOIST_FALLBACK,
    JOIST_SECTIONS,
    JOIST_SPAN_TABLE,
)
from .models import MemberSizing


def _lookup(span: float, table: tuple[tuple[float, str], ...], fallback: str) -> str:
    for max_span, label in table:
        if span <= max_span:
            return label
    return fallback


def resolve_joist_size(joist_span: float) -> str:
    """Nominal joist size for a span between bearer rows.

    Args:
        joist_span: Distance between bearer rows in mm.

    Returns:
        Joist size label.
    """
    return _lookup(joist_span, JOIST_SPAN_TABLE, JOIST_FALLBACK)


def resolve_bearer_size(bearer_span: float) -> str:
    """Bearer size for a span between piles."""
    return _lookup(bearer_span, BEARER_SPAN_TABLE, BEARER_FALLBACK)


def cantilever_cap(joist_size: str, config: FramingConfig) -> float | None:
    """Cantilever limit for a joist label, or None if uncapped."""
    section = JOIST_SECTIONS.get(joist_size)
    if section == "140x45":
        return config.light_joist_cantilever_cap
    if section == "190x45":
        return config.medium_joist_cantilever_cap
    return None


def resolve_member_sizes(
    joist_span: float,
    bearer_span: float,
    max_joist_cantilever: float,
    height: float,
    config: FramingConfig | None = None,
) -> MemberSizing:
    """Apply the sizing rules in priority order.

    Args:
        joist_span: Actual distance between bearer rows in mm.
        bearer_span: Actual distance between piles in mm.
        max_joist_cantilever: Governing joist cantilever in mm.
        height: Deck height above ground in mm.
        config: Framing constants. Defaults to FramingConfig().

    Returns:
        MemberSizing with the resolved labels and an optional warning.
    """
    config = config or FramingConfig()

    joist_size = resolve_joist_size(joist_span)

    override = (
        height > config.balustrade_height
        and max_joist_cantilever > config.balustrade_cantilever
    )
    if override:
        joist_size = JOIST_BALUSTRADE

    warning: str | None = None
    cap = cantilever_cap(joist_size, config)
    if cap is not None and max_joist_cantilever > cap:
        section = JOIST_SECTIONS[joist_size]
        warning = (
            f"CRITICAL: Joist cantilever of {max_joist_cantilever:.0f}mm exceeds "
            f"{cap:.0f}mm limit for {section}."
        )

    return MemberSizing(
        joist_size=joist_size,
        bearer_size=resolve_bearer_size(bearer_span),
        cantilever_warning=warning,
        balustrade_override=override,
    )
