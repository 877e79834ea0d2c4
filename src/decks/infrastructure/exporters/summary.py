"""Plain-text project summary for a deck calculation."""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from decks.domain.services.framing import (
    FOOTING_DEPTH,
    PILE_SPEC,
    WASTE_FACTOR,
    FramingConfig,
    get_decking_spec,
    get_timber_grade_spec,
)
from decks.domain.services.framing.constants import CONCRETE_BAG_KG, SCREWS_PER_BOX
from decks.infrastructure.exporters.base import ExporterRegistry, write_export

if TYPE_CHECKING:
    from decks.application.dtos import DeckOutput


@ExporterRegistry.register("summary")
class SummaryFormatter:
    """Project summary: dimensions, structure, shopping list and notes.

    ``joist_spacing`` is only used for the "Joist Spacing" line; it should
    match the FramingConfig the result was computed with.
    """

    format_name: ClassVar[str] = "summary"
    file_extension: ClassVar[str] = "txt"

    def __init__(
        self,
        project_name: str = "deck",
        joist_spacing: float = FramingConfig.joist_spacing,
        waste_factor: float = WASTE_FACTOR,
    ) -> None:
        self.project_name = project_name
        self.joist_spacing = joist_spacing
        self.waste_factor = waste_factor

    def export_string(self, output: DeckOutput) -> str:
        if not output.is_valid or output.result is None or output.footprint is None:
            lines = [f"{self.project_name.upper()} - CALCULATION FAILED", ""]
            lines.extend(f"- {error}" for error in output.errors)
            return "\n".join(lines)

        result = output.result
        footprint = output.footprint
        decking = get_decking_spec(output.materials.decking_type)
        grade = get_timber_grade_spec(output.materials.timber_grade)
        waste_pct = round((self.waste_factor - 1) * 100)

        def lm(length_mm: float, runs: int) -> int:
            return math.ceil(length_mm / 1000 * runs * self.waste_factor)

        lines = [
            f"{self.project_name.upper()} PROJECT SUMMARY",
            "=" * 32,
            "",
            "DECK DIMENSIONS:",
            f"- Footprint: {result.width:.0f}mm x {result.projection:.0f}mm",
            f"- Total Area: {result.area:.2f}m²",
            f"- Height off ground: {footprint.height:.0f}mm",
            f"- Perimeter Sides: {len(footprint.points)}",
            "",
            "STRUCTURAL SPECIFICATIONS:",
            f"- Timber Grade: {grade.label}",
            f"- Bearer Type: {result.bearer_size}",
            f"- Joist Type: {result.joist_size}",
            f"- Foundation Piles: {result.total_piles} ({PILE_SPEC})",
            f"- Bearer Spacing: Approx {result.joist_span:.0f}mm centers",
            f"- Pile Spacing: Approx {result.bearer_span:.0f}mm centers",
            f"- Joist Spacing: {self.joist_spacing:.0f}mm centers",
            "",
            f"SHOPPING LIST (Including {waste_pct}% Waste):",
            f"- Piles: {result.total_piles} pcs (Length: {footprint.height + FOOTING_DEPTH:.0f}mm)",
            f"- Concrete: {result.concrete_bags} bags ({CONCRETE_BAG_KG:.0f}kg)",
            f"- Bearers: {lm(result.width, result.bearer_rows)} LM of {result.bearer_size}",
            f"- Joists: {lm(result.projection, result.joist_count)} LM of {result.joist_size}",
            f"- Decking: {lm(result.width, result.decking_board_count)} LM of {decking.label}",
            f"- Hardware: Approx {math.ceil(result.screws_count / SCREWS_PER_BOX) * SCREWS_PER_BOX} Stainless Screws",
            "",
            "NOTES:",
        ]
        if result.cantilever_warning:
            lines.append(f"!! WARNING: {result.cantilever_warning}")
        else:
            lines.append("- Structural layout within cantilever limits.")
        if result.balustrade_required:
            lines.append("- Balustrade required at this deck height.")
        if result.consent_required:
            lines.append("- Building consent required at this deck height.")
        lines.append(f"- Framing timber {grade.treatment}, piles H5.")
        return "\n".join(lines)

    def export(self, output: DeckOutput, path: Path) -> None:
        write_export(self, output, path)
