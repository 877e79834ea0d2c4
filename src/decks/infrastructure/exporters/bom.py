"""Bill of Materials generator for deck calculations.

Turns a calculation result into an order list:
- Foundation: piles (with footing length) and concrete
- Framing: bearers and joists in linear meters
- Finish: decking boards in linear meters
- Hardware: screws and joist hangers/bolts

Linear-meter quantities include a waste allowance. Output formats:
text, csv, json.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from decks.domain.services.framing import (
    FOOTING_DEPTH,
    PILE_SPEC,
    WASTE_FACTOR,
    get_decking_spec,
)
from decks.domain.services.framing.constants import CONCRETE_BAG_KG, SCREWS_PER_BOX
from decks.infrastructure.exporters.base import ExporterRegistry, write_export

if TYPE_CHECKING:
    from decks.application.dtos import DeckOutput


logger = logging.getLogger(__name__)

MM_PER_M = 1000.0


@dataclass(frozen=True)
class BomItem:
    """One line of the bill of materials.

    Attributes:
        category: Grouping ("Foundation", "Framing", "Finish", "Hardware").
        name: Item description.
        quantity: Amount to order.
        unit: Unit of the quantity ("pcs", "bags", "LM", "qty", "mixed").
        detail: How the quantity was derived.
    """

    category: str
    name: str
    quantity: int
    unit: str
    detail: str = ""


@dataclass
class BillOfMaterials:
    """Complete bill of materials for a deck."""

    items: tuple[BomItem, ...] = field(default_factory=tuple)

    def by_category(self) -> dict[str, list[BomItem]]:
        """Items grouped by category, in first-seen order."""
        groups: dict[str, list[BomItem]] = {}
        for item in self.items:
            groups.setdefault(item.category, []).append(item)
        return groups


@ExporterRegistry.register("bom")
class BomGenerator:
    """Bill of Materials generator for deck calculations.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(
        self,
        output_format: str = "text",
        waste_factor: float = WASTE_FACTOR,
        footing_depth: float = FOOTING_DEPTH,
    ) -> None:
        """Initialize the BOM generator.

        Args:
            output_format: Output format - "text", "csv", or "json".
            waste_factor: Multiplier applied to linear-meter quantities.
            footing_depth: Pile length below ground in mm.
        """
        if output_format not in ("text", "csv", "json"):
            raise ValueError(f"Unsupported BOM output format: {output_format}")
        if waste_factor < 1.0:
            raise ValueError("waste_factor must be at least 1.0")
        self.output_format = output_format
        self.waste_factor = waste_factor
        self.footing_depth = footing_depth
        self._file_extension = {"text": "txt", "csv": "csv", "json": "json"}[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def _linear_meters(self, length_mm: float, runs: int) -> int:
        return math.ceil(length_mm / MM_PER_M * runs * self.waste_factor)

    def generate(self, output: DeckOutput) -> BillOfMaterials:
        """Generate the bill of materials.

        Args:
            output: A valid deck calculation output.

        Returns:
            BillOfMaterials with every order line.

        Raises:
            ValueError: If the output has no calculation result.
        """
        result = output.result
        footprint = output.footprint
        if result is None or footprint is None:
            raise ValueError("Cannot generate a bill of materials without a result")

        decking = get_decking_spec(output.materials.decking_type)

        items = (
            BomItem(
                category="Foundation",
                name=f"{PILE_SPEC} Piles",
                quantity=result.total_piles,
                unit="pcs",
                detail=f"Length: {footprint.height + self.footing_depth:.0f}mm (including footing)",
            ),
            BomItem(
                category="Foundation",
                name=f"Concrete ({CONCRETE_BAG_KG:.0f}kg bags)",
                quantity=result.concrete_bags,
                unit="bags",
                detail=f"{result.concrete_bags // max(result.total_piles, 1)}x {CONCRETE_BAG_KG:.0f}kg bags per pile",
            ),
            BomItem(
                category="Framing",
                name=f"{result.bearer_size} Bearers",
                quantity=self._linear_meters(result.width, result.bearer_rows),
                unit="LM",
                detail=f"Based on {result.bearer_rows} rows across {result.width:.0f}mm width",
            ),
            BomItem(
                category="Framing",
                name=f"{result.joist_size} Joists",
                quantity=self._linear_meters(result.projection, result.joist_count),
                unit="LM",
                detail=f"Based on {result.joist_count} joists",
            ),
            BomItem(
                category="Finish",
                name=decking.label,
                quantity=self._linear_meters(result.width, result.decking_board_count),
                unit="LM",
                detail=f"{result.decking_board_count} board rows",
            ),
            BomItem(
                category="Hardware",
                name="Decking Screws (Stainless)",
                quantity=math.ceil(result.screws_count / SCREWS_PER_BOX) * SCREWS_PER_BOX,
                unit="qty",
                detail=f"Rounded up to boxes of {SCREWS_PER_BOX}",
            ),
            BomItem(
                category="Hardware",
                name="Joist Hangers & Bolts",
                quantity=result.total_piles + result.joist_count * 2,
                unit="mixed",
                detail="M12 bolts for piles, hangers for joists",
            ),
        )
        logger.debug(f"Generated BOM with {len(items)} items")
        return BillOfMaterials(items=items)

    def export(self, output: DeckOutput, path: Path) -> None:
        """Export BOM to file."""
        write_export(self, output, path)

    def export_string(self, output: DeckOutput) -> str:
        """Generate BOM in the configured format as a string."""
        bom = self.generate(output)

        if self.output_format == "csv":
            return self.format_csv(bom)
        elif self.output_format == "json":
            return self.format_json(bom)
        else:
            return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        """Format BOM as human-readable text."""
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append(f"(Linear meters include {round((self.waste_factor - 1) * 100)}% waste)")
        lines.append("=" * 60)
        lines.append("")

        for category, items in bom.by_category().items():
            lines.append(category.upper())
            lines.append("-" * 40)
            for item in items:
                lines.append(f"  {item.name}: {item.quantity} {item.unit}")
                if item.detail:
                    lines.append(f"    {item.detail}")
            lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        """Format BOM as CSV."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["Category", "Item", "Quantity", "Unit", "Detail"])
        for item in bom.items:
            writer.writerow([item.category, item.name, item.quantity, item.unit, item.detail])
        return output.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        """Format BOM as JSON."""
        data: dict[str, Any] = {
            "waste_factor": self.waste_factor,
            "items": [
                {
                    "category": item.category,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit": item.unit,
                    "detail": item.detail,
                }
                for item in bom.items
            ],
        }
        return json.dumps(data, indent=2)
