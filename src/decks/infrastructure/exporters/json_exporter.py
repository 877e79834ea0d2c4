"""JSON export of a deck calculation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from decks.domain.services.framing import get_decking_spec, get_timber_grade_spec
from decks.infrastructure.exporters.base import ExporterRegistry, write_export

if TYPE_CHECKING:
    from decks.application.dtos import DeckOutput


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports footprint, materials and the calculation result as JSON.

    Attributes:
        include_layout: Include pile positions and member spans.
        indent: JSON indentation.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_layout: bool = True, indent: int = 2) -> None:
        self.include_layout = include_layout
        self.indent = indent

    def to_dict(self, output: DeckOutput) -> dict[str, Any]:
        """Build the JSON document as a dict."""
        data: dict[str, Any] = {
            "is_valid": output.is_valid,
            "errors": list(output.errors),
            "materials": {
                "timber_grade": output.materials.timber_grade.value,
                "timber_grade_label": get_timber_grade_spec(output.materials.timber_grade).label,
                "decking_type": output.materials.decking_type.value,
                "decking_label": get_decking_spec(output.materials.decking_type).label,
            },
            "footprint": None,
            "result": None,
        }
        if output.footprint is not None:
            data["footprint"] = {
                "points": [{"x": p.x, "y": p.y} for p in output.footprint.points],
                "height": output.footprint.height,
            }
        if output.result is not None:
            data["result"] = output.result.to_dict(include_layout=self.include_layout)
        return data

    def export_string(self, output: DeckOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def export(self, output: DeckOutput, path: Path) -> None:
        write_export(self, output, path)
