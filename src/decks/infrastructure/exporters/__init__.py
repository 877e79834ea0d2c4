"""Exporter framework for deck calculation outputs.

Registered exporters:
- bom: Bill of materials (text, csv, json)
- json: Footprint, materials, result and framing layout as JSON
- summary: Plain-text project summary

Usage:
    from decks.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("bom")(output_format="csv")
    text = exporter.export_string(deck_output)
"""

from decks.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    write_export,
)
from decks.infrastructure.exporters.bom import (
    BillOfMaterials,
    BomGenerator,
    BomItem,
)
from decks.infrastructure.exporters.json_exporter import JsonExporter
from decks.infrastructure.exporters.summary import SummaryFormatter

__all__ = [
    "BillOfMaterials",
    "BomGenerator",
    "BomItem",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "SummaryFormatter",
    "write_export",
]
