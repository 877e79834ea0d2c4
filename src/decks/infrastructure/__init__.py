"""Infrastructure layer - exporters for deck calculation output."""

from decks.infrastructure.exporters import (
    BillOfMaterials,
    BomGenerator,
    BomItem,
    ExporterRegistry,
    JsonExporter,
    SummaryFormatter,
)

__all__ = [
    "BillOfMaterials",
    "BomGenerator",
    "BomItem",
    "ExporterRegistry",
    "JsonExporter",
    "SummaryFormatter",
]
