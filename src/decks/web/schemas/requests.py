"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from decks.application.config.schema import FootprintConfig, MaterialsConfig


class CalculateRequest(BaseModel):
    """Request for calculating a deck layout."""

    footprint: FootprintConfig = Field(..., description="Deck outline and height")
    materials: MaterialsConfig = Field(
        default_factory=MaterialsConfig, description="Timber grade and decking profile"
    )
    include_layout: bool = Field(
        default=False, description="Include pile positions and member spans"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Deck configuration JSON")


class BomRequest(BaseModel):
    """Request for a bill of materials."""

    config: dict[str, Any] = Field(..., description="Deck configuration JSON")
    format: str = Field(default="json", description="BOM format: text, csv, json")
    waste_factor: float = Field(default=1.1, ge=1.0, le=2.0)
