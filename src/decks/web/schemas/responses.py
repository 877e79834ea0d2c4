"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CalculationResponse(BaseModel):
    """Result of a deck calculation."""

    piles_per_row: int
    bearer_rows: int
    total_piles: int
    bearer_size: str
    joist_size: str
    joist_count: int
    decking_board_count: int
    concrete_bags: int
    screws_count: int
    bearer_span: float
    joist_span: float
    area: float
    cantilever_warning: str | None = None
    max_joist_cantilever: float
    width: float
    projection: float
    bearer_linear_m: float
    joist_linear_m: float
    perimeter_linear_m: float
    balustrade_required: bool
    consent_required: bool
    layout: dict[str, Any] | None = None


class ValidationResultSchema(BaseModel):
    """Result of validating a configuration."""

    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
