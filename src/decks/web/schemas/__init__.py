"""Request and response schemas for the REST API."""

from decks.web.schemas.requests import (
    BomRequest,
    CalculateRequest,
    ConfigValidateRequest,
)
from decks.web.schemas.responses import CalculationResponse, ValidationResultSchema

__all__ = [
    "BomRequest",
    "CalculateRequest",
    "CalculationResponse",
    "ConfigValidateRequest",
    "ValidationResultSchema",
]
