"""Application layer - use cases and orchestration."""

from .commands import CalculateDeckCommand
from .dtos import DeckInput, DeckOutput

__all__ = [
    "CalculateDeckCommand",
    "DeckInput",
    "DeckOutput",
]
