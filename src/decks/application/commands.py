"""Application commands (use cases) for deck calculation."""

from __future__ import annotations

import logging

from decks.application.config import (
    DeckConfiguration,
    config_to_framing,
    config_to_materials,
)
from decks.domain import (
    DeckCalculator,
    DeckFootprint,
    FramingConfig,
    InvalidFootprint,
    MaterialChoice,
)

from .dtos import DeckInput, DeckOutput

logger = logging.getLogger(__name__)


class CalculateDeckCommand:
    """Command to compute the framing layout for a deck."""

    def __init__(self, config: FramingConfig | None = None) -> None:
        self.config = config or FramingConfig()

    def execute(self, deck_input: DeckInput) -> DeckOutput:
        """Execute the calculation.

        Invalid input and footprints the engine rejects are reported in
        ``DeckOutput.errors`` rather than raised.

        Args:
            deck_input: Outline, height and materials.

        Returns:
            DeckOutput with the result or the errors that prevented it.
        """
        materials = MaterialChoice(
            timber_grade=deck_input.timber_grade,
            decking_type=deck_input.decking_type,
        )

        errors = deck_input.validate()
        if errors:
            return DeckOutput(materials=materials, errors=errors)

        try:
            footprint = DeckFootprint.from_coordinates(
                deck_input.points, height=deck_input.height
            )
        except InvalidFootprint as e:
            logger.info("Rejected footprint (%s): %s", e.error_type, e.message)
            return DeckOutput(materials=materials, errors=[e.message])

        result = DeckCalculator(self.config).calculate(footprint, materials)
        return DeckOutput(footprint=footprint, materials=materials, result=result)

    @classmethod
    def from_config(cls, config: DeckConfiguration) -> tuple[CalculateDeckCommand, DeckInput]:
        """Build a command and its input from a loaded configuration.

        Raises:
            ConfigError: If the framing overrides are invalid.
        """
        materials = config_to_materials(config)
        deck_input = DeckInput(
            points=[(p.x, p.y) for p in config.footprint.points],
            height=config.footprint.height,
            timber_grade=materials.timber_grade,
            decking_type=materials.decking_type,
        )
        return cls(config_to_framing(config)), deck_input
