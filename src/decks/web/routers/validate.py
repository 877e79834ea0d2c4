"""Configuration validation endpoint."""

from fastapi import APIRouter

from decks.application import CalculateDeckCommand
from decks.application.config import ConfigError, config_to_footprint, load_config_from_dict
from decks.web.schemas.requests import ConfigValidateRequest
from decks.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a deck configuration and report structural advisories.

    Configuration problems are reported in the body with is_valid false
    rather than as an error status.
    """
    try:
        config = load_config_from_dict(request.config)
        config_to_footprint(config)
        command, deck_input = CalculateDeckCommand.from_config(config)
    except ConfigError as e:
        errors = e.details or [{"message": e.message}]
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", e.message), "path": d.get("path")}
                for d in errors
            ],
        )

    output = command.execute(deck_input)
    return ValidationResultSchema(
        is_valid=output.is_valid,
        errors=[{"message": error, "path": None} for error in output.errors],
        warnings=output.advisories,
    )
