"""Bill of materials endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from decks.application import CalculateDeckCommand
from decks.application.config import ConfigError, load_config_from_dict
from decks.infrastructure.exporters import BomGenerator
from decks.web.exceptions import UnsupportedFormatError
from decks.web.schemas.requests import BomRequest

router = APIRouter(prefix="/bom", tags=["bom"])

BOM_FORMATS = ["csv", "json", "text"]
MEDIA_TYPES = {"csv": "text/csv", "json": "application/json", "text": "text/plain"}


@router.post("")
async def bill_of_materials(body: BomRequest) -> Response:
    """Generate a bill of materials from a deck configuration."""
    if body.format not in BOM_FORMATS:
        raise UnsupportedFormatError(body.format, BOM_FORMATS)

    config = load_config_from_dict(body.config)
    command, deck_input = CalculateDeckCommand.from_config(config)
    output = command.execute(deck_input)
    if not output.is_valid:
        raise ConfigError(
            message="; ".join(output.errors),
            error_type="geometry",
            details=[{"path": "footprint", "message": e} for e in output.errors],
        )

    generator = BomGenerator(output_format=body.format, waste_factor=body.waste_factor)
    content = generator.export_string(output)
    if body.format == "text":
        return PlainTextResponse(content)
    return Response(content=content, media_type=MEDIA_TYPES[body.format])
