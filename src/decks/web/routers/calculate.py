"""Deck calculation endpoint."""

from fastapi import APIRouter

from decks.domain import DeckCalculator, DeckFootprint, MaterialChoice, Point
from decks.web.schemas.requests import CalculateRequest
from decks.web.schemas.responses import CalculationResponse

router = APIRouter(prefix="/calculate", tags=["calculate"])


@router.post("", response_model=CalculationResponse)
async def calculate_deck(request: CalculateRequest) -> CalculationResponse:
    """Calculate the framing layout for a footprint.

    Invalid footprints raise InvalidFootprint, which is returned as a 422
    response by the registered exception handler.
    """
    footprint = DeckFootprint(
        points=tuple(Point(p.x, p.y) for p in request.footprint.points),
        height=request.footprint.height,
    )
    materials = MaterialChoice(
        timber_grade=request.materials.timber_grade,
        decking_type=request.materials.decking_type,
    )
    result = DeckCalculator().calculate(footprint, materials)
    return CalculationResponse(**result.to_dict(include_layout=request.include_layout))
