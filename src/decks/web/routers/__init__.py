"""API routers for the REST API."""

from decks.web.routers.bom import router as bom_router
from decks.web.routers.calculate import router as calculate_router
from decks.web.routers.validate import router as validate_router

__all__ = [
    "bom_router",
    "calculate_router",
    "validate_router",
]
