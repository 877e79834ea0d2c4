"""FastAPI REST API for deck calculations.

Provides endpoints for calculating deck framing layouts, validating
configuration files and producing a bill of materials.

Usage:
    uvicorn decks.web:app --reload
"""

from decks.web.app import app, create_app

__all__ = ["app", "create_app"]
