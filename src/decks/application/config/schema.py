"""Pydantic schema for deck configuration files.

A configuration file describes one deck: its footprint, its height, the
materials and optional overrides for the framing constants.

Example:
    {
        "schema_version": "1.0",
        "footprint": {
            "points": [{"x": 0, "y": 0}, {"x": 4000, "y": 0},
                       {"x": 4000, "y": 3000}, {"x": 0, "y": 3000}],
            "height": 600
        },
        "materials": {"timber_grade": "sg8_wet", "decking_type": "premium_pine_90"}
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from decks.domain.value_objects import DeckingType, TimberGrade

# Supported schema versions for configuration files
# Version 1.0: Footprint, height and materials
# Version 1.1: Added framing constant overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class PointConfig(BaseModel):
    """A footprint vertex in millimeters."""

    model_config = ConfigDict(extra="forbid")

    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


class FootprintConfig(BaseModel):
    """Deck outline and height.

    Attributes:
        points: Ordered outline vertices, without repeating the first point.
        height: Deck surface height above ground in mm.
    """

    model_config = ConfigDict(extra="forbid")

    points: list[PointConfig] = Field(..., min_length=3, max_length=64)
    height: float = Field(default=600.0, ge=0.0, le=10000.0)


class MaterialsConfig(BaseModel):
    """Timber grade and decking profile."""

    model_config = ConfigDict(extra="forbid")

    timber_grade: TimberGrade = TimberGrade.SG8_WET
    decking_type: DeckingType = DeckingType.PREMIUM_PINE_90


class FramingConfigSchema(BaseModel):
    """Optional overrides for the framing constants.

    Omitted fields keep the engine defaults.
    """

    model_config = ConfigDict(extra="forbid")

    max_joist_span: float | None = Field(default=None, gt=0)
    max_pile_spacing: float | None = Field(default=None, gt=0)
    edge_offset: float | None = Field(default=None, ge=0)
    joist_spacing: float | None = Field(default=None, gt=0)
    decking_gap: float | None = Field(default=None, ge=0)
    balustrade_height: float | None = Field(default=None, ge=0)
    balustrade_cantilever: float | None = Field(default=None, ge=0)
    light_joist_cantilever_cap: float | None = Field(default=None, gt=0)
    medium_joist_cantilever_cap: float | None = Field(default=None, gt=0)
    consent_height: float | None = Field(default=None, ge=0)
    min_piles: int | None = Field(default=None, ge=1)
    bags_per_pile: int | None = Field(default=None, ge=0)
    screws_per_m2: float | None = Field(default=None, ge=0)


class DeckConfiguration(BaseModel):
    """Root model for a deck configuration file.

    Attributes:
        schema_version: Configuration format version.
        name: Optional project name used in reports.
        footprint: Deck outline and height.
        materials: Timber grade and decking profile.
        framing: Optional framing constant overrides.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    name: str = Field(default="deck", min_length=1, max_length=100)
    footprint: FootprintConfig
    materials: MaterialsConfig = Field(default_factory=MaterialsConfig)
    framing: FramingConfigSchema | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
