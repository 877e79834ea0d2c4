"""Unit tests for deck configuration loading.

These tests verify:
- Valid JSON files load into DeckConfiguration with defaults applied
- Each failure category maps to its ConfigError error_type
- Validation errors carry JSON paths to the offending fields
- Adapters build domain objects and report unframeable outlines
"""

from __future__ import annotations

import copy
import math
from pathlib import Path
from typing import Any, Callable

import pytest

from decks.application.config import (
    ConfigError,
    DeckConfiguration,
    config_to_footprint,
    config_to_framing,
    config_to_materials,
    load_config,
    load_config_from_dict,
)
from decks.application.config.loader import _format_json_path
from decks.domain import DeckingType, FramingConfig, TimberGrade


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_file(
        self,
        deck_config_dict: dict[str, Any],
        write_config: Callable[..., Path],
    ) -> None:
        config = load_config(write_config(deck_config_dict))

        assert isinstance(config, DeckConfiguration)
        assert config.name == "backyard"
        assert len(config.footprint.points) == 4
        assert config.footprint.height == 600
        assert config.materials.decking_type is DeckingType.PREMIUM_PINE_90
        assert config.framing is None

    def test_defaults(self, write_config: Callable[..., Path]) -> None:
        data = {
            "footprint": {
                "points": [{"x": 0, "y": 0}, {"x": 1000, "y": 0}, {"x": 0, "y": 1000}]
            }
        }
        config = load_config(write_config(data))

        assert config.schema_version == "1.0"
        assert config.name == "deck"
        assert config.footprint.height == 600
        assert config.materials.timber_grade is TimberGrade.SG8_WET

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, write_config: Callable[..., Path]) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config('{"footprint": '))

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 1
        assert "Invalid JSON" in str(error)

    def test_too_few_points(
        self,
        deck_config_dict: dict[str, Any],
        write_config: Callable[..., Path],
    ) -> None:
        deck_config_dict["footprint"]["points"] = deck_config_dict["footprint"]["points"][:2]

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(deck_config_dict))

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "footprint.points"

    def test_unknown_field_rejected(
        self,
        deck_config_dict: dict[str, Any],
        write_config: Callable[..., Path],
    ) -> None:
        deck_config_dict["colour"] = "grey"

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(deck_config_dict))

        assert exc_info.value.details[0]["path"] == "colour"

    def test_unsupported_schema_version(
        self,
        deck_config_dict: dict[str, Any],
        write_config: Callable[..., Path],
    ) -> None:
        deck_config_dict["schema_version"] = "9.9"

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(deck_config_dict))

        assert "Unsupported schema version" in str(exc_info.value)

    def test_unknown_decking_type(
        self,
        deck_config_dict: dict[str, Any],
        write_config: Callable[..., Path],
    ) -> None:
        deck_config_dict["materials"]["decking_type"] = "bamboo"

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(deck_config_dict))

        assert exc_info.value.details[0]["path"] == "materials.decking_type"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self, deck_config_dict: dict[str, Any]) -> None:
        config = load_config_from_dict(deck_config_dict)
        assert config.footprint.points[2].x == 4000

    def test_nested_path_reported(self, deck_config_dict: dict[str, Any]) -> None:
        data = copy.deepcopy(deck_config_dict)
        data["footprint"]["points"][2]["x"] = "wide"

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)

        assert exc_info.value.details[0]["path"] == "footprint.points[2].x"
        assert exc_info.value.path is None

    def test_non_finite_coordinate_rejected(self, deck_config_dict: dict[str, Any]) -> None:
        deck_config_dict["footprint"]["points"][1]["y"] = math.nan

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(deck_config_dict)

        assert exc_info.value.error_type == "validation"

    def test_negative_height_rejected(self, deck_config_dict: dict[str, Any]) -> None:
        deck_config_dict["footprint"]["height"] = -100

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(deck_config_dict)

        assert exc_info.value.details[0]["path"] == "footprint.height"

    def test_error_message_lists_paths_and_values(
        self, deck_config_dict: dict[str, Any]
    ) -> None:
        deck_config_dict["materials"]["decking_type"] = "bamboo"
        deck_config_dict["footprint"]["points"] = {"x": 0}

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(deck_config_dict)

        lines = str(exc_info.value).splitlines()
        assert lines[0] == "Configuration validation failed:"
        assert "  - materials.decking_type: " in str(exc_info.value)
        assert "(got: 'bamboo')" in str(exc_info.value)
        points_line = next(line for line in lines if "footprint.points" in line)
        assert "(got:" not in points_line


class TestFormatJsonPath:
    """Tests for JSON path formatting."""

    def test_plain_keys(self) -> None:
        assert _format_json_path(("footprint", "height")) == "footprint.height"

    def test_list_index(self) -> None:
        assert _format_json_path(("footprint", "points", 2, "x")) == "footprint.points[2].x"

    def test_leading_index(self) -> None:
        assert _format_json_path((0, "x")) == "[0].x"


class TestAdapters:
    """Tests for configuration-to-domain adapters."""

    def test_footprint(self, deck_config_dict: dict[str, Any]) -> None:
        footprint = config_to_footprint(load_config_from_dict(deck_config_dict))

        assert footprint.height == 600
        assert footprint.bounding_box.width == 4000

    def test_self_intersecting_footprint(self, deck_config_dict: dict[str, Any]) -> None:
        deck_config_dict["footprint"]["points"] = [
            {"x": 0, "y": 0},
            {"x": 2000, "y": 2000},
            {"x": 2000, "y": 0},
            {"x": 0, "y": 1000},
        ]
        config = load_config_from_dict(deck_config_dict)

        with pytest.raises(ConfigError) as exc_info:
            config_to_footprint(config)

        error = exc_info.value
        assert error.error_type == "geometry"
        assert error.details[0]["error_type"] == "self_intersecting"
        assert error.details[0]["reason"].startswith("Self-intersection")

    def test_materials(self, deck_config_dict: dict[str, Any]) -> None:
        deck_config_dict["materials"] = {
            "timber_grade": "sg10_wet",
            "decking_type": "kwila_90",
        }
        materials = config_to_materials(load_config_from_dict(deck_config_dict))

        assert materials.timber_grade is TimberGrade.SG10_WET
        assert materials.decking_type is DeckingType.KWILA_90

    def test_framing_defaults(self, deck_config_dict: dict[str, Any]) -> None:
        assert config_to_framing(load_config_from_dict(deck_config_dict)) == FramingConfig()

    def test_framing_overrides(self, deck_config_dict: dict[str, Any]) -> None:
        deck_config_dict["framing"] = {"max_joist_span": 1000, "edge_offset": 300}
        framing = config_to_framing(load_config_from_dict(deck_config_dict))

        assert framing.max_joist_span == 1000
        assert framing.edge_offset == 300
        assert framing.max_pile_spacing == 1300
