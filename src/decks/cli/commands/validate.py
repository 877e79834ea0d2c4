"""Validate command for checking deck configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors, then runs the calculation to report structural advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from decks.application import CalculateDeckCommand
from decks.application.config import (
    ConfigError,
    config_to_footprint,
    load_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a deck configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, invalid types, etc.)
    - Footprint geometry (too few points, zero area, crossing edges)
    - Structural advisories (cantilever limits, balustrade, consent)

    Exit codes:
        0 - Configuration is valid with no advisories
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has advisories

    Example:
        decks validate my-deck.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
        config_to_footprint(config)
        command, deck_input = CalculateDeckCommand.from_config(config)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    output = command.execute(deck_input)
    if not output.is_valid:
        typer.echo("Errors:", err=True)
        for error in output.errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(code=1)

    advisories = output.advisories
    if advisories:
        typer.echo("Warnings:")
        for advisory in advisories:
            typer.echo(f"  {advisory}")
        typer.echo()
        typer.echo(f"Validation passed with {len(advisories)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Configuration is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "geometry") and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
