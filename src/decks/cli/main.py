"""Typer CLI for deck framing calculations."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from decks.application import CalculateDeckCommand, DeckInput, DeckOutput
from decks.application.config import ConfigError, load_config
from decks.cli.commands import validate_command
from decks.domain import FramingConfig
from decks.domain.value_objects import DeckingType, TimberGrade
from decks.infrastructure.exporters import BomGenerator, ExporterRegistry


app = typer.Typer(
    name="decks",
    help="Compute pile, bearer and joist layouts for timber decks.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Deck framing calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_point(value: str) -> tuple[float, float]:
    try:
        x_str, y_str = value.split(",")
        return float(x_str), float(y_str)
    except ValueError:
        raise typer.BadParameter(f"Point must be 'x,y' in mm, got '{value}'")


def _run_calculation(
    config_file: Path | None,
    points: list[str] | None,
    width: float | None,
    depth: float | None,
    height: float | None,
    grade: TimberGrade | None,
    decking: DeckingType | None,
) -> tuple[DeckOutput, str, FramingConfig]:
    """Resolve inputs from a config file and/or options and run the command.

    Command-line options override values from the configuration file.

    Returns:
        The command output, the project name and the framing constants
        the output was computed with.
    """
    project_name = "deck"
    if config_file is not None:
        try:
            config = load_config(config_file)
            command, deck_input = CalculateDeckCommand.from_config(config)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        project_name = config.name
    else:
        command = CalculateDeckCommand()
        deck_input = DeckInput(points=[])

    if points:
        deck_input.points = [_parse_point(p) for p in points]
    elif width is not None or depth is not None:
        if width is None or depth is None:
            typer.echo("Error: --width and --depth must be given together", err=True)
            raise typer.Exit(code=1)
        deck_input.points = DeckInput.rectangle(width, depth).points
    elif config_file is None:
        typer.echo(
            "Error: Provide --config, --point (at least 3), or --width and --depth",
            err=True,
        )
        raise typer.Exit(code=1)

    if height is not None:
        deck_input.height = height
    if grade is not None:
        deck_input.timber_grade = grade
    if decking is not None:
        deck_input.decking_type = decking

    output = command.execute(deck_input)
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return output, project_name, command.config


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
PointOption = Annotated[
    list[str] | None,
    typer.Option("--point", "-p", help="Footprint vertex as 'x,y' in mm (repeat, in order)"),
]
WidthOption = Annotated[
    float | None,
    typer.Option("--width", "-w", help="Rectangular deck width in mm"),
]
DepthOption = Annotated[
    float | None,
    typer.Option("--depth", "-d", help="Rectangular deck depth (projection) in mm"),
]
HeightOption = Annotated[
    float | None,
    typer.Option("--height", "-h", help="Deck height above ground in mm"),
]
GradeOption = Annotated[
    TimberGrade | None,
    typer.Option("--grade", help="Framing timber grade"),
]
DeckingOption = Annotated[
    DeckingType | None,
    typer.Option("--decking", help="Decking board profile"),
]
OutputFileOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
]


def _emit(text: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(text)
    else:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output_file}")


@app.command()
def calculate(
    config_file: ConfigOption = None,
    points: PointOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    height: HeightOption = None,
    grade: GradeOption = None,
    decking: DeckingOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json, bom"),
    ] = "summary",
    output_file: OutputFileOption = None,
) -> None:
    """Calculate the framing layout for a deck."""
    if not ExporterRegistry.is_registered(output_format):
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Error: Unknown format '{output_format}'. Available: {available}", err=True)
        raise typer.Exit(code=1)

    output, project_name, framing = _run_calculation(
        config_file, points, width, depth, height, grade, decking
    )

    exporter_class = ExporterRegistry.get(output_format)
    if output_format == "summary":
        exporter = exporter_class(
            project_name=project_name, joist_spacing=framing.joist_spacing
        )
    else:
        exporter = exporter_class()
    _emit(exporter.export_string(output), output_file)

    if output.result is not None and output.result.cantilever_warning:
        typer.echo(f"Warning: {output.result.cantilever_warning}", err=True)


@app.command()
def bom(
    config_file: ConfigOption = None,
    points: PointOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    height: HeightOption = None,
    grade: GradeOption = None,
    decking: DeckingOption = None,
    bom_format: Annotated[
        str,
        typer.Option("--bom-format", help="BOM format: text, csv, json"),
    ] = "text",
    waste: Annotated[
        float,
        typer.Option("--waste", help="Waste multiplier for linear-meter items"),
    ] = 1.1,
    output_file: OutputFileOption = None,
) -> None:
    """Show the bill of materials for a deck."""
    try:
        generator = BomGenerator(output_format=bom_format, waste_factor=waste)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output, _, _ = _run_calculation(config_file, points, width, depth, height, grade, decking)
    _emit(generator.export_string(output), output_file)


if __name__ == "__main__":
    app()
