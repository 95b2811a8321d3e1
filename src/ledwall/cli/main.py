"""Typer CLI for LED wall case layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from ledwall.application import MAX_SCREEN_DIMENSION_MM, ComputeLayoutCommand, LayoutOutput
from ledwall.application.config import (
    ConfigError,
    TilingConfiguration,
    config_to_panels,
    config_to_request,
    config_to_tiling_config,
    default_config,
    load_config,
)
from ledwall.cli.commands import (
    display_load_error,
    handle_multi_format_export,
    parse_output_formats,
    validate_command,
)
from ledwall.cli.logging_config import setup_logging
from ledwall.domain import InvalidDimensionError, PanelNotFoundError
from ledwall.infrastructure import (
    CatalogFormatter,
    ExporterRegistry,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    PanelFormatter,
)

TEXT_FORMATS = ("table", "diagram")

app = typer.Typer(
    name="ledwall",
    help="Tile LED screens with standard and custom cases.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    log_file: Annotated[
        str | None,
        typer.Option("--log-file", help="Also write log messages to this file"),
    ] = None,
) -> None:
    """Tile LED screens with standard and custom cases."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file)


def _load_or_default(config_file: Path | None) -> TilingConfiguration:
    """Load the configuration file, or the built-in one when none is given."""
    if config_file is None:
        return default_config()
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _render(result: LayoutOutput, output_format: str) -> str:
    if output_format == "table":
        return (
            LayoutSummaryFormatter().format(result)
            + "\n\n"
            + LayoutTableFormatter().format(result)
        )
    if output_format == "diagram":
        return (
            LayoutSummaryFormatter().format(result)
            + "\n\n"
            + LayoutDiagramFormatter().format(result)
        )
    return ExporterRegistry.get(output_format)().export_string(result)


@app.command()
def layout(
    width: Annotated[int, typer.Option("--width", "-w", help="Screen width in mm")],
    height: Annotated[int, typer.Option("--height", "-h", help="Screen height in mm")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    panel: Annotated[
        str | None,
        typer.Option("--panel", "-p", help="LED panel id for the consumption estimate"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, diagram, json, svg"),
    ] = "table",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,svg (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "ledwall",
) -> None:
    """Compute the case layout of a screen.

    Exit codes:
        0 - A valid layout was found
        1 - Invalid input or configuration
        2 - Only a best-effort (invalid) layout could be produced

    Examples:
        ledwall layout --width 3360 --height 1920
        ledwall layout -w 3360 -h 1920 --format json --output wall.json
        ledwall layout -w 3360 -h 1920 --output-formats all --output-dir ./out
    """
    output_format = output_format.lower()
    available = list(TEXT_FORMATS) + ExporterRegistry.available_formats()
    if output_format not in available:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    for name, value in (("width", width), ("height", height)):
        if value > MAX_SCREEN_DIMENSION_MM:
            typer.echo(
                f"Error: screen {name} {value} mm exceeds the "
                f"{MAX_SCREEN_DIMENSION_MM} mm limit",
                err=True,
            )
            raise typer.Exit(code=1)

    formats = parse_output_formats(output_formats) if output_formats else None

    config = _load_or_default(config_file)
    command = ComputeLayoutCommand(panels=config_to_panels(config))

    try:
        result = command.execute(config_to_request(config, width, height, panel_id=panel))
    except (InvalidDimensionError, PanelNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if formats is not None:
        handle_multi_format_export(formats, output_dir, project_name, result)
    else:
        _write_or_echo(_render(result, output_format), output_file)

    if not result.valid:
        for warning in result.warnings:
            typer.echo(f"Warning: {warning}", err=True)
        raise typer.Exit(code=2)


def _write_or_echo(content: str, output_file: Path | None) -> None:
    if output_file is not None:
        try:
            output_file.write_text(content, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error writing {output_file}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(content)


@app.command()
def catalog(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
) -> None:
    """List the standard case, custom catalog and LED modules."""
    config = _load_or_default(config_file)
    tiling = config_to_tiling_config(config)

    typer.echo(CatalogFormatter().format(tiling.catalog))
    typer.echo()
    typer.echo(f"LED module (direct):  {tiling.module_direct} mm")
    typer.echo(f"LED module (rotated): {tiling.module_rotated} mm")
    typer.echo(f"Missing tolerance:    {tiling.missing_tolerance:g}")


@app.command()
def panels(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
) -> None:
    """List the LED panel types used for consumption estimates."""
    config = _load_or_default(config_file)
    typer.echo(PanelFormatter().format(config_to_panels(config)))


if __name__ == "__main__":
    app()
