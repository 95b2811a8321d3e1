"""Output format handling functions for the ledwall CLI.

This module exports a computed layout to several registered formats at
once, writing one file per format into an output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from ledwall.application import LayoutOutput

from ledwall.infrastructure.exporters import ExporterRegistry, ExportManager

__all__ = [
    "handle_multi_format_export",
    "parse_output_formats",
]


def parse_output_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list, or "all" for every registered format.

    Raises:
        typer.Exit: With code 1 if a format is not registered.
    """
    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid or not formats:
        typer.echo(f"Unknown formats: {', '.join(invalid) or output_formats_str}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> dict[str, Path]:
    """Export a layout to every requested format.

    Args:
        formats: Registered format names, already validated.
        output_dir: Output directory, the current directory when None.
        project_name: Base name of the exported files.
        result: The layout output to export.

    Returns:
        Mapping of format name to written file.
    """
    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
    return files
