"""Exporter framework for LED wall layouts.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- json: Layout cells, status and metrics as JSON
- svg: Coloured diagram of the screen tiling

Usage:
    from ledwall.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("svg")()
    svg = exporter.export_string(layout_output)
"""

from ledwall.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from ledwall.infrastructure.exporters.json_exporter import (
    JsonLayoutExporter,
    cell_to_dict,
    layout_to_dict,
)
from ledwall.infrastructure.exporters.svg import SvgLayoutExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonLayoutExporter",
    "SvgLayoutExporter",
    "cell_to_dict",
    "layout_to_dict",
]
