"""Infrastructure layer - output formatters, rendering and exporters."""

from .exporters import (
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgLayoutExporter,
)
from .formatters import (
    CatalogFormatter,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    PanelFormatter,
)
from .layout_renderer import CELL_KIND_COLORS, LayoutRenderer

__all__ = [
    "CELL_KIND_COLORS",
    "CatalogFormatter",
    "ExportManager",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "LayoutDiagramFormatter",
    "LayoutRenderer",
    "LayoutSummaryFormatter",
    "LayoutTableFormatter",
    "PanelFormatter",
    "SvgLayoutExporter",
]
