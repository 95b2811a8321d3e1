"""JSON exporter for computed layouts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from ledwall.domain import Cell
from ledwall.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)

# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def cell_to_dict(cell: Cell) -> dict[str, Any]:
    data: dict[str, Any] = {
        "x": cell.x,
        "y": cell.y,
        "width": cell.width,
        "height": cell.height,
        "kind": cell.kind.value,
        "row": cell.row,
    }
    if cell.catalog_id is not None:
        data["catalog_id"] = cell.catalog_id
    return data


def layout_to_dict(output: LayoutOutput, include_cells: bool = True) -> dict[str, Any]:
    """Plain-data view of a layout result."""
    data: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "screen": {
            "width_mm": output.screen_width_mm,
            "height_mm": output.screen_height_mm,
        },
        "orientation": output.orientation.value,
        "valid": output.valid,
        "status": output.status.value,
        "warning": output.warning,
        "warnings": list(output.warnings),
        "module": {"width": output.module.width, "height": output.module.height},
        "total_modules": output.total_modules,
        "missing_area_mm2": output.missing_area,
        "counts": {kind.value: count for kind, count in output.count_by_kind().items()},
    }
    if output.panel is not None:
        data["consumption"] = {
            "panel_id": output.panel.panel_id,
            "panel_name": output.panel.name,
            "watt_per_m2": output.panel.watt_per_m2,
            "watts": output.consumption_watts,
        }
    if include_cells:
        data["cells"] = [cell_to_dict(cell) for cell in output.cells]
    return data


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """JSON exporter for layout results.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_cells: bool = True, indent: int = 2) -> None:
        self.include_cells = include_cells
        self.indent = indent

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported layout JSON to %s", path)

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(layout_to_dict(output, self.include_cells), indent=self.indent)
