"""Output formatters for LED wall layouts."""

from __future__ import annotations

from typing import Sequence

from ledwall.application.dtos import LayoutOutput
from ledwall.domain import CaseCatalog, Cell, CellKind, LedPanel

# One character per cell kind in ASCII diagrams
CELL_KIND_CHARS: dict[CellKind, str] = {
    CellKind.STANDARD: "S",
    CellKind.CUSTOM_PREMADE: "P",
    CellKind.CUSTOM_NEW: "N",
    CellKind.MISSING: "?",
    CellKind.MODULE_FILLED: "m",
}

CELL_KIND_LABELS: dict[CellKind, str] = {
    CellKind.STANDARD: "Standard case",
    CellKind.CUSTOM_PREMADE: "Custom case (catalog)",
    CellKind.CUSTOM_NEW: "Custom case (new)",
    CellKind.MISSING: "Missing",
    CellKind.MODULE_FILLED: "Module filled",
}


def _format_area_m2(area_mm2: int) -> str:
    return f"{area_mm2 / 1_000_000:.3f} m2"


class LayoutTableFormatter:
    """Formats layout cells as a table with per-kind totals."""

    def format(self, output: LayoutOutput) -> str:
        """Format all cells in emission order."""
        if not output.cells:
            return "No cells in layout."

        lines = [
            "CASE LAYOUT",
            "=" * 78,
            f"{'#':<4} {'Row':<4} {'X':>6} {'Y':>6} {'Width':>6} {'Height':>6}  "
            f"{'Kind':<16} {'Catalog'}",
            "-" * 78,
        ]

        for index, cell in enumerate(output.cells, start=1):
            lines.append(
                f"{index:<4} {cell.row:<4} {cell.x:>6} {cell.y:>6} {cell.width:>6} "
                f"{cell.height:>6}  {cell.kind.value:<16} {cell.catalog_id or ''}"
            )

        lines.append("-" * 78)
        for kind, count in output.count_by_kind().items():
            area = sum(cell.area for cell in output.cells if cell.kind is kind)
            lines.append(
                f"{CELL_KIND_LABELS[kind]:<24} {count:>4} cells  {_format_area_m2(area):>12}"
            )
        lines.append(
            f"{'TOTAL':<24} {len(output.cells):>4} cells  "
            f"{_format_area_m2(sum(cell.area for cell in output.cells)):>12}"
        )

        return "\n".join(lines)


class LayoutDiagramFormatter:
    """Formats ASCII diagrams of LED wall layouts.

    The screen is scaled onto a character grid; each cell is drawn with
    the letter of its kind, with the first column and row of the cell
    marked by ``|`` and ``-`` so neighbouring cases of the same kind stay
    distinguishable.
    """

    def __init__(self, width: int = 60) -> None:
        self.width = width

    def format(self, output: LayoutOutput) -> str:
        """Generate an ASCII diagram of the layout."""
        if not output.cells:
            return "No cells to display."

        screen_w = output.screen_width_mm
        screen_h = output.screen_height_mm
        scale_x = self.width / screen_w
        # Terminal characters are about twice as tall as they are wide
        grid_height = max(int(self.width * screen_h / screen_w * 0.5), 4)
        scale_y = grid_height / screen_h

        grid = [[" " for _ in range(self.width)] for _ in range(grid_height)]
        for cell in output.cells:
            self._draw_cell(grid, cell, scale_x, scale_y)

        lines = [
            "LED WALL LAYOUT DIAGRAM",
            "=" * (self.width + 2),
            "+" + "-" * self.width + "+",
        ]
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * self.width + "+")

        lines.append("")
        lines.append(f"Screen: {screen_w} x {screen_h} mm ({output.orientation.value})")
        legend = "  ".join(
            f"{CELL_KIND_CHARS[kind]}={CELL_KIND_LABELS[kind]}"
            for kind in output.count_by_kind()
        )
        lines.append(f"Legend: {legend}")

        return "\n".join(lines)

    def _draw_cell(
        self, grid: list[list[str]], cell: Cell, scale_x: float, scale_y: float
    ) -> None:
        """Fill the grid squares covered by one cell."""
        x1 = int(cell.x * scale_x)
        y1 = int(cell.y * scale_y)
        x2 = max(int(cell.right * scale_x), x1 + 1)
        y2 = max(int(cell.bottom * scale_y), y1 + 1)
        char = CELL_KIND_CHARS[cell.kind]

        for y in range(y1, min(y2, len(grid))):
            for x in range(x1, min(x2, self.width)):
                if x == x1 and x2 - x1 > 1:
                    grid[y][x] = "|"
                elif y == y1 and y2 - y1 > 1:
                    grid[y][x] = "-"
                else:
                    grid[y][x] = char


class LayoutSummaryFormatter:
    """Formats a short summary of a layout result."""

    def format(self, output: LayoutOutput) -> str:
        lines = [
            "LAYOUT SUMMARY",
            "=" * 60,
            f"Screen:        {output.screen_width_mm} x {output.screen_height_mm} mm "
            f"({output.screen_area_m2:.3f} m2)",
            f"Orientation:   {output.orientation.value}",
            f"Status:        {output.status.value}" + ("" if output.valid else " (invalid)"),
            f"Cells:         {len(output.cells)}",
            f"LED modules:   {output.total_modules:g} ({output.module} mm)",
            f"Missing area:  {_format_area_m2(output.missing_area)}",
        ]
        if output.panel is not None and output.consumption_watts is not None:
            lines.append(
                f"Consumption:   {output.consumption_watts:.1f} W "
                f"({output.panel.name}, {output.panel.watt_per_m2:g} W/m2)"
            )
        if output.warnings:
            lines.append("")
            lines.append("Warnings:")
            for warning in output.warnings:
                lines.append(f"  - {warning}")
        return "\n".join(lines)


class CatalogFormatter:
    """Formats the standard case and custom catalog."""

    def format(self, catalog: CaseCatalog) -> str:
        standard = catalog.standard
        lines = [
            "CASE CATALOG",
            "=" * 50,
            f"Standard case: {standard.width} x {standard.height} mm "
            f"(row height {catalog.row_height} mm)",
            "",
            f"{'Catalog id':<20} {'Width':>8} {'Height':>8}",
            "-" * 50,
        ]
        if not catalog.custom:
            lines.append("(no custom cases)")
        for case in catalog.custom:
            lines.append(f"{case.catalog_id or '-':<20} {case.width:>8} {case.height:>8}")
        return "\n".join(lines)


class PanelFormatter:
    """Formats the LED panel catalog."""

    def format(self, panels: Sequence[LedPanel]) -> str:
        lines = [
            "LED PANELS",
            "=" * 50,
            f"{'Id':<12} {'Name':<24} {'W/m2':>10}",
            "-" * 50,
        ]
        for panel in panels:
            lines.append(f"{panel.panel_id:<12} {panel.name:<24} {panel.watt_per_m2:>10g}")
        return "\n".join(lines)
