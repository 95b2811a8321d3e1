"""SVG rendering of LED wall layouts.

Each cell is drawn as a coloured rectangle in screen coordinates, with a
header line describing the screen and a legend listing the cell kinds in
use.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from ledwall.application.dtos import LayoutOutput
from ledwall.domain import Cell, CellKind

# Color mapping for cell kinds
CELL_KIND_COLORS: dict[CellKind, str] = {
    CellKind.STANDARD: "#4CAF50",  # Green
    CellKind.CUSTOM_PREMADE: "#E53935",  # Red
    CellKind.CUSTOM_NEW: "#FB8C00",  # Orange
    CellKind.MISSING: "#BDBDBD",  # Gray
    CellKind.MODULE_FILLED: "#1E88E5",  # Blue
}


class LayoutRenderer:
    """Renders layouts in SVG format.

    Attributes:
        scale: Pixels per millimetre (default 0.25).
        stroke: Stroke color for cell outlines.
        text_color: Color for labels and header.
        show_labels: Whether to print cell sizes inside cells.
        show_modules: Whether to draw the module grid inside case cells.
    """

    def __init__(
        self,
        scale: float = 0.25,
        stroke: str = "#000000",
        text_color: str = "#000000",
        show_labels: bool = True,
        show_modules: bool = False,
    ) -> None:
        if scale <= 0:
            raise ValueError("SVG scale must be positive")
        self.scale = scale
        self.stroke = stroke
        self.text_color = text_color
        self.show_labels = show_labels
        self.show_modules = show_modules

    def render_svg(self, output: LayoutOutput) -> str:
        """Generate an SVG document for a layout.

        Args:
            output: Computed layout with its screen size.

        Returns:
            SVG string representation of the layout.
        """
        header_height = 30
        kinds_used = list(output.count_by_kind())
        legend_height = 25 * len(kinds_used) + 10 if kinds_used else 0

        svg_width = output.screen_width_mm * self.scale
        screen_height = output.screen_height_mm * self.scale
        svg_height = screen_height + header_height + legend_height

        parts: list[str] = [
            f'<svg width="{svg_width:g}" height="{svg_height:g}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width:g}" height="{svg_height:g}" '
            f'fill="white"/>',
            "",
            self._render_header(output, svg_width, header_height),
            "",
            "  <!-- Screen outline -->",
            f'  <rect x="0" y="{header_height}" width="{svg_width:g}" '
            f'height="{screen_height:g}" fill="none" stroke="{self.stroke}" '
            f'stroke-width="2"/>',
            "",
            "  <!-- Cells -->",
        ]

        for cell in output.cells:
            parts.append(self._render_cell(cell, header_height, output))

        if kinds_used:
            parts.append("")
            parts.append("  <!-- Legend -->")
            parts.append(self._render_legend(kinds_used, header_height + screen_height))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self, output: LayoutOutput, svg_width: float, header_height: float
    ) -> str:
        header_text = (
            f"{output.screen_width_mm} x {output.screen_height_mm} mm - "
            f"{output.orientation.value} - {output.status.value} - "
            f"{output.total_modules:g} modules"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width:g}" height="{header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 10}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{escape(header_text)}</text>'
        )

    def _render_cell(self, cell: Cell, header_height: float, output: LayoutOutput) -> str:
        """Render a single cell as an SVG rect and optional label."""
        x = cell.x * self.scale
        y = header_height + cell.y * self.scale
        w = cell.width * self.scale
        h = cell.height * self.scale
        fill = CELL_KIND_COLORS[cell.kind]

        svg_parts = [
            f'  <g class="cell {cell.kind.value}">',
            f'    <rect x="{x:g}" y="{y:g}" width="{w:g}" height="{h:g}" '
            f'fill="{fill}" stroke="{self.stroke}"/>',
        ]

        if self.show_modules and cell.kind.is_case:
            svg_parts.extend(self._render_module_grid(cell, header_height, output))

        font_size = min(12, min(w, h) / 4)
        if self.show_labels and font_size >= 6:
            label = f"{cell.width}x{cell.height}"
            if cell.catalog_id:
                label = f"{cell.catalog_id}"
            svg_parts.append(
                f'    <text x="{x + w / 2:g}" y="{y + h / 2 + font_size / 3:g}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size:g}" fill="{self.text_color}">{escape(label)}</text>'
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def _render_module_grid(
        self, cell: Cell, header_height: float, output: LayoutOutput
    ) -> list[str]:
        """Thin lines at every module boundary inside a cell."""
        module = output.module
        lines: list[str] = []
        for mx in range(cell.x + module.width, cell.right, module.width):
            x = mx * self.scale
            lines.append(
                f'    <line x1="{x:g}" y1="{header_height + cell.y * self.scale:g}" '
                f'x2="{x:g}" y2="{header_height + cell.bottom * self.scale:g}" '
                f'stroke="#FFFFFF" stroke-width="0.5"/>'
            )
        for my in range(cell.y + module.height, cell.bottom, module.height):
            y = header_height + my * self.scale
            lines.append(
                f'    <line x1="{cell.x * self.scale:g}" y1="{y:g}" '
                f'x2="{cell.right * self.scale:g}" y2="{y:g}" '
                f'stroke="#FFFFFF" stroke-width="0.5"/>'
            )
        return lines

    def _render_legend(self, kinds: list[CellKind], y_offset: float) -> str:
        """Render legend showing cell kind colors."""
        parts: list[str] = []
        swatch_size = 15
        for index, kind in enumerate(kinds):
            y = y_offset + 10 + index * 25
            parts.append(
                f'  <rect x="10" y="{y:g}" width="{swatch_size}" height="{swatch_size}" '
                f'fill="{CELL_KIND_COLORS[kind]}" stroke="{self.stroke}"/>'
            )
            label = kind.value.replace("_", " ").title()
            parts.append(
                f'  <text x="{10 + swatch_size + 5}" y="{y + swatch_size - 3:g}" '
                f'font-family="Arial, sans-serif" font-size="10" '
                f'fill="{self.text_color}">{label}</text>'
            )
        return "\n".join(parts)
