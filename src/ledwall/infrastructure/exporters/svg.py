"""SVG exporter for layout diagrams.

This module wraps LayoutRenderer to write the layout as an SVG picture of
the screen, one coloured rectangle per cell.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ledwall.infrastructure.exporters.base import ExporterRegistry
from ledwall.infrastructure.layout_renderer import LayoutRenderer

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgLayoutExporter:
    """SVG exporter for layout diagrams.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 0.25,
        show_labels: bool = True,
        show_modules: bool = False,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per millimetre (default 0.25).
            show_labels: Whether to label cells with their size or catalog id.
            show_modules: Whether to draw module boundaries inside cells.
        """
        self.renderer = LayoutRenderer(
            scale=scale, show_labels=show_labels, show_modules=show_modules
        )

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported layout SVG to %s", path)

    def export_string(self, output: LayoutOutput) -> str:
        return self.renderer.render_svg(output)
