"""Application commands (use cases) for LED wall layouts."""

from __future__ import annotations

import logging
from typing import Sequence

from ledwall.domain import (
    CellKind,
    Layout,
    LayoutStatus,
    LayoutValidator,
    LedPanel,
    OrientationSelector,
)
from ledwall.domain.services import (
    DEFAULT_PANELS,
    estimate_consumption,
    find_panel,
    subdivide,
    total_modules,
)
from ledwall.domain.value_objects import require_positive_int

from .dtos import LayoutOutput, LayoutRequest

logger = logging.getLogger(__name__)


def layout_status(layout: Layout, structural_problems: Sequence[str]) -> LayoutStatus:
    """Classify a finished layout.

    A layout that only failed because some rows needed module-filled gaps,
    all of which were resolved, is a patched success rather than a failure.
    Merged sub-tolerance remainders never invalidate a row, so a layout made
    only of cases (including custom_new ones) is exact.
    """
    if structural_problems or layout.cells_of_kind(CellKind.MISSING):
        return LayoutStatus.INCOMPLETE
    if layout.valid:
        return LayoutStatus.EXACT
    return LayoutStatus.PATCHED


class ComputeLayoutCommand:
    """Command to compute the best LED case layout for a screen.

    Runs the full pipeline: orientation selection, gap subdivision,
    validation and metrics.
    """

    def __init__(
        self,
        panels: Sequence[LedPanel] = DEFAULT_PANELS,
        validator: LayoutValidator | None = None,
    ) -> None:
        self.panels = tuple(panels)
        self.validator = validator or LayoutValidator()

    def execute(self, request: LayoutRequest) -> LayoutOutput:
        """Execute the layout computation.

        Args:
            request: Screen size, catalog and module configuration.

        Returns:
            LayoutOutput with the chosen cells, validity and metrics. A
            best-effort layout is returned even when the screen cannot be
            tiled.

        Raises:
            InvalidDimensionError: If a screen dimension is not a positive integer.
            PanelNotFoundError: If ``request.panel_id`` is unknown.
            ValueError: If the catalog or module configuration is inconsistent.
        """
        width = require_positive_int("screen_width_mm", request.screen_width_mm)
        height = require_positive_int("screen_height_mm", request.screen_height_mm)
        panel = find_panel(request.panel_id, self.panels) if request.panel_id else None
        config = request.to_tiling_config()

        candidate = OrientationSelector(config).choose(width, height)
        module = config.module_for(candidate.orientation)

        subdivision = subdivide(
            candidate.layout.cells, module.width, module.height, config.missing_tolerance
        )
        layout = candidate.layout.with_cells(subdivision.cells).with_warnings(
            *subdivision.warnings
        )

        problems = self.validator.problems(layout, width, height, candidate.orientation)
        if problems:
            layout = layout.invalidated(*problems)
        status = layout_status(layout, problems)

        consumption = (
            estimate_consumption(width, height, panel.watt_per_m2) if panel else None
        )

        logger.debug(
            "Layout %dx%d: %s, %d cells, status %s",
            width,
            height,
            candidate.orientation.value,
            len(layout.cells),
            status.value,
        )

        return LayoutOutput(
            screen_width_mm=width,
            screen_height_mm=height,
            cells=layout.cells,
            orientation=candidate.orientation,
            valid=layout.valid,
            status=status,
            total_modules=total_modules(layout.cells, module),
            missing_area=layout.missing_area,
            module=module,
            warnings=layout.warnings,
            panel=panel,
            consumption_watts=consumption,
        )


def compute_layout(request: LayoutRequest) -> LayoutOutput:
    """Compute a layout with the default panel catalog."""
    return ComputeLayoutCommand().execute(request)
