"""Row-by-row tiling of a screen with catalog cases.

The screen is cut into full rows of the standard case height and at most
one shorter bottom row. Each row is partitioned independently: full rows
may use the standard width and any custom width of the same height, the
bottom row only custom widths matching its exact height.
"""

from __future__ import annotations

import logging

from ..catalog import TilingConfig
from ..entities import Layout
from ..value_objects import Cell, CellKind, Orientation, require_positive_int
from .row_partitioner import partition_with_missing

logger = logging.getLogger(__name__)

NO_MATCHING_HEIGHT = "no catalog entry matches residual row height"


class LayoutBuilder:
    """Builds a single-orientation layout from a tiling configuration.

    Attributes:
        config: Catalog, module sizes and tolerance shared by every build.
    """

    def __init__(self, config: TilingConfig | None = None) -> None:
        self.config = config or TilingConfig()

    def build(
        self,
        screen_width: int,
        screen_height: int,
        orientation: Orientation = Orientation.DIRECT,
    ) -> Layout:
        """Tile a ``screen_width x screen_height`` frame into rows.

        For the rotated orientation the caller passes the swapped screen;
        the resulting coordinates are still in that swapped frame.

        Args:
            screen_width: Frame width in mm.
            screen_height: Frame height in mm.
            orientation: Orientation being built, selects the module width
                used for the gap tolerance.

        Returns:
            Layout with cells in row order. Invalid when any row could not
            be fully covered.
        """
        require_positive_int("screen_width", screen_width)
        require_positive_int("screen_height", screen_height)

        catalog = self.config.catalog
        row_height = catalog.row_height
        module_width = self.config.build_module_width(orientation)
        full_rows, bottom_height = divmod(screen_height, row_height)

        logger.debug(
            "Building %s layout %dx%d: %d full rows, bottom row %d mm",
            orientation.value,
            screen_width,
            screen_height,
            full_rows,
            bottom_height,
        )

        cells: list[Cell] = []
        problems: list[str] = []

        full_row_widths = {catalog.standard.width} | catalog.custom_widths_for_height(
            row_height
        )
        for row in range(full_rows):
            row_cells, row_problems = self._build_row(
                row=row,
                y=row * row_height,
                width=screen_width,
                height=row_height,
                allowed=full_row_widths,
                module_width=module_width,
                orientation=orientation,
            )
            cells.extend(row_cells)
            problems.extend(row_problems)

        if bottom_height > 0:
            y = full_rows * row_height
            bottom_widths = catalog.custom_widths_for_height(bottom_height)
            if not bottom_widths:
                problems.append(
                    f"Row {full_rows} ({orientation.value}) at y={y} mm: "
                    f"{NO_MATCHING_HEIGHT} {bottom_height} mm "
                    f"(width {screen_width} mm)"
                )
                cells.append(
                    Cell(
                        x=0,
                        y=y,
                        width=screen_width,
                        height=bottom_height,
                        kind=CellKind.MISSING,
                        row=full_rows,
                    )
                )
            else:
                row_cells, row_problems = self._build_row(
                    row=full_rows,
                    y=y,
                    width=screen_width,
                    height=bottom_height,
                    allowed=bottom_widths,
                    module_width=module_width,
                    orientation=orientation,
                )
                cells.extend(row_cells)
                problems.extend(row_problems)

        return Layout(cells=tuple(cells), valid=not problems, warnings=tuple(problems))

    def _build_row(
        self,
        row: int,
        y: int,
        width: int,
        height: int,
        allowed: set[int] | frozenset[int],
        module_width: int,
        orientation: Orientation,
    ) -> tuple[list[Cell], list[str]]:
        """Partition one row and emit its cells left to right."""
        result = partition_with_missing(
            width, allowed, module_width, self.config.missing_tolerance
        )

        cells: list[Cell] = []
        problems: list[str] = []
        x = 0
        for segment in result.segments:
            kind, catalog_id = self._classify(segment, height)
            cells.append(
                Cell(
                    x=x,
                    y=y,
                    width=segment,
                    height=height,
                    kind=kind,
                    catalog_id=catalog_id,
                    row=row,
                )
            )
            x += segment

        if result.missing > 0:
            cells.append(
                Cell(
                    x=x,
                    y=y,
                    width=result.missing,
                    height=height,
                    kind=CellKind.MISSING,
                    row=row,
                )
            )
            x += result.missing
            problems.append(
                f"Row {row} ({orientation.value}) at y={y} mm cannot be partitioned: "
                f"{result.missing} mm of {width} mm uncovered at height {height} mm"
            )

        if x != width:
            problems.append(
                f"Row {row} ({orientation.value}) at y={y} mm covers {x} mm "
                f"instead of {width} mm"
            )

        return cells, problems

    def _classify(self, width: int, height: int) -> tuple[CellKind, str | None]:
        catalog = self.config.catalog
        if catalog.is_standard(width, height):
            return CellKind.STANDARD, None
        match = catalog.find_custom(width, height)
        if match is not None:
            return CellKind.CUSTOM_PREMADE, match.catalog_id
        return CellKind.CUSTOM_NEW, None
