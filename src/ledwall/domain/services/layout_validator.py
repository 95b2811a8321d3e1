"""Final consistency checks on a computed layout."""

from __future__ import annotations

from collections import defaultdict

from ..entities import Layout
from ..value_objects import Cell, Orientation


def coverage_problems(cells: tuple[Cell, ...], screen_width: int, screen_height: int) -> list[str]:
    total = sum(cell.area for cell in cells)
    expected = screen_width * screen_height
    if total != expected:
        return [
            f"Coverage mismatch: cells cover {total} mm2, "
            f"screen is {screen_width}x{screen_height} = {expected} mm2"
        ]
    return []


def bounds_problems(cells: tuple[Cell, ...], screen_width: int, screen_height: int) -> list[str]:
    problems: list[str] = []
    for cell in cells:
        if cell.right > screen_width or cell.bottom > screen_height:
            problems.append(
                f"Cell {cell.width}x{cell.height} mm at ({cell.x}, {cell.y}) "
                f"extends outside the {screen_width}x{screen_height} mm screen"
            )
    return problems


def contiguity_problems(cells: tuple[Cell, ...], orientation: Orientation) -> list[str]:
    """Check that cells of each row line abut along the row axis.

    Rows run along x for the direct orientation and along y once a rotated
    layout has been mapped back. Cells are grouped by row and by their
    offset across the row, so each line of a module grid is checked on its
    own.
    """
    along_x = orientation is Orientation.DIRECT
    lines: dict[tuple[int, int], list[Cell]] = defaultdict(list)
    for cell in cells:
        cross = cell.y if along_x else cell.x
        lines[(cell.row, cross)].append(cell)

    problems: list[str] = []
    for (row, cross), line in sorted(lines.items()):
        if along_x:
            spans = sorted((cell.x, cell.right) for cell in line)
        else:
            spans = sorted((cell.y, cell.bottom) for cell in line)
        for (_, end), (start, _) in zip(spans, spans[1:]):
            if end != start:
                axis = "x" if along_x else "y"
                problems.append(
                    f"Row {row} is not contiguous at offset {cross} mm: "
                    f"cell ends at {axis}={end} but next starts at {axis}={start}"
                )
                break
    return problems


class LayoutValidator:
    """Checks area coverage, bounds and row contiguity.

    Failed checks mark the layout invalid and add a warning; cells are
    always returned unchanged so the defect can still be displayed.
    """

    def problems(
        self,
        layout: Layout,
        screen_width: int,
        screen_height: int,
        orientation: Orientation = Orientation.DIRECT,
    ) -> list[str]:
        """All structural problems of the layout, empty when it is sound."""
        return (
            coverage_problems(layout.cells, screen_width, screen_height)
            + bounds_problems(layout.cells, screen_width, screen_height)
            + contiguity_problems(layout.cells, orientation)
        )

    def check(
        self,
        layout: Layout,
        screen_width: int,
        screen_height: int,
        orientation: Orientation = Orientation.DIRECT,
    ) -> Layout:
        problems = self.problems(layout, screen_width, screen_height, orientation)
        if problems:
            return layout.invalidated(*problems)
        return layout
