"""Filling residual gaps with a grid of LED modules.

A gap left by the row partitioner can still be built if it holds a whole
number of LED modules in both directions. Remainders strictly below the
tolerance fraction of a module are rounded to the nearest multiple, which
is always the lower one because the tolerance stays below one half. The
rounded-off sliver is absorbed by the last column or row of the grid so the
gap stays exactly covered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable

from ..value_objects import Cell, CellKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubdivisionResult:
    """Cells after subdivision plus the gaps that could not be resolved.

    Attributes:
        cells: All input cells, with resolved gaps replaced by module grids.
        warnings: One message per gap left as missing.
        resolved: Number of gaps turned into module grids.
    """

    cells: tuple[Cell, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)
    resolved: int = 0

    @property
    def unresolved(self) -> int:
        return len(self.warnings)


def _module_count(length: int, module: int, tolerance: float) -> int | None:
    """Number of whole modules along ``length`` after tolerance rounding, or None."""
    count, remainder = divmod(length, module)
    if remainder and remainder >= tolerance * module:
        return None
    return count or None


def _split(start: int, length: int, module: int, count: int) -> list[tuple[int, int]]:
    """Offsets and sizes of ``count`` modules, the last one absorbing the remainder."""
    parts = [(start + index * module, module) for index in range(count)]
    last_start, _ = parts[-1]
    parts[-1] = (last_start, start + length - last_start)
    return parts


def subdivide(
    cells: Iterable[Cell],
    module_width: int,
    module_height: int,
    tolerance: float = 0.1,
) -> SubdivisionResult:
    """Replace missing cells with module grids where the tolerance allows.

    Args:
        cells: Layout cells in screen coordinates.
        module_width: Module width in mm.
        module_height: Module height in mm.
        tolerance: Fraction of a module dimension that may be rounded away.

    Returns:
        SubdivisionResult. The total cell area is unchanged.

    Raises:
        ValueError: If a module size is not positive or the tolerance is
            outside [0, 0.5).
    """
    if module_width <= 0 or module_height <= 0:
        raise ValueError("Module dimensions must be positive")
    if not 0 <= tolerance < 0.5:
        raise ValueError("Tolerance must be between 0 and 0.5")

    output: list[Cell] = []
    warnings: list[str] = []
    resolved = 0

    for cell in cells:
        if cell.kind is not CellKind.MISSING:
            output.append(cell)
            continue

        columns = _module_count(cell.width, module_width, tolerance)
        rows = _module_count(cell.height, module_height, tolerance)
        if columns is None or rows is None:
            warnings.append(
                f"Gap {cell.width}x{cell.height} mm at ({cell.x}, {cell.y}) "
                f"does not round to whole {module_width}x{module_height} mm modules"
            )
            output.append(cell)
            continue

        logger.debug(
            "Filling %dx%d gap at (%d, %d) with %dx%d modules",
            cell.width,
            cell.height,
            cell.x,
            cell.y,
            columns,
            rows,
        )
        for y, height in _split(cell.y, cell.height, module_height, rows):
            for x, width in _split(cell.x, cell.width, module_width, columns):
                output.append(
                    replace(
                        cell, x=x, y=y, width=width, height=height, kind=CellKind.MODULE_FILLED
                    )
                )
        resolved += 1

    return SubdivisionResult(cells=tuple(output), warnings=tuple(warnings), resolved=resolved)


class ModuleSubdivider:
    """Subdivides gaps for a fixed module size and tolerance."""

    def __init__(self, module_width: int, module_height: int, tolerance: float = 0.1) -> None:
        self.module_width = module_width
        self.module_height = module_height
        self.tolerance = tolerance

    def subdivide(self, cells: Iterable[Cell]) -> SubdivisionResult:
        return subdivide(cells, self.module_width, self.module_height, self.tolerance)
