"""Layout aggregates produced by the tiling engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

from .value_objects import Cell, CellKind, Orientation


class LayoutStatus(str, Enum):
    """Outcome of a layout computation.

    - EXACT: the screen is tiled by cases, layout is valid. Rows whose
      sub-tolerance remainder was merged into a custom_new case count as
      exact.
    - PATCHED: some rows needed module-filled gaps, but every gap was resolved
    - INCOMPLETE: uncovered gaps remain or a structural check failed
    """

    EXACT = "exact"
    PATCHED = "patched"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class Layout:
    """An ordered tiling of the screen plus its validity.

    Layouts are never mutated; helpers return new instances.

    Attributes:
        cells: Cells in emission order (row by row, left to right).
        valid: False when a row could not be partitioned or a check failed.
        warnings: Human-readable reasons, in the order they were raised.
    """

    cells: tuple[Cell, ...] = ()
    valid: bool = True
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def warning(self) -> str | None:
        """All warnings joined into one message, or None."""
        if not self.warnings:
            return None
        return "; ".join(self.warnings)

    @property
    def total_area(self) -> int:
        return sum(cell.area for cell in self.cells)

    @property
    def missing_area(self) -> int:
        """Area of cells left uncovered."""
        return sum(cell.area for cell in self.cells if cell.kind is CellKind.MISSING)

    @property
    def covered_area(self) -> int:
        return self.total_area - self.missing_area

    def cells_of_kind(self, kind: CellKind) -> tuple[Cell, ...]:
        return tuple(cell for cell in self.cells if cell.kind is kind)

    def with_cells(self, cells: Iterable[Cell]) -> Layout:
        return replace(self, cells=tuple(cells))

    def with_warnings(self, *warnings: str) -> Layout:
        return replace(self, warnings=self.warnings + tuple(warnings))

    def invalidated(self, *warnings: str) -> Layout:
        """Return a copy flagged invalid, with extra warnings appended."""
        return replace(self, valid=False, warnings=self.warnings + tuple(warnings))


@dataclass(frozen=True)
class Candidate:
    """A layout together with the orientation that produced it."""

    layout: Layout
    orientation: Orientation

    @property
    def missing_area(self) -> int:
        return self.layout.missing_area
