"""Derived metrics: module counts, missing area and power consumption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..value_objects import Cell, CellKind, ModuleSpec

MM2_PER_M2 = 1_000_000


class PanelNotFoundError(KeyError):
    """Raised when a LED panel id is not in the panel catalog."""

    def __init__(self, panel_id: str, available: list[str]) -> None:
        self.panel_id = panel_id
        self.available = available
        super().__init__(panel_id)

    def __str__(self) -> str:
        return f"Unknown LED panel: {self.panel_id}. Available: {', '.join(self.available)}"


@dataclass(frozen=True)
class LedPanel:
    """A LED panel type with its power draw per square metre."""

    panel_id: str
    name: str
    watt_per_m2: float

    def __post_init__(self) -> None:
        if self.watt_per_m2 < 0:
            raise ValueError("Panel wattage must be non-negative")


DEFAULT_PANELS: tuple[LedPanel, ...] = (
    LedPanel(panel_id="panel1", name="Panneau LED A", watt_per_m2=550),
    LedPanel(panel_id="panel2", name="Panneau LED B", watt_per_m2=150),
    LedPanel(panel_id="panel3", name="Panneau LED C", watt_per_m2=200),
)


def find_panel(panel_id: str, panels: Iterable[LedPanel] = DEFAULT_PANELS) -> LedPanel:
    panels = tuple(panels)
    for panel in panels:
        if panel.panel_id == panel_id:
            return panel
    raise PanelNotFoundError(panel_id, [panel.panel_id for panel in panels])


def module_count(cell: Cell, module: ModuleSpec) -> float:
    """Modules held by a case or module cell; missing cells hold none."""
    if not cell.kind.is_case:
        return 0.0
    return (cell.width / module.width) * (cell.height / module.height)


def total_modules(cells: Iterable[Cell], module: ModuleSpec) -> float:
    return sum(module_count(cell, module) for cell in cells)


def missing_area(cells: Iterable[Cell]) -> int:
    return sum(cell.area for cell in cells if cell.kind is CellKind.MISSING)


def estimate_consumption(screen_width: int, screen_height: int, watt_per_m2: float) -> float:
    """Power draw in watts for a screen of the given size in mm."""
    return (screen_width * screen_height / MM2_PER_M2) * watt_per_m2
