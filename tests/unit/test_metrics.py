"""Tests for module counts, missing area and consumption estimates."""

from __future__ import annotations

import pytest

from ledwall.domain import Cell, CellKind, LedPanel, ModuleSpec, PanelNotFoundError
from ledwall.domain.services import (
    DEFAULT_PANELS,
    estimate_consumption,
    find_panel,
    missing_area,
    module_count,
    total_modules,
)

MODULE = ModuleSpec(160, 320)


class TestModuleCounts:
    def test_standard_case_holds_fourteen_modules(self) -> None:
        """A standard case should hold fourteen 160x320 modules."""
        cell = Cell(0, 0, 1120, 640, CellKind.STANDARD)
        assert module_count(cell, MODULE) == 14

    def test_missing_cell_holds_no_modules(self) -> None:
        """Missing cells should count no modules."""
        cell = Cell(0, 0, 1120, 20, CellKind.MISSING)
        assert module_count(cell, MODULE) == 0

    def test_fractional_counts_for_widened_cells(self) -> None:
        """Widened cells should count fractional modules."""
        cell = Cell(0, 0, 1130, 640, CellKind.CUSTOM_NEW)
        assert module_count(cell, MODULE) == pytest.approx(1130 / 160 * 2)

    def test_total_modules(self) -> None:
        """total_modules should sum the counts of every cell."""
        cells = [
            Cell(0, 0, 1120, 640, CellKind.STANDARD),
            Cell(1120, 0, 160, 320, CellKind.MODULE_FILLED),
            Cell(1120, 320, 160, 320, CellKind.MODULE_FILLED),
        ]
        assert total_modules(cells, MODULE) == 16

    def test_missing_area(self) -> None:
        """missing_area should sum only missing cells."""
        cells = [
            Cell(0, 0, 1120, 640, CellKind.STANDARD),
            Cell(0, 640, 1120, 20, CellKind.MISSING),
        ]
        assert missing_area(cells) == 22_400


class TestConsumption:
    def test_consumption_scales_with_area(self) -> None:
        """Consumption should scale with area in square metres."""
        assert estimate_consumption(1000, 1000, 550) == pytest.approx(550.0)
        assert estimate_consumption(1120, 640, 550) == pytest.approx(394.24)

    def test_zero_wattage(self) -> None:
        """A zero-watt panel should consume nothing."""
        assert estimate_consumption(1120, 640, 0) == 0


class TestPanels:
    def test_default_panels(self) -> None:
        """The default panel list should contain the three stock panels."""
        assert [p.panel_id for p in DEFAULT_PANELS] == ["panel1", "panel2", "panel3"]
        assert find_panel("panel2").watt_per_m2 == 150

    def test_unknown_panel(self) -> None:
        """An unknown panel id should raise PanelNotFoundError with the known ids."""
        with pytest.raises(PanelNotFoundError) as exc_info:
            find_panel("panel9")

        assert exc_info.value.panel_id == "panel9"
        assert exc_info.value.available == ["panel1", "panel2", "panel3"]
        assert "panel9" in str(exc_info.value)

    def test_custom_panel_list(self) -> None:
        """find_panel should search a given panel list."""
        panels = [LedPanel("outdoor", "Outdoor P6", 800)]
        assert find_panel("outdoor", panels).name == "Outdoor P6"

    def test_negative_wattage_rejected(self) -> None:
        """A negative wattage should raise ValueError."""
        with pytest.raises(ValueError):
            LedPanel("bad", "Bad", -1)
