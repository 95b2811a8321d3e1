"""Tests for text output formatters."""

from __future__ import annotations

import pytest

from ledwall.application import ComputeLayoutCommand, LayoutOutput, LayoutRequest
from ledwall.domain import (
    CaseCatalog,
    CaseSpec,
    LayoutStatus,
    LedPanel,
    ModuleSpec,
    Orientation,
    TilingConfig,
)
from ledwall.infrastructure import (
    CatalogFormatter,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    PanelFormatter,
)


@pytest.fixture
def exact_output(compute_command: ComputeLayoutCommand) -> LayoutOutput:
    """3360x1920 screen: a 3x3 grid of standard cases."""
    return compute_command.execute(LayoutRequest(3360, 1920, panel_id="panel1"))


@pytest.fixture
def incomplete_output(compute_command: ComputeLayoutCommand) -> LayoutOutput:
    """1120x660 screen: a 20 mm bottom strip no catalog entry can fill."""
    return compute_command.execute(LayoutRequest(1120, 660))


@pytest.fixture
def empty_output() -> LayoutOutput:
    return LayoutOutput(
        screen_width_mm=100,
        screen_height_mm=100,
        cells=(),
        orientation=Orientation.DIRECT,
        valid=False,
        status=LayoutStatus.INCOMPLETE,
        total_modules=0,
        missing_area=0,
        module=ModuleSpec(160, 320),
    )


class TestLayoutTableFormatter:
    def test_lists_every_cell(self, exact_output: LayoutOutput) -> None:
        """The table should list one line per cell."""
        text = LayoutTableFormatter().format(exact_output)
        lines = text.splitlines()

        assert lines[0] == "CASE LAYOUT"
        assert sum(1 for line in lines if "standard" in line.split()) == 9

    def test_totals_per_kind(self, exact_output: LayoutOutput) -> None:
        """The table should total area per kind."""
        text = LayoutTableFormatter().format(exact_output)

        assert "Standard case" in text
        assert "6.451 m2" in text
        assert text.splitlines()[-1].startswith("TOTAL")
        assert "9 cells" in text.splitlines()[-1]

    def test_catalog_ids_shown(self, compute_command: ComputeLayoutCommand) -> None:
        """Catalog ids should appear in the table."""
        output = compute_command.execute(LayoutRequest(1280, 640))
        text = LayoutTableFormatter().format(output)

        assert "CP-960x640" in text
        assert "CP-320x640" in text

    def test_empty_layout(self, empty_output: LayoutOutput) -> None:
        """An empty layout should print a placeholder line."""
        assert LayoutTableFormatter().format(empty_output) == "No cells in layout."


class TestLayoutDiagramFormatter:
    def test_grid_dimensions(self, exact_output: LayoutOutput) -> None:
        """The diagram grid should have the requested width."""
        text = LayoutDiagramFormatter(width=60).format(exact_output)
        lines = text.splitlines()
        grid_rows = [line for line in lines if line.startswith("|")]

        assert lines[0] == "LED WALL LAYOUT DIAGRAM"
        # 1920 / 3360 of 60 columns, halved for the character aspect ratio
        assert len(grid_rows) == 17
        assert all(len(row) == 62 for row in grid_rows)

    def test_screen_and_legend(self, exact_output: LayoutOutput) -> None:
        """The diagram should show the screen size and a legend."""
        text = LayoutDiagramFormatter().format(exact_output)

        assert "Screen: 3360 x 1920 mm (direct)" in text
        assert "Legend: S=Standard case" in text

    def test_missing_cells_drawn(self, incomplete_output: LayoutOutput) -> None:
        """Missing cells should be drawn and listed in the legend."""
        text = LayoutDiagramFormatter(width=40).format(incomplete_output)

        assert "?=Missing" in text

    def test_empty_layout(self, empty_output: LayoutOutput) -> None:
        """An empty layout should print a placeholder line."""
        assert LayoutDiagramFormatter().format(empty_output) == "No cells to display."


class TestLayoutSummaryFormatter:
    def test_exact_layout(self, exact_output: LayoutOutput) -> None:
        """An exact layout summary should show orientation and status."""
        text = LayoutSummaryFormatter().format(exact_output)

        assert text.startswith("LAYOUT SUMMARY")
        assert "Orientation:   direct" in text
        assert "Status:        exact" in text
        assert "LED modules:   126 (160x320 mm)" in text
        assert "Consumption:   3548.2 W (Panneau LED A, 550 W/m2)" in text
        assert "Warnings:" not in text

    def test_incomplete_layout(self, incomplete_output: LayoutOutput) -> None:
        """An incomplete summary should show the missing area and warnings."""
        text = LayoutSummaryFormatter().format(incomplete_output)

        assert "Status:        incomplete (invalid)" in text
        assert "Missing area:  0.022 m2" in text
        assert "Warnings:" in text
        assert "Consumption:" not in text


class TestCatalogFormatter:
    def test_default_catalog(self) -> None:
        """The default catalog should list the standard and custom cases."""
        text = CatalogFormatter().format(CaseCatalog())

        assert "Standard case: 1120 x 640 mm (row height 640 mm)" in text
        assert "CP-960x640" in text
        assert "CP-320x320" in text

    def test_empty_custom_catalog(self) -> None:
        """An empty custom catalog should say so."""
        text = CatalogFormatter().format(CaseCatalog(standard=CaseSpec.standard(), custom=()))

        assert "(no custom cases)" in text

    def test_entries_without_id(self) -> None:
        """Entries without a catalog id should still be listed."""
        catalog = CaseCatalog(
            standard=CaseSpec.standard(), custom=(CaseSpec(width=480, height=320),)
        )
        line = CatalogFormatter().format(catalog).splitlines()[-1]

        assert line.split() == ["-", "480", "320"]


class TestPanelFormatter:
    def test_lists_panels(self) -> None:
        """Every panel should be listed with its consumption."""
        text = PanelFormatter().format(
            [LedPanel("panel1", "Panneau LED A", 550), LedPanel("indoor", "Indoor P2.5", 300)]
        )

        assert text.startswith("LED PANELS")
        assert "Panneau LED A" in text
        assert text.splitlines()[-1].split()[0] == "indoor"


def test_tiling_config_feeds_catalog_formatter() -> None:
    """A TilingConfig catalog should format directly."""
    config = TilingConfig()

    assert "CASE CATALOG" in CatalogFormatter().format(config.catalog)
