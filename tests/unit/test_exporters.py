"""Tests for the exporter framework and the JSON and SVG exporters."""

from __future__ import annotations

import json
from pathlib import Path
from typing import ClassVar

import pytest

from ledwall.application import ComputeLayoutCommand, LayoutOutput, LayoutRequest
from ledwall.domain import CaseCatalog, CaseSpec
from ledwall.infrastructure.exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgLayoutExporter,
    layout_to_dict,
)


@pytest.fixture
def exact_output(compute_command: ComputeLayoutCommand) -> LayoutOutput:
    return compute_command.execute(LayoutRequest(1280, 640, panel_id="panel2"))


@pytest.fixture
def patched_output(compute_command: ComputeLayoutCommand) -> LayoutOutput:
    """Standard case only: 1280 mm leaves a 160 mm gap filled with modules."""
    catalog = CaseCatalog(standard=CaseSpec.standard(), custom=())
    return compute_command.execute(
        LayoutRequest(1280, 640, custom_catalog=catalog.custom)
    )


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_exporters_registered(self) -> None:
        """The json and svg exporters should be registered on import."""
        assert ExporterRegistry.get("json") is JsonLayoutExporter
        assert ExporterRegistry.get("svg") is SvgLayoutExporter
        assert ExporterRegistry.available_formats() == ["json", "svg"]

    def test_get_unknown_format_raises_key_error(self) -> None:
        """Getting an unregistered format should raise KeyError."""
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("dxf")
        assert "No exporter registered for format 'dxf'" in str(exc_info.value)

    def test_register_new_exporter(self) -> None:
        """The register decorator should add a new format."""
        @ExporterRegistry.register("csv")
        class CsvExporter:
            format_name: ClassVar[str] = "csv"
            file_extension: ClassVar[str] = "csv"

            def export(self, output, path: Path) -> None:
                pass

            def export_string(self, output) -> str:
                return ""

        assert ExporterRegistry.is_registered("csv")
        assert ExporterRegistry.get("csv") is CsvExporter

    def test_clear_removes_all_exporters(self) -> None:
        """clear should empty the registry."""
        ExporterRegistry.clear()

        assert ExporterRegistry.available_formats() == []

    def test_exporters_satisfy_protocol(self) -> None:
        """Both exporters should satisfy the Exporter protocol."""
        assert isinstance(JsonLayoutExporter(), Exporter)
        assert isinstance(SvgLayoutExporter(), Exporter)


class TestJsonLayoutExporter:
    def test_top_level_keys(self, exact_output: LayoutOutput) -> None:
        """The JSON document should carry the screen, orientation and status."""
        data = json.loads(JsonLayoutExporter().export_string(exact_output))

        assert data["schema_version"] == "1.0"
        assert data["screen"] == {"width_mm": 1280, "height_mm": 640}
        assert data["orientation"] == "direct"
        assert data["valid"] is True
        assert data["status"] == "exact"
        assert data["warning"] is None
        assert data["warnings"] == []
        assert data["module"] == {"width": 160, "height": 320}
        assert data["total_modules"] == 16
        assert data["missing_area_mm2"] == 0
        assert data["counts"] == {"custom_premade": 2}

    def test_cells(self, exact_output: LayoutOutput) -> None:
        """Each cell should be exported with its geometry and kind."""
        cells = json.loads(JsonLayoutExporter().export_string(exact_output))["cells"]

        assert cells == [
            {
                "x": 0,
                "y": 0,
                "width": 960,
                "height": 640,
                "kind": "custom_premade",
                "row": 0,
                "catalog_id": "CP-960x640",
            },
            {
                "x": 960,
                "y": 0,
                "width": 320,
                "height": 640,
                "kind": "custom_premade",
                "row": 0,
                "catalog_id": "CP-320x640",
            },
        ]

    def test_consumption(self, exact_output: LayoutOutput) -> None:
        """The consumption block should carry the panel and watts."""
        consumption = layout_to_dict(exact_output)["consumption"]

        assert consumption["panel_id"] == "panel2"
        assert consumption["watts"] == pytest.approx(1280 * 640 / 1e6 * 150)

    def test_cells_can_be_omitted(self, exact_output: LayoutOutput) -> None:
        """include_cells=False should drop the cell list."""
        data = json.loads(JsonLayoutExporter(include_cells=False).export_string(exact_output))

        assert "cells" not in data

    def test_no_consumption_without_panel(self, patched_output: LayoutOutput) -> None:
        """Layouts without a panel should have no consumption block."""
        data = layout_to_dict(patched_output)

        assert "consumption" not in data
        assert data["status"] == "patched"
        assert data["counts"] == {"standard": 1, "module_filled": 2}

    def test_export_to_file(self, exact_output: LayoutOutput, tmp_path: Path) -> None:
        """export should write the JSON document to a file."""
        path = tmp_path / "wall.json"
        JsonLayoutExporter().export(exact_output, path)

        assert json.loads(path.read_text())["status"] == "exact"


class TestSvgLayoutExporter:
    def test_svg_document(self, exact_output: LayoutOutput) -> None:
        """The SVG should be a complete document sized to the screen."""
        svg = SvgLayoutExporter().export_string(exact_output)

        assert svg.startswith('<svg width="320"')
        assert 'xmlns="http://www.w3.org/2000/svg"' in svg
        assert svg.rstrip().endswith("</svg>")

    def test_cells_coloured_by_kind(self, patched_output: LayoutOutput) -> None:
        """Cells should be grouped and coloured by kind."""
        svg = SvgLayoutExporter().export_string(patched_output)

        assert svg.count('<g class="cell standard">') == 1
        assert svg.count('<g class="cell module_filled">') == 2
        assert "#4CAF50" in svg
        assert "#1E88E5" in svg

    def test_catalog_ids_as_labels(self, exact_output: LayoutOutput) -> None:
        """Catalog ids should be used as cell labels."""
        svg = SvgLayoutExporter().export_string(exact_output)

        assert ">CP-960x640</text>" in svg

    def test_labels_can_be_hidden(self, exact_output: LayoutOutput) -> None:
        """show_labels=False should drop the labels."""
        svg = SvgLayoutExporter(show_labels=False).export_string(exact_output)

        assert "CP-960x640" not in svg

    def test_module_grid(self, exact_output: LayoutOutput) -> None:
        """show_modules should draw the module grid inside cells."""
        without = SvgLayoutExporter().export_string(exact_output)
        with_grid = SvgLayoutExporter(show_modules=True).export_string(exact_output)

        assert "<line" not in without
        # 960x640 case: 5 vertical and 1 horizontal; 320x640 case: 1 and 1
        assert with_grid.count("<line") == 8

    def test_invalid_scale(self) -> None:
        """A non-positive scale should raise ValueError."""
        with pytest.raises(ValueError, match="scale"):
            SvgLayoutExporter(scale=0)


class TestExportManager:
    def test_export_all(self, exact_output: LayoutOutput, tmp_path: Path) -> None:
        """export_all should write one file per format."""
        manager = ExportManager(tmp_path / "out")
        results = manager.export_all(["json", "svg"], exact_output, project_name="lobby")

        assert results == {
            "json": tmp_path / "out" / "lobby.json",
            "svg": tmp_path / "out" / "lobby.svg",
        }
        assert all(path.exists() for path in results.values())

    def test_unknown_format(self, exact_output: LayoutOutput, tmp_path: Path) -> None:
        """An unknown format should raise KeyError."""
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["pdf"], exact_output)
