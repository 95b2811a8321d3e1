"""Tests for LayoutBuilder row-by-row tiling."""

from __future__ import annotations

import pytest

from ledwall.domain import (
    CaseCatalog,
    CaseSpec,
    CellKind,
    InvalidDimensionError,
    LayoutBuilder,
    Orientation,
    TilingConfig,
)
from ledwall.domain.services import NO_MATCHING_HEIGHT


class TestFullRows:
    """Tests for rows of the standard case height."""

    def test_single_standard_case(self, builder: LayoutBuilder) -> None:
        """A screen the size of one case should hold one standard cell."""
        layout = builder.build(1120, 640)

        assert layout.valid
        assert layout.warnings == ()
        assert len(layout.cells) == 1
        cell = layout.cells[0]
        assert (cell.x, cell.y, cell.width, cell.height) == (0, 0, 1120, 640)
        assert cell.kind is CellKind.STANDARD
        assert cell.catalog_id is None

    def test_stacked_rows(self, builder: LayoutBuilder) -> None:
        """Full rows should stack from the top."""
        layout = builder.build(1120, 1280)

        assert layout.valid
        assert [(c.x, c.y, c.row) for c in layout.cells] == [(0, 0, 0), (0, 640, 1)]
        assert all(c.kind is CellKind.STANDARD for c in layout.cells)

    def test_custom_premade_cells_carry_catalog_id(self, builder: LayoutBuilder) -> None:
        """Custom premade cells should carry their catalog ids."""
        layout = builder.build(1280, 640)

        assert layout.valid
        assert [c.width for c in layout.cells] == [960, 320]
        assert [c.kind for c in layout.cells] == [CellKind.CUSTOM_PREMADE] * 2
        assert [c.catalog_id for c in layout.cells] == ["CP-960x640", "CP-320x640"]

    def test_cells_in_row_are_contiguous(self, builder: LayoutBuilder) -> None:
        """Cells in a row should touch without gaps."""
        layout = builder.build(3360 + 960, 640)

        x = 0
        for cell in layout.cells:
            assert cell.x == x
            x = cell.right
        assert x == 4320

    def test_unpartitionable_row_adds_missing_cell(
        self, standard_only_config: TilingConfig
    ) -> None:
        """An unpartitionable row should end in a missing cell."""
        layout = LayoutBuilder(standard_only_config).build(1280, 640)

        assert not layout.valid
        assert [c.kind for c in layout.cells] == [CellKind.STANDARD, CellKind.MISSING]
        missing = layout.cells[1]
        assert (missing.x, missing.width, missing.height) == (1120, 160, 640)
        assert "cannot be partitioned" in layout.warning
        assert layout.total_area == 1280 * 640

    def test_sub_tolerance_remainder_is_merged(
        self, standard_only_config: TilingConfig
    ) -> None:
        """A 10 mm remainder widens the last case into a new custom case."""
        layout = LayoutBuilder(standard_only_config).build(1130, 640)

        assert layout.valid
        assert len(layout.cells) == 1
        assert layout.cells[0].width == 1130
        assert layout.cells[0].kind is CellKind.CUSTOM_NEW


class TestBottomRow:
    """Tests for the residual bottom row."""

    def test_bottom_row_uses_matching_custom_height(self, builder: LayoutBuilder) -> None:
        """The bottom row should use custom cases of the residual height."""
        layout = builder.build(1120, 960)

        assert layout.valid
        bottom = layout.cells[-1]
        assert (bottom.y, bottom.height, bottom.row) == (640, 320, 1)
        assert bottom.kind is CellKind.CUSTOM_PREMADE
        assert bottom.catalog_id == "CP-1120x320"

    def test_bottom_row_never_uses_standard_case(
        self, standard_only_config: TilingConfig
    ) -> None:
        """The bottom row should never fall back to the standard case."""
        layout = LayoutBuilder(standard_only_config).build(1120, 960)

        assert not layout.valid
        assert layout.cells[-1].kind is CellKind.MISSING

    def test_no_matching_height_adds_full_width_strip(self, builder: LayoutBuilder) -> None:
        """A residual height with no cases should become one missing strip."""
        layout = builder.build(1120, 660)

        assert not layout.valid
        strip = layout.cells[-1]
        assert strip.kind is CellKind.MISSING
        assert (strip.x, strip.y, strip.width, strip.height) == (0, 640, 1120, 20)
        assert NO_MATCHING_HEIGHT in layout.warning
        assert "Row 1" in layout.warning

    def test_screen_lower_than_row_height(self, builder: LayoutBuilder) -> None:
        """A 320 mm screen is a single bottom row."""
        layout = builder.build(1120, 320)

        assert layout.valid
        assert [c.catalog_id for c in layout.cells] == ["CP-1120x320"]

    def test_area_always_matches_screen(self, builder: LayoutBuilder) -> None:
        """The cells should always cover the whole screen."""
        for width, height in [(1120, 660), (1300, 700), (2240, 1920), (500, 100)]:
            layout = builder.build(width, height)
            assert layout.total_area == width * height


class TestBuildModuleWidth:
    """The tolerance uses the module extent along the built rows."""

    def test_rotated_build_uses_rotated_module_height(self) -> None:
        """The rotated build should use the rotated module for the tolerance."""
        catalog = CaseCatalog(standard=CaseSpec.standard(), custom=())
        config = TilingConfig(catalog=catalog, missing_tolerance=0.1)
        builder = LayoutBuilder(config)

        # 0.1 x 160 = 16 for both orientations with the default modules
        assert builder.build(1135, 640, Orientation.ROTATED).valid
        assert not builder.build(1136, 640, Orientation.ROTATED).valid

    def test_orientation_appears_in_warnings(self, builder: LayoutBuilder) -> None:
        """Warnings should name the rotated orientation."""
        layout = builder.build(1120, 660, Orientation.ROTATED)

        assert "(rotated)" in layout.warning


class TestInvalidInput:
    @pytest.mark.parametrize("width,height", [(0, 640), (1120, -1), (True, 640)])
    def test_non_positive_dimensions_raise(
        self, builder: LayoutBuilder, width: int, height: int
    ) -> None:
        """Non-positive or boolean sizes should raise InvalidDimensionError."""
        with pytest.raises(InvalidDimensionError):
            builder.build(width, height)
