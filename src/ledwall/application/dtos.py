"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ledwall.domain import (
    DEFAULT_CUSTOM_CASES,
    DEFAULT_MISSING_TOLERANCE,
    DEFAULT_MODULE,
    CaseCatalog,
    CaseKind,
    CaseSpec,
    Cell,
    CellKind,
    Dimension2D,
    LayoutStatus,
    LedPanel,
    ModuleSpec,
    Orientation,
    TilingConfig,
)

# Largest screen side accepted by the CLI and the REST API (100 m)
MAX_SCREEN_DIMENSION_MM = 100_000


@dataclass(frozen=True)
class LayoutRequest:
    """Input DTO for a layout computation.

    Attributes:
        screen_width_mm: Screen width in mm.
        screen_height_mm: Screen height in mm.
        standard_case_size: Standard case size; its height is the row height.
        custom_catalog: Pre-fabricated custom cases.
        led_module_direct: LED module for the direct orientation.
        led_module_rotated: LED module for the rotated orientation. Derived
            from the direct module when omitted.
        missing_tolerance: Fraction of a module below which gaps are merged.
        panel_id: Optional LED panel type for the consumption estimate.
    """

    screen_width_mm: int
    screen_height_mm: int
    standard_case_size: Dimension2D = Dimension2D(1120, 640)
    custom_catalog: tuple[CaseSpec, ...] = DEFAULT_CUSTOM_CASES
    led_module_direct: Dimension2D = Dimension2D(DEFAULT_MODULE.width, DEFAULT_MODULE.height)
    led_module_rotated: Dimension2D | None = None
    missing_tolerance: float = DEFAULT_MISSING_TOLERANCE
    panel_id: str | None = None

    @classmethod
    def from_config(
        cls,
        screen_width_mm: int,
        screen_height_mm: int,
        config: TilingConfig,
        panel_id: str | None = None,
    ) -> LayoutRequest:
        """Create a request for a screen using an existing tiling configuration."""
        return cls(
            screen_width_mm=screen_width_mm,
            screen_height_mm=screen_height_mm,
            standard_case_size=config.catalog.standard.size,
            custom_catalog=config.catalog.custom,
            led_module_direct=Dimension2D(config.module_direct.width, config.module_direct.height),
            led_module_rotated=Dimension2D(
                config.module_rotated.width, config.module_rotated.height
            ),
            missing_tolerance=config.missing_tolerance,
            panel_id=panel_id,
        )

    def to_tiling_config(self) -> TilingConfig:
        """Build the engine configuration.

        Raises:
            ValueError: If the modules are not transposes of each other or
                the tolerance is out of range.
        """
        direct = ModuleSpec(self.led_module_direct.width, self.led_module_direct.height)
        rotated = (
            ModuleSpec(self.led_module_rotated.width, self.led_module_rotated.height)
            if self.led_module_rotated is not None
            else direct.transposed()
        )
        catalog = CaseCatalog(
            standard=CaseSpec(
                width=self.standard_case_size.width,
                height=self.standard_case_size.height,
                kind=CaseKind.STANDARD,
            ),
            custom=tuple(self.custom_catalog),
        )
        return TilingConfig(
            catalog=catalog,
            module_direct=direct,
            module_rotated=rotated,
            missing_tolerance=self.missing_tolerance,
        )


@dataclass(frozen=True)
class LayoutOutput:
    """Output DTO containing the chosen layout and its metrics."""

    screen_width_mm: int
    screen_height_mm: int
    cells: tuple[Cell, ...]
    orientation: Orientation
    valid: bool
    status: LayoutStatus
    total_modules: float
    missing_area: int
    module: ModuleSpec
    warnings: tuple[str, ...] = field(default_factory=tuple)
    panel: LedPanel | None = None
    consumption_watts: float | None = None

    @property
    def warning(self) -> str | None:
        if not self.warnings:
            return None
        return "; ".join(self.warnings)

    @property
    def screen_area_m2(self) -> float:
        return self.screen_width_mm * self.screen_height_mm / 1_000_000

    def count_by_kind(self) -> dict[CellKind, int]:
        """Number of cells of each kind, in CellKind order, zero counts omitted."""
        counts = {kind: 0 for kind in CellKind}
        for cell in self.cells:
            counts[cell.kind] += 1
        return {kind: count for kind, count in counts.items() if count}
