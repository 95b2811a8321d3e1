"""Case catalog and tiling configuration.

The catalog holds the single standard case size plus the finite list of
pre-fabricated custom sizes. ``TilingConfig`` bundles it with the LED
module sizes for both orientations and the gap tolerance. Both are loaded
once and shared read-only by every layout computation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import CaseKind, CaseSpec, ModuleSpec, Orientation

# Pre-fabricated custom cases shipped with the configurator (width, height, id)
DEFAULT_CUSTOM_CASES: tuple[CaseSpec, ...] = (
    CaseSpec(width=960, height=640, catalog_id="CP-960x640"),
    CaseSpec(width=800, height=640, catalog_id="CP-800x640"),
    CaseSpec(width=640, height=640, catalog_id="CP-640x640"),
    CaseSpec(width=480, height=640, catalog_id="CP-480x640"),
    CaseSpec(width=320, height=640, catalog_id="CP-320x640"),
    CaseSpec(width=1120, height=320, catalog_id="CP-1120x320"),
    CaseSpec(width=800, height=320, catalog_id="CP-800x320"),
    CaseSpec(width=640, height=320, catalog_id="CP-640x320"),
    CaseSpec(width=320, height=320, catalog_id="CP-320x320"),
)

DEFAULT_MODULE = ModuleSpec(width=160, height=320)
DEFAULT_MISSING_TOLERANCE = 0.1


@dataclass(frozen=True)
class CaseCatalog:
    """Immutable registry of available case sizes.

    Attributes:
        standard: The standard case. Its height is the row height.
        custom: Custom case sizes, in catalog order.
    """

    standard: CaseSpec = field(default_factory=CaseSpec.standard)
    custom: tuple[CaseSpec, ...] = DEFAULT_CUSTOM_CASES

    def __post_init__(self) -> None:
        if self.standard.kind is not CaseKind.STANDARD:
            raise ValueError("Catalog standard entry must be of kind 'standard'")
        if any(case.kind is not CaseKind.CUSTOM for case in self.custom):
            raise ValueError("Catalog custom entries must be of kind 'custom'")

    @property
    def row_height(self) -> int:
        return self.standard.height

    def custom_widths_for_height(self, height: int) -> frozenset[int]:
        """Widths of custom cases whose height matches ``height`` exactly."""
        return frozenset(case.width for case in self.custom if case.height == height)

    def find_custom(self, width: int, height: int) -> CaseSpec | None:
        """First custom entry with exactly this size, or None."""
        for case in self.custom:
            if case.width == width and case.height == height:
                return case
        return None

    def is_standard(self, width: int, height: int) -> bool:
        return width == self.standard.width and height == self.standard.height


@dataclass(frozen=True)
class TilingConfig:
    """Everything the tiling engine needs besides the screen size.

    Attributes:
        catalog: Standard and custom case sizes.
        module_direct: LED module for the direct orientation.
        module_rotated: LED module for the rotated orientation, the transpose
            of ``module_direct``.
        missing_tolerance: Fraction of a module dimension below which a
            residual gap is merged instead of reported missing.
    """

    catalog: CaseCatalog = field(default_factory=CaseCatalog)
    module_direct: ModuleSpec = DEFAULT_MODULE
    module_rotated: ModuleSpec = DEFAULT_MODULE.transposed()
    missing_tolerance: float = DEFAULT_MISSING_TOLERANCE

    def __post_init__(self) -> None:
        if self.module_rotated != self.module_direct.transposed():
            raise ValueError(
                f"Rotated module {self.module_rotated} must be the transpose "
                f"of the direct module {self.module_direct}"
            )
        if not 0 <= self.missing_tolerance < 0.5:
            raise ValueError("Missing tolerance must be between 0 and 0.5")

    @classmethod
    def for_module(
        cls,
        module: ModuleSpec,
        catalog: CaseCatalog | None = None,
        missing_tolerance: float = DEFAULT_MISSING_TOLERANCE,
    ) -> TilingConfig:
        """Build a config from the direct module, deriving the rotated one."""
        return cls(
            catalog=catalog or CaseCatalog(),
            module_direct=module,
            module_rotated=module.transposed(),
            missing_tolerance=missing_tolerance,
        )

    def module_for(self, orientation: Orientation) -> ModuleSpec:
        """Module size in screen coordinates for a given orientation."""
        if orientation is Orientation.ROTATED:
            return self.module_rotated
        return self.module_direct

    def build_module_width(self, orientation: Orientation) -> int:
        """Module extent along the rows of the frame the builder tiles.

        The rotated build runs its rows along the screen height, so it uses
        the height of the rotated module.
        """
        if orientation is Orientation.ROTATED:
            return self.module_rotated.height
        return self.module_direct.width
