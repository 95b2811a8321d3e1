"""Pydantic models for LED wall configuration files.

The configuration describes everything the tiling engine treats as fixed
for the lifetime of the process: the standard case, the custom case
catalog, the LED module size, the gap tolerance and the LED panel types
used for consumption estimates.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from ledwall.domain import DEFAULT_CUSTOM_CASES, DEFAULT_MISSING_TOLERANCE, DEFAULT_MODULE
from ledwall.domain.services import DEFAULT_PANELS

# Supported schema versions for configuration files
# Version 1.0: Initial schema with standard case, catalog, module and panels
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CaseSizeConfig(BaseModel):
    """Standard case size in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=1120, gt=0, le=10_000)
    height: int = Field(default=640, gt=0, le=10_000)


class CustomCaseConfig(BaseModel):
    """A pre-fabricated custom case in the catalog.

    Attributes:
        width: Case width in mm.
        height: Case height in mm.
        catalog_id: Catalog reference, shown on pre-made cells.
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(..., gt=0, le=10_000)
    height: int = Field(..., gt=0, le=10_000)
    catalog_id: str | None = Field(default=None, min_length=1, max_length=64)


class ModuleConfig(BaseModel):
    """LED module size in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=DEFAULT_MODULE.width, gt=0, le=2_000)
    height: int = Field(default=DEFAULT_MODULE.height, gt=0, le=2_000)


class PanelConfig(BaseModel):
    """LED panel type used for power consumption estimates."""

    model_config = ConfigDict(extra="forbid")

    panel_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1)
    watt_per_m2: float = Field(..., ge=0, le=10_000)


def _default_catalog() -> list[CustomCaseConfig]:
    return [
        CustomCaseConfig(width=case.width, height=case.height, catalog_id=case.catalog_id)
        for case in DEFAULT_CUSTOM_CASES
    ]


def _default_panels() -> list[PanelConfig]:
    return [
        PanelConfig(panel_id=panel.panel_id, name=panel.name, watt_per_m2=panel.watt_per_m2)
        for panel in DEFAULT_PANELS
    ]


class TilingConfiguration(BaseModel):
    """Root configuration model for LED wall tiling.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        standard_case: Standard case size; its height is the row height
        custom_catalog: Pre-fabricated custom case sizes
        led_module: LED module for the direct orientation
        led_module_rotated: LED module for the rotated orientation (optional,
            must be the transpose of led_module)
        missing_tolerance: Fraction of a module below which gaps are merged
        panels: LED panel types for consumption estimates

    Example:
        >>> config = TilingConfiguration(schema_version="1.0")
        >>> config.standard_case.width
        1120
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    standard_case: CaseSizeConfig = Field(default_factory=CaseSizeConfig)
    custom_catalog: list[CustomCaseConfig] = Field(
        default_factory=_default_catalog, max_length=200
    )
    led_module: ModuleConfig = Field(default_factory=ModuleConfig)
    led_module_rotated: ModuleConfig | None = None
    missing_tolerance: float = Field(default=DEFAULT_MISSING_TOLERANCE, ge=0, lt=0.5)
    panels: list[PanelConfig] = Field(default_factory=_default_panels)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @field_validator("panels")
    @classmethod
    def validate_unique_panels(cls, v: list[PanelConfig]) -> list[PanelConfig]:
        ids = [panel.panel_id for panel in v]
        duplicates = sorted({panel_id for panel_id in ids if ids.count(panel_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate panel ids: {', '.join(duplicates)}")
        return v

    @model_validator(mode="after")
    def validate_rotated_module(self) -> "TilingConfiguration":
        rotated = self.led_module_rotated
        if rotated is not None and (
            rotated.width != self.led_module.height or rotated.height != self.led_module.width
        ):
            raise ValueError(
                f"led_module_rotated {rotated.width}x{rotated.height} must be the "
                f"transpose of led_module {self.led_module.width}x{self.led_module.height}"
            )
        return self
