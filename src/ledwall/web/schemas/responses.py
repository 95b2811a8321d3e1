"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from ledwall.web.schemas.common import (
    CaseSizeSchema,
    CellKindEnum,
    CustomCaseSchema,
    LayoutStatusEnum,
    ModuleSchema,
    OrientationEnum,
    PanelSchema,
)


class CellSchema(BaseModel):
    """A cell of the computed layout, in screen coordinates."""

    x: int = Field(..., description="Left edge in mm")
    y: int = Field(..., description="Top edge in mm")
    width: int = Field(..., description="Width in mm")
    height: int = Field(..., description="Height in mm")
    kind: CellKindEnum = Field(..., description="What fills the cell")
    catalog_id: str | None = Field(default=None, description="Catalog reference")
    row: int = Field(default=0, description="Builder row index")


class ConsumptionSchema(BaseModel):
    """Power consumption estimate."""

    panel: PanelSchema
    watts: float = Field(..., description="Estimated power draw in watts")


class LayoutResponseSchema(BaseModel):
    """Response for layout computation."""

    screen_width_mm: int
    screen_height_mm: int
    orientation: OrientationEnum
    valid: bool = Field(..., description="Whether the cells tile the screen exactly")
    status: LayoutStatusEnum
    warning: str | None = Field(default=None, description="All warnings joined")
    warnings: list[str] = Field(default_factory=list)
    cells: list[CellSchema] = Field(default_factory=list)
    module: ModuleSchema
    total_modules: float
    missing_area_mm2: int
    counts: dict[str, int] = Field(
        default_factory=dict, description="Number of cells per kind"
    )
    consumption: ConsumptionSchema | None = None


class CatalogSchema(BaseModel):
    """Response for the case catalog."""

    standard_case: CaseSizeSchema
    custom_catalog: list[CustomCaseSchema]
    led_module: ModuleSchema
    led_module_rotated: ModuleSchema
    missing_tolerance: float


class PanelListSchema(BaseModel):
    """Response for the LED panel catalog."""

    panels: list[PanelSchema]


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
