"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from ledwall.application.dtos import MAX_SCREEN_DIMENSION_MM
from ledwall.web.schemas.common import CaseSizeSchema, CustomCaseSchema, ModuleSchema


class LayoutRequestSchema(BaseModel):
    """Request for computing a screen layout.

    Non-positive screen dimensions are left to the engine so that they
    produce an ``invalid_dimension`` error; oversized screens are rejected
    here. Catalog and module fields fall back to the server configuration
    when omitted.
    """

    screen_width_mm: int = Field(
        ..., le=MAX_SCREEN_DIMENSION_MM, description="Screen width in mm"
    )
    screen_height_mm: int = Field(
        ..., le=MAX_SCREEN_DIMENSION_MM, description="Screen height in mm"
    )
    standard_case: CaseSizeSchema | None = Field(
        default=None, description="Standard case size; its height is the row height"
    )
    custom_catalog: list[CustomCaseSchema] | None = Field(
        default=None, description="Custom case sizes available for filling rows"
    )
    led_module: ModuleSchema | None = Field(
        default=None, description="LED module for the direct orientation"
    )
    led_module_rotated: ModuleSchema | None = Field(
        default=None, description="LED module for the rotated orientation"
    )
    missing_tolerance: float | None = Field(
        default=None, ge=0, lt=0.5, description="Gap tolerance as a fraction of a module"
    )
    panel_id: str | None = Field(
        default=None, description="LED panel id for the consumption estimate"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="LED wall configuration JSON")
