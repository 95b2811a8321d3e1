"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class OrientationEnum(str, Enum):
    """Tiling orientation."""

    DIRECT = "direct"
    ROTATED = "rotated"


class CellKindEnum(str, Enum):
    """Kinds of layout cells."""

    STANDARD = "standard"
    CUSTOM_PREMADE = "custom_premade"
    CUSTOM_NEW = "custom_new"
    MISSING = "missing"
    MODULE_FILLED = "module_filled"


class LayoutStatusEnum(str, Enum):
    """Outcome of a layout computation."""

    EXACT = "exact"
    PATCHED = "patched"
    INCOMPLETE = "incomplete"


class CaseSizeSchema(BaseModel):
    """Case size in millimetres."""

    width: int = Field(..., gt=0, le=10_000, description="Width in mm")
    height: int = Field(..., gt=0, le=10_000, description="Height in mm")


class CustomCaseSchema(CaseSizeSchema):
    """Pre-fabricated custom case."""

    catalog_id: str | None = Field(default=None, description="Catalog reference")


class ModuleSchema(BaseModel):
    """LED module size in millimetres."""

    width: int = Field(..., gt=0, le=2_000, description="Width in mm")
    height: int = Field(..., gt=0, le=2_000, description="Height in mm")


class PanelSchema(BaseModel):
    """LED panel type."""

    panel_id: str = Field(..., description="Panel identifier")
    name: str = Field(..., description="Display name")
    watt_per_m2: float = Field(..., description="Power draw in W/m2")
