"""Pydantic schemas for the REST API."""

from ledwall.web.schemas.common import (
    CaseSizeSchema,
    CellKindEnum,
    CustomCaseSchema,
    LayoutStatusEnum,
    ModuleSchema,
    OrientationEnum,
    PanelSchema,
)
from ledwall.web.schemas.requests import ConfigValidateRequest, LayoutRequestSchema
from ledwall.web.schemas.responses import (
    CatalogSchema,
    CellSchema,
    ConsumptionSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutResponseSchema,
    PanelListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "CaseSizeSchema",
    "CellKindEnum",
    "CustomCaseSchema",
    "LayoutStatusEnum",
    "ModuleSchema",
    "OrientationEnum",
    "PanelSchema",
    # Requests
    "ConfigValidateRequest",
    "LayoutRequestSchema",
    # Responses
    "CatalogSchema",
    "CellSchema",
    "ConsumptionSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutResponseSchema",
    "PanelListSchema",
    "ValidationResultSchema",
]
