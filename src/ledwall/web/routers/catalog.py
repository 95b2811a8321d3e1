"""Case catalog and LED panel endpoints."""

from fastapi import APIRouter

from ledwall.application.config import config_to_panels, config_to_tiling_config
from ledwall.web.dependencies import ConfigurationDep
from ledwall.web.schemas.common import (
    CaseSizeSchema,
    CustomCaseSchema,
    ModuleSchema,
    PanelSchema,
)
from ledwall.web.schemas.responses import CatalogSchema, PanelListSchema

router = APIRouter(tags=["catalog"])


@router.get("/catalog", response_model=CatalogSchema)
async def get_catalog(config: ConfigurationDep) -> CatalogSchema:
    """Standard case, custom catalog, LED modules and gap tolerance."""
    tiling = config_to_tiling_config(config)
    return CatalogSchema(
        standard_case=CaseSizeSchema(
            width=tiling.catalog.standard.width, height=tiling.catalog.standard.height
        ),
        custom_catalog=[
            CustomCaseSchema(width=case.width, height=case.height, catalog_id=case.catalog_id)
            for case in tiling.catalog.custom
        ],
        led_module=ModuleSchema(
            width=tiling.module_direct.width, height=tiling.module_direct.height
        ),
        led_module_rotated=ModuleSchema(
            width=tiling.module_rotated.width, height=tiling.module_rotated.height
        ),
        missing_tolerance=tiling.missing_tolerance,
    )


@router.get("/panels", response_model=PanelListSchema)
async def list_panels(config: ConfigurationDep) -> PanelListSchema:
    """LED panel types available for consumption estimates."""
    return PanelListSchema(
        panels=[
            PanelSchema(panel_id=panel.panel_id, name=panel.name, watt_per_m2=panel.watt_per_m2)
            for panel in config_to_panels(config)
        ]
    )
