"""Layout computation endpoints."""

from fastapi import APIRouter, HTTPException

from ledwall.application.config import TilingConfiguration, config_to_tiling_config
from ledwall.application.dtos import LayoutOutput, LayoutRequest
from ledwall.domain import CaseSpec, Dimension2D
from ledwall.web.dependencies import ComputeCommandDep, ConfigurationDep
from ledwall.web.schemas.common import ModuleSchema, PanelSchema
from ledwall.web.schemas.requests import LayoutRequestSchema
from ledwall.web.schemas.responses import (
    CellSchema,
    ConsumptionSchema,
    LayoutResponseSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def build_layout_request(
    request: LayoutRequestSchema, config: TilingConfiguration
) -> LayoutRequest:
    """Convert a request body to a LayoutRequest.

    Omitted catalog, module and tolerance fields come from the server
    configuration.

    Raises:
        HTTPException: If the resulting tiling configuration is inconsistent.
    """
    defaults = config_to_tiling_config(config)

    if request.led_module is not None:
        direct = Dimension2D(request.led_module.width, request.led_module.height)
    else:
        direct = Dimension2D(defaults.module_direct.width, defaults.module_direct.height)

    rotated: Dimension2D | None = None
    if request.led_module_rotated is not None:
        rotated = Dimension2D(request.led_module_rotated.width, request.led_module_rotated.height)

    layout_request = LayoutRequest(
        screen_width_mm=request.screen_width_mm,
        screen_height_mm=request.screen_height_mm,
        standard_case_size=(
            Dimension2D(request.standard_case.width, request.standard_case.height)
            if request.standard_case is not None
            else defaults.catalog.standard.size
        ),
        custom_catalog=(
            tuple(
                CaseSpec(width=case.width, height=case.height, catalog_id=case.catalog_id)
                for case in request.custom_catalog
            )
            if request.custom_catalog is not None
            else defaults.catalog.custom
        ),
        led_module_direct=direct,
        led_module_rotated=rotated,
        missing_tolerance=(
            request.missing_tolerance
            if request.missing_tolerance is not None
            else defaults.missing_tolerance
        ),
        panel_id=request.panel_id,
    )

    try:
        layout_request.to_tiling_config()
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_configuration"},
        ) from e

    return layout_request


def layout_output_to_schema(output: LayoutOutput) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    consumption = None
    if output.panel is not None and output.consumption_watts is not None:
        consumption = ConsumptionSchema(
            panel=PanelSchema(
                panel_id=output.panel.panel_id,
                name=output.panel.name,
                watt_per_m2=output.panel.watt_per_m2,
            ),
            watts=output.consumption_watts,
        )

    return LayoutResponseSchema(
        screen_width_mm=output.screen_width_mm,
        screen_height_mm=output.screen_height_mm,
        orientation=output.orientation.value,
        valid=output.valid,
        status=output.status.value,
        warning=output.warning,
        warnings=list(output.warnings),
        cells=[
            CellSchema(
                x=cell.x,
                y=cell.y,
                width=cell.width,
                height=cell.height,
                kind=cell.kind.value,
                catalog_id=cell.catalog_id,
                row=cell.row,
            )
            for cell in output.cells
        ],
        module=ModuleSchema(width=output.module.width, height=output.module.height),
        total_modules=output.total_modules,
        missing_area_mm2=output.missing_area,
        counts={kind.value: count for kind, count in output.count_by_kind().items()},
        consumption=consumption,
    )


@router.post("", response_model=LayoutResponseSchema)
async def compute_layout(
    request: LayoutRequestSchema,
    command: ComputeCommandDep,
    config: ConfigurationDep,
) -> LayoutResponseSchema:
    """Compute the case layout of a screen.

    A best-effort layout is returned with ``valid=false`` when the screen
    cannot be tiled exactly; only bad input is an error.

    Args:
        request: Screen size with optional catalog and module overrides.
        command: Injected ComputeLayoutCommand.
        config: Injected server configuration.

    Returns:
        Layout cells, status and metrics.
    """
    output = command.execute(build_layout_request(request, config))
    return layout_output_to_schema(output)
