"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from ledwall.infrastructure.exporters import ExporterRegistry
from ledwall.web.dependencies import ComputeCommandDep, ConfigurationDep
from ledwall.web.exceptions import UnsupportedFormatError
from ledwall.web.routers.layout import build_layout_request
from ledwall.web.schemas.requests import LayoutRequestSchema
from ledwall.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "json": "application/json",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: LayoutRequestSchema,
    command: ComputeCommandDep,
    config: ConfigurationDep,
) -> Response:
    """Compute a layout and return it in the requested format.

    Args:
        format_name: Registered exporter name (json, svg).
        request: Screen size with optional catalog and module overrides.

    Returns:
        The exported document as an attachment.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = command.execute(build_layout_request(request, config))
    exporter = ExporterRegistry.get(format_name)()
    filename = f"layout.{exporter.file_extension}"

    return Response(
        content=exporter.export_string(output),
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
