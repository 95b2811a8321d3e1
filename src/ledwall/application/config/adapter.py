"""Adapter to convert TilingConfiguration to engine objects.

This module turns the Pydantic-based TilingConfiguration into the frozen
domain objects used by the tiling engine and into LayoutRequest DTOs used
by ComputeLayoutCommand.
"""

from ledwall.application.config.schema import TilingConfiguration
from ledwall.application.dtos import LayoutRequest
from ledwall.domain import (
    CaseCatalog,
    CaseKind,
    CaseSpec,
    LedPanel,
    ModuleSpec,
    TilingConfig,
)


def config_to_catalog(config: TilingConfiguration) -> CaseCatalog:
    """Convert the configured cases to a CaseCatalog.

    Custom entries that have the standard size are dropped: the builder
    always tags such cases as standard.
    """
    standard = CaseSpec(
        width=config.standard_case.width,
        height=config.standard_case.height,
        kind=CaseKind.STANDARD,
    )
    custom = tuple(
        CaseSpec(width=case.width, height=case.height, catalog_id=case.catalog_id)
        for case in config.custom_catalog
        if (case.width, case.height) != (standard.width, standard.height)
    )
    return CaseCatalog(standard=standard, custom=custom)


def config_to_tiling_config(config: TilingConfiguration) -> TilingConfig:
    """Convert a TilingConfiguration to the engine's TilingConfig.

    Args:
        config: A validated TilingConfiguration instance

    Returns:
        TilingConfig with the catalog, both module orientations and tolerance

    Example:
        >>> config = load_config(Path("wall.json"))
        >>> tiling = config_to_tiling_config(config)
        >>> OrientationSelector(tiling).choose(3360, 1920)
    """
    direct = ModuleSpec(width=config.led_module.width, height=config.led_module.height)
    rotated = config.led_module_rotated
    return TilingConfig(
        catalog=config_to_catalog(config),
        module_direct=direct,
        module_rotated=(
            ModuleSpec(width=rotated.width, height=rotated.height)
            if rotated is not None
            else direct.transposed()
        ),
        missing_tolerance=config.missing_tolerance,
    )


def config_to_panels(config: TilingConfiguration) -> tuple[LedPanel, ...]:
    """Convert the configured LED panel types to domain LedPanel objects."""
    return tuple(
        LedPanel(panel_id=panel.panel_id, name=panel.name, watt_per_m2=panel.watt_per_m2)
        for panel in config.panels
    )


def config_to_request(
    config: TilingConfiguration,
    screen_width_mm: int,
    screen_height_mm: int,
    panel_id: str | None = None,
) -> LayoutRequest:
    """Build a LayoutRequest for one screen from a configuration."""
    return LayoutRequest.from_config(
        screen_width_mm,
        screen_height_mm,
        config_to_tiling_config(config),
        panel_id=panel_id,
    )
