"""Configuration schema and loading system for LED wall tiling.

This package provides JSON-based configuration loading and validation for
the case catalog, LED module and panel types. It includes Pydantic models
for schema validation, a configuration loader with clear error messages,
catalog advisory checks, and adapters to the engine's domain objects.

Example:
    >>> from pathlib import Path
    >>> from ledwall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wall.json"))
    ...     print(f"Row height: {config.standard_case.height} mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from ledwall.application.config.adapter import (
    config_to_catalog,
    config_to_panels,
    config_to_request,
    config_to_tiling_config,
)
from ledwall.application.config.loader import (
    ConfigError,
    default_config,
    load_config,
    load_config_from_dict,
)
from ledwall.application.config.schema import (
    SUPPORTED_VERSIONS,
    CaseSizeConfig,
    CustomCaseConfig,
    ModuleConfig,
    PanelConfig,
    TilingConfiguration,
)
from ledwall.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema models
    "CaseSizeConfig",
    "CustomCaseConfig",
    "ModuleConfig",
    "PanelConfig",
    "SUPPORTED_VERSIONS",
    "TilingConfiguration",
    # Loader
    "ConfigError",
    "default_config",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Adapters
    "config_to_catalog",
    "config_to_panels",
    "config_to_request",
    "config_to_tiling_config",
]
