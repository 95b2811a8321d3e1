"""Domain layer - tiling engine and value objects."""

from .catalog import (
    DEFAULT_CUSTOM_CASES,
    DEFAULT_MISSING_TOLERANCE,
    DEFAULT_MODULE,
    CaseCatalog,
    TilingConfig,
)
from .entities import Candidate, Layout, LayoutStatus
from .services import (
    LayoutBuilder,
    LayoutValidator,
    LedPanel,
    ModuleSubdivider,
    OrientationSelector,
    PanelNotFoundError,
)
from .value_objects import (
    CaseKind,
    CaseSpec,
    Cell,
    CellKind,
    Dimension2D,
    InvalidDimensionError,
    ModuleSpec,
    Orientation,
)

__all__ = [
    "Candidate",
    "CaseCatalog",
    "CaseKind",
    "CaseSpec",
    "Cell",
    "CellKind",
    "DEFAULT_CUSTOM_CASES",
    "DEFAULT_MISSING_TOLERANCE",
    "DEFAULT_MODULE",
    "Dimension2D",
    "InvalidDimensionError",
    "Layout",
    "LayoutBuilder",
    "LayoutStatus",
    "LayoutValidator",
    "LedPanel",
    "ModuleSpec",
    "ModuleSubdivider",
    "Orientation",
    "OrientationSelector",
    "PanelNotFoundError",
    "TilingConfig",
]
