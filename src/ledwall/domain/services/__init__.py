"""Domain services for LED wall tiling.

This package provides the tiling engine:
- Row partitioning (exact and best-effort)
- Row-by-row layout building for one orientation
- Direct / rotated candidate selection
- Module-grid subdivision of residual gaps
- Layout validation and derived metrics
"""

from .layout_builder import NO_MATCHING_HEIGHT, LayoutBuilder
from .layout_validator import LayoutValidator
from .metrics import (
    DEFAULT_PANELS,
    LedPanel,
    PanelNotFoundError,
    estimate_consumption,
    find_panel,
    missing_area,
    module_count,
    total_modules,
)
from .module_subdivider import ModuleSubdivider, SubdivisionResult, subdivide
from .orientation_selector import OrientationSelector, pick_candidate, rotate_back
from .row_partitioner import PartitionResult, partition_exact, partition_with_missing

__all__ = [
    "DEFAULT_PANELS",
    "LayoutBuilder",
    "LayoutValidator",
    "LedPanel",
    "ModuleSubdivider",
    "NO_MATCHING_HEIGHT",
    "OrientationSelector",
    "PanelNotFoundError",
    "PartitionResult",
    "SubdivisionResult",
    "estimate_consumption",
    "find_panel",
    "missing_area",
    "module_count",
    "partition_exact",
    "partition_with_missing",
    "pick_candidate",
    "rotate_back",
    "subdivide",
    "total_modules",
]
