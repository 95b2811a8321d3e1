"""Application layer - use cases and orchestration."""

from .commands import ComputeLayoutCommand, compute_layout, layout_status
from .dtos import MAX_SCREEN_DIMENSION_MM, LayoutOutput, LayoutRequest

__all__ = [
    "MAX_SCREEN_DIMENSION_MM",
    "ComputeLayoutCommand",
    "LayoutOutput",
    "LayoutRequest",
    "compute_layout",
    "layout_status",
]
