"""Choice between the direct and the 90 degree rotated tiling."""

from __future__ import annotations

import logging

from ..catalog import TilingConfig
from ..entities import Candidate, Layout
from ..value_objects import Orientation, require_positive_int
from .layout_builder import LayoutBuilder

logger = logging.getLogger(__name__)


def rotate_back(layout: Layout, screen_height: int) -> Layout:
    """Map a layout built on the swapped screen into the real screen frame."""
    return layout.with_cells(cell.rotated_into(screen_height) for cell in layout.cells)


def pick_candidate(direct: Candidate, rotated: Candidate) -> Candidate:
    """Pick the better of two candidates.

    A valid candidate beats an invalid one. Otherwise the smaller missing
    area wins, and ties go to the direct orientation.
    """
    if direct.layout.valid != rotated.layout.valid:
        return direct if direct.layout.valid else rotated
    if rotated.missing_area < direct.missing_area:
        return rotated
    return direct


class OrientationSelector:
    """Builds both orientations of a screen and keeps the better one."""

    def __init__(
        self,
        config: TilingConfig | None = None,
        builder: LayoutBuilder | None = None,
    ) -> None:
        self.config = config or TilingConfig()
        self.builder = builder or LayoutBuilder(self.config)

    def candidates(self, screen_width: int, screen_height: int) -> tuple[Candidate, Candidate]:
        """Return the direct and the rotated candidate, both in screen coordinates."""
        require_positive_int("screen_width", screen_width)
        require_positive_int("screen_height", screen_height)

        direct = self.builder.build(screen_width, screen_height, Orientation.DIRECT)
        rotated_raw = self.builder.build(screen_height, screen_width, Orientation.ROTATED)
        rotated = rotate_back(rotated_raw, screen_height)
        return (
            Candidate(layout=direct, orientation=Orientation.DIRECT),
            Candidate(layout=rotated, orientation=Orientation.ROTATED),
        )

    def choose(self, screen_width: int, screen_height: int) -> Candidate:
        """Return the best candidate for the screen.

        Always returns a candidate, even when neither orientation tiles the
        screen, so callers can still show a best-effort layout.
        """
        direct, rotated = self.candidates(screen_width, screen_height)
        chosen = pick_candidate(direct, rotated)
        logger.debug(
            "Direct valid=%s missing=%d, rotated valid=%s missing=%d -> %s",
            direct.layout.valid,
            direct.missing_area,
            rotated.layout.valid,
            rotated.missing_area,
            chosen.orientation.value,
        )
        return chosen
