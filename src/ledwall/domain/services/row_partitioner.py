"""Row partitioning for LED case layouts.

A row of the screen is split into segments whose widths come from the set
of case widths allowed for that row. The exact search is a largest-first
depth-first search with backtracking; remainders already proven to be dead
ends are memoised, which keeps the search linear in the row width without
changing which partition is found first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionResult:
    """Segments covering a row plus any uncovered remainder.

    Attributes:
        segments: Segment widths, left to right.
        missing: Width left uncovered at the end of the row.
        merged: Sub-tolerance remainder folded into the last segment.
    """

    segments: tuple[int, ...]
    missing: int = 0
    merged: int = 0

    @property
    def covered(self) -> int:
        """Total width covered by segments."""
        return sum(self.segments)

    @property
    def is_exact(self) -> bool:
        return self.missing == 0 and self.merged == 0


def _largest_first(allowed: Iterable[int]) -> tuple[int, ...]:
    widths = sorted(set(allowed), reverse=True)
    if any(width <= 0 for width in widths):
        raise ValueError("Allowed widths must be positive")
    return tuple(widths)


def partition_exact(target: int, allowed: Iterable[int]) -> tuple[int, ...] | None:
    """Find widths from ``allowed`` (repeats permitted) summing exactly to ``target``.

    Widths are tried largest first at every step, so the result is the
    lexicographically largest-first partition. Identical arguments always
    produce the identical sequence.

    Args:
        target: Row width to fill.
        allowed: Candidate segment widths.

    Returns:
        Segment widths in order, ``()`` for a zero target, or None when no
        combination exists.

    Raises:
        ValueError: If the target is negative or an allowed width is not positive.
    """
    if target < 0:
        raise ValueError("Target width must be non-negative")
    widths = _largest_first(allowed)

    dead_ends: set[int] = set()
    path: list[int] = []
    # Each frame is (remaining width, index of the next width to try)
    stack: list[tuple[int, int]] = [(target, 0)]

    while stack:
        remaining, start = stack[-1]
        if remaining == 0:
            return tuple(path)

        for index in range(start, len(widths)):
            width = widths[index]
            if width <= remaining and (remaining - width) not in dead_ends:
                stack[-1] = (remaining, index + 1)
                path.append(width)
                stack.append((remaining - width, 0))
                break
        else:
            dead_ends.add(remaining)
            stack.pop()
            if path:
                path.pop()

    return None


def partition_with_missing(
    target: int,
    allowed: Iterable[int],
    module_width: int,
    tolerance: float = 0.1,
) -> PartitionResult:
    """Partition a row, falling back to a greedy fill plus a residual gap.

    When no exact partition exists, the largest widths are consumed
    greedily until the remainder is narrower than every allowed width. A
    remainder strictly below ``tolerance * module_width`` is folded into the
    last segment; anything larger is reported as missing.

    Args:
        target: Row width to fill.
        allowed: Candidate segment widths.
        module_width: LED module width along the row.
        tolerance: Fraction of the module width that may be merged.

    Returns:
        PartitionResult with segments, missing width and merged width.
    """
    widths = _largest_first(allowed)
    exact = partition_exact(target, widths)
    if exact is not None:
        return PartitionResult(segments=exact)

    segments: list[int] = []
    remaining = target
    for width in widths:
        count, remaining = divmod(remaining, width)
        segments.extend([width] * count)

    if 0 < remaining < tolerance * module_width and segments:
        logger.debug(
            "Folding %d mm remainder into last %d mm segment", remaining, segments[-1]
        )
        segments[-1] += remaining
        return PartitionResult(segments=tuple(segments), merged=remaining)

    logger.debug(
        "No exact partition of %d mm from %s, %d mm missing", target, widths, remaining
    )
    return PartitionResult(segments=tuple(segments), missing=remaining)
