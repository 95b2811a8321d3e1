"""Core geometry value objects for LED wall tiling.

All sizes and coordinates are integer millimetres. Every value object is
frozen so configuration and computed layouts can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class InvalidDimensionError(ValueError):
    """Raised when a screen or case dimension is not a positive integer."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


def require_positive_int(name: str, value: object) -> int:
    """Return ``value`` if it is a positive int, raise InvalidDimensionError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(name, value)
    return value


class CaseKind(str, Enum):
    """Catalog entry kinds."""

    STANDARD = "standard"
    CUSTOM = "custom"


class CellKind(str, Enum):
    """Kinds of cells in a computed layout."""

    STANDARD = "standard"
    CUSTOM_PREMADE = "custom_premade"
    CUSTOM_NEW = "custom_new"
    MISSING = "missing"
    MODULE_FILLED = "module_filled"

    @property
    def is_case(self) -> bool:
        """True for cells backed by a physical case or module grid."""
        return self is not CellKind.MISSING


class Orientation(str, Enum):
    """Tiling orientation of the whole screen."""

    DIRECT = "direct"
    ROTATED = "rotated"


@dataclass(frozen=True)
class Dimension2D:
    """Immutable width x height pair in millimetres."""

    width: int
    height: int

    def __post_init__(self) -> None:
        require_positive_int("width", self.width)
        require_positive_int("height", self.height)

    @property
    def area(self) -> int:
        """Area in square millimetres."""
        return self.width * self.height

    def transposed(self) -> Dimension2D:
        """Return the same rectangle turned by 90 degrees."""
        return Dimension2D(width=self.height, height=self.width)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class CaseSpec:
    """A case size from the catalog.

    Attributes:
        width: Case width in mm.
        height: Case height in mm.
        kind: Standard or custom.
        catalog_id: Reference of a pre-fabricated custom case.
    """

    width: int
    height: int
    kind: CaseKind = CaseKind.CUSTOM
    catalog_id: str | None = None

    def __post_init__(self) -> None:
        require_positive_int("width", self.width)
        require_positive_int("height", self.height)
        if self.kind is CaseKind.STANDARD and self.catalog_id is not None:
            raise ValueError("Standard cases do not carry a catalog id")

    @property
    def size(self) -> Dimension2D:
        return Dimension2D(self.width, self.height)

    @classmethod
    def standard(cls, width: int = 1120, height: int = 640) -> CaseSpec:
        """The standard 1120x640 mm case."""
        return cls(width=width, height=height, kind=CaseKind.STANDARD)


@dataclass(frozen=True)
class ModuleSpec:
    """LED module tile size for one orientation."""

    width: int
    height: int

    def __post_init__(self) -> None:
        require_positive_int("module width", self.width)
        require_positive_int("module height", self.height)

    def transposed(self) -> ModuleSpec:
        return ModuleSpec(width=self.height, height=self.width)

    def divides(self, width: int, height: int) -> bool:
        """Check whether a width x height rectangle holds a whole number of modules."""
        return width % self.width == 0 and height % self.height == 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Cell:
    """A rectangular region of the final tiling, in screen coordinates.

    Attributes:
        x: Left edge in mm.
        y: Top edge in mm.
        width: Width in mm.
        height: Height in mm.
        kind: What fills the region.
        catalog_id: Catalog reference for pre-made custom cases.
        row: Index of the builder row the cell belongs to.
    """

    x: int
    y: int
    width: int
    height: int
    kind: CellKind
    catalog_id: str | None = None
    row: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Cell coordinates must be non-negative")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Cell dimensions must be positive")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    def rotated_into(self, screen_height: int) -> Cell:
        """Map a cell built on the swapped screen back into the real screen frame.

        The rotated build tiles a ``screen_height x screen_width`` frame; a
        90 degree clockwise remap brings each cell back.
        """
        return replace(
            self,
            x=self.y,
            y=screen_height - self.x - self.width,
            width=self.height,
            height=self.width,
        )
