"""Booth-level value objects: floor plan, wall selections and component kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import EPSILON, Rect


class DegenerateFloorError(ValueError):
    """Raised when a floor plan has a non-positive width or depth."""


class WallShape(str, Enum):
    """Wall configurations offered for a booth.

    Attributes:
        NONE: Open booth without walls.
        STRAIGHT: Back wall only.
        L: Back wall plus left side wall.
        U: Back wall plus both side walls.
    """

    NONE = "none"
    STRAIGHT = "straight"
    L = "l"
    U = "u"

    @classmethod
    def _missing_(cls, value: object) -> "WallShape | None":
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class WallSide(str, Enum):
    """Wall runs a booth can have."""

    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class ComponentKind(str, Enum):
    """Kinds of modular components that can be placed in a booth."""

    COUNTER = "counter"
    STORAGE = "storage"
    TV = "tv"
    PLANT = "plant"
    FURNITURE = "furniture"
    SHELF = "shelf"
    SPEAKER = "speaker"
    TRUSS = "truss"

    @property
    def is_wall_mounted(self) -> bool:
        return self in (ComponentKind.TV, ComponentKind.SHELF)


class Orientation(str, Enum):
    """TV mounting orientation."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    def toggled(self) -> "Orientation":
        if self is Orientation.LANDSCAPE:
            return Orientation.PORTRAIT
        return Orientation.LANDSCAPE


class TrussType(str, Enum):
    """Truss rigs that can be added to a booth."""

    FRONT_STRAIGHT = "front-straight"
    HANGING_ROUND = "hanging-round"
    HANGING_SQUARE = "hanging-square"


class GraphicType(str, Enum):
    """Printed graphic options for walls and storage units.

    Attributes:
        NONE: Plain white panels.
        HYR: Rental graphics, billed per square meter.
        VEPA: Fabric print, billed per square meter.
        FOREX: Rigid foam board, billed per linear meter by wall height.
    """

    NONE = "none"
    HYR = "hyr"
    VEPA = "vepa"
    FOREX = "forex"


# Wall heights offered, in meters
WALL_HEIGHT_OPTIONS: tuple[float, ...] = (2.5, 3.0, 3.5)


class CarpetFamily(str, Enum):
    """Carpet price families."""

    NONE = "none"
    PLAIN = "plain"
    EXPO = "expo"
    SALSA = "salsa"
    CHECKERBOARD = "checkerboard"


@dataclass(frozen=True)
class FloorPlan:
    """Rectangular booth floor with its wall selection.

    Coordinates of components are relative to the floor center, so
    X spans [-width/2, width/2] and Z spans [-depth/2, depth/2]. The back
    wall sits at the minimum Z edge.

    Attributes:
        width: Floor width in meters (along the back wall).
        depth: Floor depth in meters (along the side walls).
        wall_shape: Selected wall configuration.
        wall_height: Wall height in meters.
    """

    width: float
    depth: float
    wall_shape: WallShape = WallShape.NONE
    wall_height: float = 2.5

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0:
            raise DegenerateFloorError(
                f"Floor width and depth must be positive "
                f"(got {self.width} x {self.depth})"
            )
        if not any(abs(self.wall_height - h) < EPSILON for h in WALL_HEIGHT_OPTIONS):
            raise ValueError(
                f"Wall height must be one of {list(WALL_HEIGHT_OPTIONS)} "
                f"(got {self.wall_height})"
            )

    @property
    def area(self) -> float:
        """Floor area in square meters."""
        return self.width * self.depth

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_depth(self) -> float:
        return self.depth / 2

    @property
    def bounds(self) -> Rect:
        return Rect.centered(0.0, 0.0, self.width, self.depth)

    def contains(self, rect: Rect, tolerance: float = EPSILON) -> bool:
        """Check that a rectangle lies fully inside the floor."""
        return (
            rect.min_x >= -self.half_width - tolerance
            and rect.max_x <= self.half_width + tolerance
            and rect.min_z >= -self.half_depth - tolerance
            and rect.max_z <= self.half_depth + tolerance
        )


@dataclass(frozen=True)
class WallPosition:
    """Position of a wall-mounted component (TV or shelf).

    Attributes:
        wall: Wall run the component hangs on.
        slot_index: Index of the wall module the component is centered on.
        height_tier: Name of the height tier (see catalog.HEIGHT_TIERS).
    """

    wall: WallSide
    slot_index: int
    height_tier: str = "mid"

    def __post_init__(self) -> None:
        if self.slot_index < 0:
            raise ValueError("slot_index must be non-negative")
