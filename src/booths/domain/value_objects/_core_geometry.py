"""Core geometry value objects for booth placement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Floating-point tolerance for containment and segmentation checks
EPSILON = 1e-6


@dataclass(frozen=True)
class FloorPosition:
    """Position of a floor-standing component, relative to the floor center."""

    x: float
    z: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle on the floor plane.

    A rectangle may be degenerate (zero width or depth); speakers use a
    point footprint.

    Attributes:
        min_x: Left edge.
        max_x: Right edge.
        min_z: Back edge (towards the back wall).
        max_z: Front edge (towards the open aisle).
    """

    min_x: float
    max_x: float
    min_z: float
    max_z: float

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_z < self.min_z:
            raise ValueError("Rect max edges must not be less than min edges")

    @classmethod
    def centered(cls, x: float, z: float, width: float, depth: float) -> "Rect":
        """Rectangle of the given size centered on (x, z)."""
        return cls(
            min_x=x - width / 2,
            max_x=x + width / 2,
            min_z=z - depth / 2,
            max_z=z + depth / 2,
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z

    @property
    def center(self) -> FloorPosition:
        return FloorPosition(
            x=(self.min_x + self.max_x) / 2, z=(self.min_z + self.max_z) / 2
        )

    @property
    def parts(self) -> tuple["Rect", ...]:
        """Rectangles that must each lie inside the floor."""
        return (self,)

    @property
    def collision_box(self) -> "Rect":
        """Box used for overlap tests against other components."""
        return self

    def expanded(self, margin: float) -> "Rect":
        """Grow the rectangle by margin on every side."""
        return Rect(
            min_x=self.min_x - margin,
            max_x=self.max_x + margin,
            min_z=self.min_z - margin,
            max_z=self.max_z + margin,
        )

    def translated(self, dx: float, dz: float) -> "Rect":
        return Rect(
            min_x=self.min_x + dx,
            max_x=self.max_x + dx,
            min_z=self.min_z + dz,
            max_z=self.max_z + dz,
        )

    def overlaps(self, other: "Rect") -> bool:
        """Check strict overlap with another rectangle.

        Touching edges do not count as overlap, so components may sit
        flush against each other.
        """
        return not (
            self.max_x <= other.min_x
            or self.min_x >= other.max_x
            or self.max_z <= other.min_z
            or self.min_z >= other.max_z
        )

    def distance_to(self, x: float, z: float) -> float:
        """Euclidean distance from a point to the rectangle (0 inside)."""
        dx = max(self.min_x - x, 0.0, x - self.max_x)
        dz = max(self.min_z - z, 0.0, z - self.max_z)
        return (dx * dx + dz * dz) ** 0.5


@dataclass(frozen=True)
class CompositeFootprint:
    """Footprint made of several rectangles, such as an L-shaped counter."""

    rects: tuple[Rect, ...]

    def __post_init__(self) -> None:
        if not self.rects:
            raise ValueError("CompositeFootprint needs at least one rectangle")

    @property
    def parts(self) -> tuple[Rect, ...]:
        return self.rects

    @property
    def bounds(self) -> Rect:
        """Axis-aligned bounding box of all parts."""
        return Rect(
            min_x=min(r.min_x for r in self.rects),
            max_x=max(r.max_x for r in self.rects),
            min_z=min(r.min_z for r in self.rects),
            max_z=max(r.max_z for r in self.rects),
        )

    @property
    def collision_box(self) -> Rect:
        """Bounding square of all parts, centered on the bounding box."""
        bounds = self.bounds
        side = max(bounds.width, bounds.depth)
        center = bounds.center
        return Rect.centered(center.x, center.z, side, side)


Footprint = Union[Rect, CompositeFootprint]
