"""Wall segmentation into one-meter structural modules.

A wall run is built from 1 m BeMatrix modules plus at most one shorter
remainder module at the end. The same segmentation drives wall geometry,
seam trims between modules, TV and shelf slots, lighting fixtures and
the per-meter BOM entries.
"""

from __future__ import annotations

import math

from ..value_objects import (
    EPSILON,
    FloorPlan,
    Seam,
    WallModule,
    WallRun,
    WallShape,
    WallSide,
)

__all__ = [
    "MODULE_LENGTH",
    "module_centers",
    "run_for_side",
    "seams",
    "segment_wall",
    "total_wall_length",
    "wall_runs",
    "wall_sides",
]

MODULE_LENGTH = 1.0

_SIDES_BY_SHAPE: dict[WallShape, tuple[WallSide, ...]] = {
    WallShape.NONE: (),
    WallShape.STRAIGHT: (WallSide.BACK,),
    WallShape.L: (WallSide.BACK, WallSide.LEFT),
    WallShape.U: (WallSide.BACK, WallSide.LEFT, WallSide.RIGHT),
}


def segment_wall(length: float) -> list[WallModule]:
    """Split a wall run into 1 m modules plus an optional remainder.

    Args:
        length: Run length in meters.

    Returns:
        Modules in order along the run. All modules are 1 m except the
        last, which is length - floor(length) when length is not a whole
        number of meters.

    Raises:
        ValueError: If length is not positive.

    Example:
        >>> [m.length for m in segment_wall(3.0)]
        [1.0, 1.0, 1.0]
    """
    if length <= EPSILON:
        raise ValueError(f"Wall length must be positive (got {length})")

    full = math.floor(length / MODULE_LENGTH + EPSILON)
    remainder = length - full * MODULE_LENGTH
    if remainder <= EPSILON:
        remainder = 0.0

    modules = [
        WallModule(index=i, start_offset=i * MODULE_LENGTH, length=MODULE_LENGTH)
        for i in range(full)
    ]
    if remainder > 0:
        modules.append(
            WallModule(
                index=full,
                start_offset=full * MODULE_LENGTH,
                length=remainder,
            )
        )
    return modules


def seams(modules: list[WallModule] | tuple[WallModule, ...]) -> list[Seam]:
    """Seam trims at every internal boundary between adjacent modules."""
    return [
        Seam(offset=module.end_offset, left_module=module.index)
        for module in modules[:-1]
    ]


def wall_sides(shape: WallShape) -> tuple[WallSide, ...]:
    """Wall runs present for a wall shape."""
    return _SIDES_BY_SHAPE[shape]


def run_for_side(floor: FloorPlan, side: WallSide) -> WallRun:
    """Build the wall run for one side; the back follows the width."""
    length = floor.width if side is WallSide.BACK else floor.depth
    return WallRun(
        side=side,
        length=length,
        height=floor.wall_height,
        modules=tuple(segment_wall(length)),
    )


def wall_runs(floor: FloorPlan) -> list[WallRun]:
    """All active wall runs for a floor plan, back first."""
    return [run_for_side(floor, side) for side in wall_sides(floor.wall_shape)]


def total_wall_length(floor: FloorPlan) -> float:
    """Sum of all active wall run lengths in meters."""
    return sum(run.length for run in wall_runs(floor))


def module_centers(run: WallRun) -> list[float]:
    """Along-axis slot centers of a run, within [-length/2, length/2]."""
    return run.slot_centers()
