"""BeMatrix wall frame planning for the structural packing list.

Walls are built from frame columns one meter wide (plus a half-meter
column for a remainder of at least 0.5 m). Each column is a stack of
frames reaching the wall height. 3.5 m walls use a 2.5 m stack per
column plus a top row of one-meter-high frames spanning the whole run.
Connectors join adjacent columns; storage units add their own frames
and pins; baseplates stabilise the structure.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable

from ..entities import PlacedComponent
from ..value_objects import ComponentKind, FloorPlan, WallShape, WallSide
from .placement import PlacementValidator
from .walls import wall_runs

logger = logging.getLogger(__name__)

__all__ = [
    "ALLOWED_HEIGHTS",
    "FrameColumn",
    "StorageHardware",
    "TOP_WIDTHS",
    "TopRow",
    "WallFrameInfo",
    "WallFramePlan",
    "WallFramePlanner",
    "columns_for_length",
    "frame_label",
    "solve_column_stack",
    "top_row_pieces",
]

TOP_WIDTHS: tuple[float, ...] = (3.0, 2.5, 2.0, 1.5, 1.1, 1.0, 0.5)
ALLOWED_HEIGHTS: tuple[float, ...] = (2.5, 3.0, 2.0, 1.5, 1.0, 0.5)

# Frame sizes are solved on a 10 cm integer grid
_SCALE = 10
_TOLERANCE = 1e-6

CONNECTORS = "Connectors"
CORNER_4PIN = "Corner 90° 4-pin"
M8_PIN = "M8 pin"
T_5PIN = "T 5-pin"
BASEPLATE = "Baseplate"


def _fmt(value: float) -> str:
    """Swedish-style size: 2.5 -> "2,5", 3.0 -> "3"."""
    return f"{value:g}".replace(".", ",")


def frame_label(height: float, width: float) -> str:
    """Packing-list label of a wall frame, height first."""
    return f"{_fmt(height)}x{_fmt(width)}"


def _close(a: float, b: float) -> bool:
    return abs(a - b) < _TOLERANCE


@dataclass(frozen=True)
class FrameColumn:
    """One frame column: width and the stack of frame heights."""

    width: float
    stack: dict[float, int]


@dataclass(frozen=True)
class TopRow:
    """Top row of one-meter-high frames on a 3.5 m wall."""

    pieces: dict[float, int]
    waste: float | None


@dataclass(frozen=True)
class StorageHardware:
    """Hardware counts for one storage unit."""

    connectors: int
    corner_90_4pin: int
    m8_pin: int
    t_5pin: int
    frame_sections: int = 0


@dataclass
class WallFrameInfo:
    """Frame plan for one wall run."""

    side: WallSide
    length: float
    height: float
    columns: list[FrameColumn] = field(default_factory=list)
    top_row: TopRow | None = None
    storages: list[str] = field(default_factory=list)


@dataclass
class WallFramePlan:
    """Frame plan for the whole booth.

    Attributes:
        walls: Per-wall column layout.
        totals: Packing-list label to count.
        free_storages: Ids of storage units not attached to any wall.
    """

    walls: dict[WallSide, WallFrameInfo] = field(default_factory=dict)
    totals: dict[str, int] = field(default_factory=dict)
    free_storages: list[str] = field(default_factory=list)

    def add(self, label: str, count: int) -> None:
        if count > 0:
            self.totals[label] = self.totals.get(label, 0) + count


# Hardware per storage width, for storage units along a wall or in a corner
STORAGE_HARDWARE: dict[str, dict[int, StorageHardware]] = {
    "straight": {
        1: StorageHardware(connectors=0, corner_90_4pin=4, m8_pin=14, t_5pin=2),
        2: StorageHardware(connectors=2, corner_90_4pin=4, m8_pin=14, t_5pin=2),
        3: StorageHardware(connectors=4, corner_90_4pin=4, m8_pin=14, t_5pin=2),
        4: StorageHardware(connectors=6, corner_90_4pin=4, m8_pin=14, t_5pin=2),
    },
    "corner": {
        1: StorageHardware(connectors=0, corner_90_4pin=4, m8_pin=20, t_5pin=4),
        2: StorageHardware(connectors=2, corner_90_4pin=4, m8_pin=20, t_5pin=4),
        3: StorageHardware(connectors=4, corner_90_4pin=4, m8_pin=20, t_5pin=4),
        4: StorageHardware(connectors=6, corner_90_4pin=4, m8_pin=20, t_5pin=4),
    },
}

# Number of frame sections a storage unit of each width needs
STORAGE_FRAME_SECTIONS: dict[str, dict[int, int]] = {
    "straight": {1: 3, 2: 4, 3: 5, 4: 6},
    "corner": {1: 3, 2: 3, 3: 4, 4: 5},
}


def solve_column_stack(target_height: float) -> dict[float, int] | None:
    """Fewest frames stacking exactly to a height, preferring 2.5 m frames.

    Returns:
        Frame height to count, or None if the height cannot be reached.
    """
    target = round(target_height * _SCALE)
    sizes = [round(h * _SCALE) for h in ALLOWED_HEIGHTS]
    inf = math.inf
    pieces = [inf] * (target + 1)
    prefer = [-inf] * (target + 1)
    choice = [-1] * (target + 1)
    pieces[0] = 0
    prefer[0] = 0

    for s in range(target + 1):
        if pieces[s] == inf:
            continue
        for i, size in enumerate(sizes):
            ns = s + size
            if ns > target:
                continue
            candidate = pieces[s] + 1
            candidate_prefer = prefer[s] + (1 if ALLOWED_HEIGHTS[i] == 2.5 else 0)
            if candidate < pieces[ns] or (
                candidate == pieces[ns] and candidate_prefer > prefer[ns]
            ):
                pieces[ns] = candidate
                prefer[ns] = candidate_prefer
                choice[ns] = i

    if pieces[target] == inf:
        return None

    counts: dict[float, int] = {}
    current = target
    while current > 0:
        i = choice[current]
        if i == -1:
            break
        counts[ALLOWED_HEIGHTS[i]] = counts.get(ALLOWED_HEIGHTS[i], 0) + 1
        current -= sizes[i]
    return counts


def columns_for_length(length: float, height: float) -> list[FrameColumn]:
    """Frame columns covering a wall run of the given length and height."""
    full = math.floor(length + _TOLERANCE)
    remainder = round((length - full) * 100) / 100
    if _close(height, 3.5):
        stack: dict[float, int] | None = {2.5: 1}
    else:
        stack = solve_column_stack(height)
    stack = stack or {}

    columns = [FrameColumn(width=1.0, stack=dict(stack)) for _ in range(full)]
    if remainder >= 0.499:
        columns.append(FrameColumn(width=0.5, stack=dict(stack)))
    return columns


def top_row_pieces(length: float) -> TopRow:
    """Top row frames covering a run with least waste, then fewest pieces."""
    target = round(length * _SCALE)
    sizes = [round(w * _SCALE) for w in TOP_WIDTHS]
    max_sum = target + max(sizes)
    inf = math.inf
    dp = [inf] * (max_sum + 1)
    choice = [-1] * (max_sum + 1)
    dp[0] = 0

    for s in range(max_sum + 1):
        if dp[s] == inf:
            continue
        for i, size in enumerate(sizes):
            ns = s + size
            if ns > max_sum:
                continue
            if dp[ns] > dp[s] + 1:
                dp[ns] = dp[s] + 1
                choice[ns] = i

    best_sum = -1
    best_waste = inf
    best_pieces = inf
    for s in range(target, max_sum + 1):
        if dp[s] == inf:
            continue
        waste = s - target
        if waste < best_waste or (waste == best_waste and dp[s] < best_pieces):
            best_waste = waste
            best_sum = s
            best_pieces = dp[s]

    pieces: dict[float, int] = {}
    current = best_sum
    while current > 0:
        i = choice[current]
        if i == -1:
            break
        pieces[TOP_WIDTHS[i]] = pieces.get(TOP_WIDTHS[i], 0) + 1
        current -= sizes[i]
    waste = None if best_sum == -1 else best_waste / _SCALE
    return TopRow(pieces=pieces, waste=waste)


class WallFramePlanner:
    """Builds the BeMatrix frame and hardware list for booth walls."""

    def __init__(self, validator: PlacementValidator | None = None) -> None:
        self.validator = validator or PlacementValidator()

    def plan(
        self, floor: FloorPlan, components: Iterable[PlacedComponent] = ()
    ) -> WallFramePlan:
        """Plan frames, connectors, pins and baseplates for the walls.

        Args:
            floor: Floor plan with wall shape and height.
            components: Placed components; only storage units are used.

        Returns:
            WallFramePlan with per-wall columns and packing-list totals.
        """
        result = WallFramePlan()
        for run in wall_runs(floor):
            info = WallFrameInfo(side=run.side, length=run.length, height=run.height)
            info.columns = columns_for_length(run.length, run.height)
            for column in info.columns:
                for frame_height, count in column.stack.items():
                    result.add(frame_label(frame_height, column.width), count)

            column_count = len(info.columns)
            per_join = 2 if _close(run.height, 2.5) else 3
            if _close(run.height, 3.5):
                result.add(CONNECTORS, column_count * per_join)
                info.top_row = top_row_pieces(run.length)
                for width, count in info.top_row.pieces.items():
                    result.add(frame_label(1.0, width), count)
            else:
                result.add(CONNECTORS, max(0, column_count - 1) * per_join)
            result.walls[run.side] = info

        if floor.wall_shape is WallShape.L:
            result.add(M8_PIN, 4)
        elif floor.wall_shape is WallShape.U:
            result.add(CORNER_4PIN, 4)
            result.add(M8_PIN, 8)

        storages = [c for c in components if c.kind is ComponentKind.STORAGE]
        for storage in storages:
            self._add_storage(floor, storage, result)

        back = result.walls.get(WallSide.BACK)
        if floor.wall_shape is WallShape.STRAIGHT and back is not None and back.storages:
            result.add(CORNER_4PIN, 2)

        result.add(BASEPLATE, self._baseplates(floor))
        logger.debug(f"Wall frame plan: {len(result.totals)} packing-list lines")
        return result

    def _add_storage(
        self, floor: FloorPlan, storage: PlacedComponent, result: WallFramePlan
    ) -> None:
        box = self.validator.footprint_for(storage, floor).collision_box
        center = box.center
        width = max(1, round(box.width))
        depth = max(1, round(box.depth))
        half_w = width / 2
        half_d = depth / 2
        back_z = -floor.half_depth
        left_x = -floor.half_width
        right_x = floor.half_width

        touches_back = _close(center.z - half_d, back_z)
        is_corner = touches_back and (
            _close(center.x - half_w, left_x) or _close(center.x + half_w, right_x)
        )
        kind = "corner" if is_corner else "straight"

        attached: WallSide | None = None
        if (
            _close(center.x - half_w, left_x) or _close(center.x + half_w, left_x)
        ) and WallSide.LEFT in result.walls:
            attached = WallSide.LEFT
        elif (
            _close(center.x - half_w, right_x) or _close(center.x + half_w, right_x)
        ) and WallSide.RIGHT in result.walls:
            attached = WallSide.RIGHT
        elif (
            _close(center.z - half_d, back_z) or _close(center.z + half_d, back_z)
        ) and WallSide.BACK in result.walls:
            attached = WallSide.BACK

        if attached is not None:
            result.walls[attached].storages.append(storage.id)
        else:
            result.free_storages.append(storage.id)

        hardware = STORAGE_HARDWARE[kind].get(width, STORAGE_HARDWARE[kind][1])
        result.add(CONNECTORS, hardware.connectors)
        result.add(CORNER_4PIN, hardware.corner_90_4pin)
        result.add(M8_PIN, hardware.m8_pin)
        result.add(T_5PIN, hardware.t_5pin)
        # Wider storage units need two more connectors per extra meter
        result.add(CONNECTORS, max(0, width - 1) * 2)

        wall_height = floor.wall_height
        if attached is WallSide.BACK and not is_corner:
            sections = 1
        else:
            sections = STORAGE_FRAME_SECTIONS[kind].get(
                width, STORAGE_FRAME_SECTIONS["straight"][1]
            )
        if _close(wall_height, 3.0):
            result.add(frame_label(3.0, 1.0), sections)
        elif _close(wall_height, 3.5):
            result.add(frame_label(2.5, 1.0), sections)
            result.add(frame_label(1.0, 1.0), sections)
        else:
            result.add(frame_label(2.5, 1.0), sections)

    def _baseplates(self, floor: FloorPlan) -> int:
        if floor.wall_shape is WallShape.STRAIGHT:
            if _close(floor.width, 3):
                return 1
            if _close(floor.width, 4):
                return 2
            if floor.width >= 5:
                return 3
            return 0
        if floor.wall_shape in (WallShape.L, WallShape.U):
            return 1 if 2 * (floor.width + floor.depth) >= 6 else 0
        return 0
