"""Grid/marker generation: legal snap points for each component kind.

The configurator shows clickable markers wherever a component of the
selected kind may be dropped. Markers come from a per-kind snap grid
(or from wall module slots for wall-mounted kinds) and are filtered
through the PlacementValidator.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from .. import catalog
from ..entities import PlacedComponent
from ..value_objects import (
    EPSILON,
    ComponentKind,
    FloorPlan,
    FloorPosition,
    Slot,
    WallPosition,
    WallShape,
)
from .placement import FRONT_TRUSS_DEPTH, PlacementValidator
from .walls import run_for_side, wall_sides

logger = logging.getLogger(__name__)

__all__ = ["GridRule", "GRID_RULES", "MarkerGenerator", "grid_points"]

CANDIDATE_ID = "__candidate__"


@dataclass(frozen=True)
class GridRule:
    """How a kind snaps to the floor.

    Attributes:
        pitch: Grid spacing in meters, None for kinds with fixed anchors.
        clamp: Shift snap points so the footprint stays on the floor.
    """

    pitch: float | None
    clamp: bool = False


GRID_RULES: dict[ComponentKind, GridRule] = {
    ComponentKind.COUNTER: GridRule(pitch=0.5, clamp=True),
    ComponentKind.FURNITURE: GridRule(pitch=0.5, clamp=True),
    ComponentKind.PLANT: GridRule(pitch=1.0),
    ComponentKind.SPEAKER: GridRule(pitch=0.5),
    ComponentKind.STORAGE: GridRule(pitch=None),
    ComponentKind.TRUSS: GridRule(pitch=None),
    ComponentKind.TV: GridRule(pitch=None),
    ComponentKind.SHELF: GridRule(pitch=None),
}


def grid_points(floor: FloorPlan, pitch: float) -> list[tuple[float, float]]:
    """Grid points anchored at the floor center, within the floor bounds."""
    nx = math.floor(floor.half_width / pitch + EPSILON)
    nz = math.floor(floor.half_depth / pitch + EPSILON)
    return [
        (i * pitch, k * pitch)
        for k in range(-nz, nz + 1)
        for i in range(-nx, nx + 1)
    ]


class MarkerGenerator:
    """Enumerates legal placement slots for a component kind."""

    def __init__(self, validator: PlacementValidator | None = None) -> None:
        self.validator = validator or PlacementValidator()

    def legal_slots(
        self,
        floor: FloorPlan,
        existing: Iterable[PlacedComponent],
        kind: ComponentKind,
        catalog_index: int = 0,
        rotation: float = 0.0,
        wall_shape: WallShape | None = None,
    ) -> list[Slot]:
        """Legal slots for placing one more component of a kind.

        Args:
            floor: Booth floor plan.
            existing: Components already placed.
            kind: Kind of component to place.
            catalog_index: Catalog row of the component.
            rotation: Rotation the component would be placed with.
            wall_shape: Wall shape to use for wall slots; defaults to the
                floor plan's shape.

        Returns:
            Slots in grid order; every slot passes the PlacementValidator.
        """
        existing = list(existing)
        if kind.is_wall_mounted:
            shape = wall_shape if wall_shape is not None else floor.wall_shape
            slots = self._wall_slots(floor, existing, kind, catalog_index, shape)
        else:
            slots = self._floor_slots(floor, existing, kind, catalog_index, rotation)
        logger.debug(f"{len(slots)} legal {kind.value} slots")
        return slots

    # ------------------------------------------------------------------
    # Floor kinds
    # ------------------------------------------------------------------

    def _floor_slots(
        self,
        floor: FloorPlan,
        existing: list[PlacedComponent],
        kind: ComponentKind,
        catalog_index: int,
        rotation: float,
    ) -> list[Slot]:
        rule = GRID_RULES[kind]
        if kind is ComponentKind.STORAGE:
            points = self.storage_corners(floor, catalog_index, rotation)
        elif kind is ComponentKind.TRUSS:
            points = self.truss_anchor(floor, catalog_index)
        else:
            assert rule.pitch is not None
            points = grid_points(floor, rule.pitch)

        slots: list[Slot] = []
        seen: set[tuple[float, float]] = set()
        for x, z in points:
            if rule.clamp:
                clamped = self._clamp(floor, kind, catalog_index, x, z, rotation)
                if clamped is None:
                    continue
                x, z = clamped
            key = (round(x, 6), round(z, 6))
            if key in seen:
                continue
            seen.add(key)
            candidate = PlacedComponent(
                id=CANDIDATE_ID,
                kind=kind,
                catalog_index=catalog_index,
                position=FloorPosition(x=key[0], z=key[1]),
                rotation=rotation,
            )
            if self.validator.can_place(floor, existing, candidate):
                slots.append(
                    Slot(rotation=rotation, floor_position=candidate.floor_position)
                )
        return slots

    def _clamp(
        self,
        floor: FloorPlan,
        kind: ComponentKind,
        catalog_index: int,
        x: float,
        z: float,
        rotation: float,
    ) -> tuple[float, float] | None:
        """Shift a snap point so the whole footprint lies on the floor."""
        footprint = self.validator.footprint(
            kind, catalog_index, x, z, rotation, floor
        )
        parts = footprint.parts
        min_x = min(p.min_x for p in parts)
        max_x = max(p.max_x for p in parts)
        min_z = min(p.min_z for p in parts)
        max_z = max(p.max_z for p in parts)
        if max_x - min_x > floor.width + EPSILON or max_z - min_z > floor.depth + EPSILON:
            return None

        if min_x < -floor.half_width:
            x += -floor.half_width - min_x
        elif max_x > floor.half_width:
            x -= max_x - floor.half_width
        if min_z < -floor.half_depth:
            z += -floor.half_depth - min_z
        elif max_z > floor.half_depth:
            z -= max_z - floor.half_depth
        return x, z

    def storage_corners(
        self, floor: FloorPlan, catalog_index: int, rotation: float
    ) -> list[tuple[float, float]]:
        """Storage units are corner units: only the two front corners."""
        footprint = self.validator.footprint(
            ComponentKind.STORAGE, catalog_index, 0.0, 0.0, rotation, floor
        )
        box = footprint.collision_box
        x = floor.half_width - box.width / 2
        z = floor.half_depth - box.depth / 2
        return [(-x, z), (x, z)]

    def truss_anchor(
        self, floor: FloorPlan, catalog_index: int
    ) -> list[tuple[float, float]]:
        truss = catalog.lookup(catalog.TRUSS_TYPES, catalog_index, "truss")
        if truss.width is None:
            return [(0.0, floor.half_depth - FRONT_TRUSS_DEPTH / 2)]
        return [(0.0, 0.0)]

    # ------------------------------------------------------------------
    # Wall-mounted kinds
    # ------------------------------------------------------------------

    def _wall_slots(
        self,
        floor: FloorPlan,
        existing: list[PlacedComponent],
        kind: ComponentKind,
        catalog_index: int,
        shape: WallShape,
    ) -> list[Slot]:
        if shape is not floor.wall_shape:
            floor = FloorPlan(
                width=floor.width,
                depth=floor.depth,
                wall_shape=shape,
                wall_height=floor.wall_height,
            )
        slots: list[Slot] = []
        for side in wall_sides(shape):
            run = run_for_side(floor, side)
            for module in run.modules:
                for tier_name, _ in catalog.HEIGHT_TIERS:
                    candidate = PlacedComponent(
                        id=CANDIDATE_ID,
                        kind=kind,
                        catalog_index=catalog_index,
                        position=WallPosition(
                            wall=side,
                            slot_index=module.index,
                            height_tier=tier_name,
                        ),
                    )
                    if self.validator.can_place(floor, existing, candidate):
                        slots.append(Slot(wall_position=candidate.wall_position))
        return slots
