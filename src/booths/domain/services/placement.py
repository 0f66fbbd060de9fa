"""Placement validation: floor containment and component collision.

This module computes component footprints and decides whether a
candidate placement fits inside the floor and keeps clear of the
components already placed, using per kind-pair clearance margins.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .. import catalog
from ..entities import PlacedComponent
from ..value_objects import (
    EPSILON,
    ComponentKind,
    CompositeFootprint,
    FloorPlan,
    Footprint,
    Rect,
    WallShape,
)
from .tv_placement import tvs_overlap
from .walls import run_for_side, wall_sides

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_COLLISION_MARGINS",
    "PlacementValidator",
    "pair_key",
    "quarter_turns",
]


def pair_key(a: ComponentKind, b: ComponentKind) -> frozenset[ComponentKind]:
    """Unordered key for a pair of component kinds."""
    return frozenset((a, b))


# Clearance margins between kinds that collide on the floor, in meters.
# Pairs that are absent do not collide: plants and furniture may stand
# next to or over each other, only counters and storage units push them
# away. Wall-mounted kinds are checked by slot, not here.
DEFAULT_COLLISION_MARGINS: dict[frozenset[ComponentKind], float] = {
    pair_key(ComponentKind.COUNTER, ComponentKind.COUNTER): 0.0,
    pair_key(ComponentKind.COUNTER, ComponentKind.STORAGE): 0.0,
    pair_key(ComponentKind.STORAGE, ComponentKind.STORAGE): 0.0,
    pair_key(ComponentKind.PLANT, ComponentKind.COUNTER): 0.2,
    pair_key(ComponentKind.PLANT, ComponentKind.STORAGE): 0.3,
    pair_key(ComponentKind.FURNITURE, ComponentKind.COUNTER): 0.1,
    pair_key(ComponentKind.FURNITURE, ComponentKind.STORAGE): 0.2,
    pair_key(ComponentKind.SPEAKER, ComponentKind.COUNTER): 0.1,
    pair_key(ComponentKind.SPEAKER, ComponentKind.STORAGE): 0.1,
    pair_key(ComponentKind.SPEAKER, ComponentKind.SPEAKER): 0.5,
    pair_key(ComponentKind.TRUSS, ComponentKind.TRUSS): 0.0,
}

# Depth of the front-straight truss beam footprint
FRONT_TRUSS_DEPTH = 0.3


def quarter_turns(rotation: float) -> int | None:
    """Number of 90 degree turns, or None for other angles."""
    turns = (rotation % 360) / 90
    nearest = round(turns)
    if abs(turns - nearest) > EPSILON:
        return None
    return nearest % 4


def _rotate_rect(rect: Rect, turns: int) -> Rect:
    """Rotate a rectangle about the origin by quarter turns."""
    corners = [
        (rect.min_x, rect.min_z),
        (rect.max_x, rect.max_z),
    ]
    for _ in range(turns % 4):
        # 90 degrees about the vertical axis: (x, z) -> (z, -x)
        corners = [(z, -x) for x, z in corners]
    xs = [c[0] for c in corners]
    zs = [c[1] for c in corners]
    return Rect(min_x=min(xs), max_x=max(xs), min_z=min(zs), max_z=max(zs))


def _l_counter_parts(mirrored: bool, long_leg: float, short_leg: float, depth: float) -> tuple[Rect, Rect]:
    """Local rectangles of an L counter, origin at the long leg center.

    The long leg runs along X; the short leg extends towards the front
    from the right end, or from the left end when mirrored. The short
    leg's length is measured from the back edge of the long leg.
    """
    long_rect = Rect.centered(0.0, 0.0, long_leg, depth)
    if mirrored:
        min_x, max_x = -long_leg / 2, -long_leg / 2 + depth
    else:
        min_x, max_x = long_leg / 2 - depth, long_leg / 2
    short_rect = Rect(
        min_x=min_x,
        max_x=max_x,
        min_z=depth / 2,
        max_z=-depth / 2 + short_leg,
    )
    return long_rect, short_rect


class PlacementValidator:
    """Decides whether a component may be placed on the booth floor.

    Attributes:
        margins: Clearance margin per unordered kind pair.
        tolerance: Floating-point tolerance for floor containment.
    """

    def __init__(
        self,
        margins: Mapping[frozenset[ComponentKind], float] | None = None,
        tolerance: float = EPSILON,
    ) -> None:
        self.margins = dict(DEFAULT_COLLISION_MARGINS if margins is None else margins)
        self.tolerance = tolerance

    # ------------------------------------------------------------------
    # Footprints
    # ------------------------------------------------------------------

    def base_size(
        self, kind: ComponentKind, catalog_index: int, floor: FloorPlan
    ) -> tuple[float, float]:
        """Unrotated (width, depth) of a floor-standing component."""
        if kind is ComponentKind.COUNTER:
            counter = catalog.lookup(catalog.COUNTERS, catalog_index, "counter")
            return counter.width, counter.depth
        if kind is ComponentKind.STORAGE:
            storage = catalog.lookup(catalog.STORAGE_TYPES, catalog_index, "storage")
            return storage.width, storage.depth
        if kind is ComponentKind.PLANT:
            plant = catalog.lookup(catalog.PLANT_TYPES, catalog_index, "plant")
            return plant.width, plant.depth
        if kind is ComponentKind.FURNITURE:
            item = catalog.lookup(catalog.FURNITURE_TYPES, catalog_index, "furniture")
            return item.width, item.depth
        if kind is ComponentKind.SPEAKER:
            return 0.0, 0.0
        if kind is ComponentKind.TRUSS:
            truss = catalog.lookup(catalog.TRUSS_TYPES, catalog_index, "truss")
            if truss.width is None:
                return floor.width, FRONT_TRUSS_DEPTH
            return truss.width, truss.depth
        raise ValueError(f"{kind.value} components are wall mounted")

    def footprint(
        self,
        kind: ComponentKind,
        catalog_index: int,
        x: float,
        z: float,
        rotation: float,
        floor: FloorPlan,
    ) -> Footprint:
        """Footprint of a floor-standing component at a position.

        Rotations that are not multiples of 90 degrees fall back to the
        unrotated box.
        """
        turns = quarter_turns(rotation) or 0

        if kind is ComponentKind.COUNTER:
            counter = catalog.lookup(catalog.COUNTERS, catalog_index, "counter")
            if counter.is_l_shaped:
                parts = _l_counter_parts(
                    mirrored=counter.shape == "l-mirrored",
                    long_leg=counter.width,
                    short_leg=catalog.L_COUNTER_SHORT_LEG,
                    depth=counter.depth,
                )
                return CompositeFootprint(
                    tuple(_rotate_rect(p, turns).translated(x, z) for p in parts)
                )

        width, depth = self.base_size(kind, catalog_index, floor)
        if turns % 2 == 1:
            width, depth = depth, width
        return Rect.centered(x, z, width, depth)

    def footprint_for(self, component: PlacedComponent, floor: FloorPlan) -> Footprint:
        position = component.floor_position
        return self.footprint(
            component.kind,
            component.catalog_index,
            position.x,
            position.z,
            component.rotation,
            floor,
        )

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def is_inside(self, floor: FloorPlan, footprint: Footprint) -> bool:
        """Every part of the footprint lies within the floor rectangle."""
        return all(floor.contains(part, self.tolerance) for part in footprint.parts)

    def margin_between(self, a: ComponentKind, b: ComponentKind) -> float | None:
        """Clearance margin for a kind pair, None if they never collide."""
        return self.margins.get(pair_key(a, b))

    def collisions(
        self,
        floor: FloorPlan,
        existing: Iterable[PlacedComponent],
        candidate: PlacedComponent,
    ) -> list[PlacedComponent]:
        """Existing components whose clearance zone the candidate enters."""
        box = self.footprint_for(candidate, floor).collision_box
        hits: list[PlacedComponent] = []
        for other in existing:
            if other.id == candidate.id or other.kind.is_wall_mounted:
                continue
            margin = self.margin_between(candidate.kind, other.kind)
            if margin is None:
                continue
            other_box = self.footprint_for(other, floor).collision_box
            if box.expanded(margin).overlaps(other_box):
                hits.append(other)
        return hits

    def can_place(
        self,
        floor: FloorPlan,
        existing: Iterable[PlacedComponent],
        candidate: PlacedComponent,
    ) -> bool:
        """Check containment and collision for a candidate placement.

        Args:
            floor: Booth floor plan.
            existing: Components already in the booth. A component with the
                candidate's id is ignored, so re-validating a moved or
                rotated component works.
            candidate: Proposed placement.

        Returns:
            True if the candidate fits. Failing placements are expected
            and frequent, so this never raises for them.
        """
        existing = list(existing)
        if candidate.kind.is_wall_mounted:
            return self._can_mount(floor, existing, candidate)

        footprint = self.footprint_for(candidate, floor)
        if not self.is_inside(floor, footprint):
            logger.debug(f"{candidate.id} rejected: footprint leaves the floor")
            return False

        hits = self.collisions(floor, existing, candidate)
        if hits:
            logger.debug(
                f"{candidate.id} rejected: collides with "
                f"{', '.join(h.id for h in hits)}"
            )
            return False
        return True

    def _can_mount(
        self,
        floor: FloorPlan,
        existing: list[PlacedComponent],
        candidate: PlacedComponent,
    ) -> bool:
        """Slot-based validation for TVs and shelves."""
        position = candidate.wall_position
        if floor.wall_shape is WallShape.NONE or position.wall not in wall_sides(
            floor.wall_shape
        ):
            return False
        run = run_for_side(floor, position.wall)
        if position.slot_index >= run.slot_count:
            return False
        catalog.height_tier(position.height_tier)
        if candidate.kind is ComponentKind.TV:
            catalog.lookup(catalog.TV_SIZES, candidate.catalog_index, "tv")
        if candidate.kind is ComponentKind.SHELF:
            module = run.modules[position.slot_index]
            if module.length + self.tolerance < catalog.SHELF.width:
                return False

        for other in existing:
            if other.id == candidate.id or not other.kind.is_wall_mounted:
                continue
            if other.wall_position == position:
                logger.debug(f"{candidate.id} rejected: slot taken by {other.id}")
                return False
            if (
                candidate.kind is ComponentKind.TV
                and other.kind is ComponentKind.TV
                and tvs_overlap(run, candidate, other)
            ):
                logger.debug(f"{candidate.id} rejected: overlaps {other.id}")
                return False
        return True
