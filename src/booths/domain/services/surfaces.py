"""Printable surface measurements for wall and storage graphics."""

from __future__ import annotations

from typing import Iterable

from ..entities import PlacedComponent
from ..value_objects import ComponentKind, FloorPlan
from .placement import PlacementValidator
from .walls import total_wall_length

__all__ = ["storage_face_length", "wall_graphic_area"]


def wall_graphic_area(floor: FloorPlan) -> float:
    """Printable wall area in m²: total run length times wall height."""
    return total_wall_length(floor) * floor.wall_height


def storage_face_length(
    floor: FloorPlan,
    components: Iterable[PlacedComponent],
    validator: PlacementValidator | None = None,
) -> float:
    """Linear meters of visible storage faces (front plus both sides)."""
    validator = validator or PlacementValidator()
    total = 0.0
    for component in components:
        if component.kind is not ComponentKind.STORAGE:
            continue
        box = validator.footprint_for(component, floor).collision_box
        total += box.width + 2 * box.depth
    return total
