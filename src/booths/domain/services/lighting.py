"""SAM-led wall lighting: billed count and rendered fixtures.

Two figures are derived from the same walls and intentionally differ:

- the billed count is the total wall run length rounded to whole meters
  and goes on the packing list and quote;
- the rendered fixtures are one per wall module, minus any fixture that
  would sit too close to a storage unit, and go to the 3D scene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..entities import PlacedComponent
from ..value_objects import ComponentKind, FloorPlan, WallSide
from .placement import PlacementValidator
from .rounding import round_half_up
from .walls import total_wall_length, wall_runs

__all__ = [
    "LIGHT_STORAGE_MARGIN",
    "LightFixture",
    "billed_led_count",
    "rendered_fixtures",
]

# Fixtures closer than this to a storage footprint are not mounted
LIGHT_STORAGE_MARGIN = 0.3


@dataclass(frozen=True)
class LightFixture:
    """A rendered light fixture on top of a wall module."""

    wall: WallSide
    module_index: int
    x: float
    z: float


def billed_led_count(floor: FloorPlan, lights_on: bool) -> int:
    """SAM-led fixtures to bill: run length in whole meters, 0 if off."""
    if not lights_on:
        return 0
    return round_half_up(total_wall_length(floor))


def _fixture_point(floor: FloorPlan, side: WallSide, along: float) -> tuple[float, float]:
    if side is WallSide.BACK:
        return along, -floor.half_depth
    if side is WallSide.LEFT:
        return -floor.half_width, along
    return floor.half_width, along


def rendered_fixtures(
    floor: FloorPlan,
    components: Iterable[PlacedComponent],
    validator: PlacementValidator | None = None,
    margin: float = LIGHT_STORAGE_MARGIN,
) -> list[LightFixture]:
    """Fixtures to render: one per module center, suppressed near storage."""
    validator = validator or PlacementValidator()
    storage_boxes = [
        validator.footprint_for(c, floor).collision_box
        for c in components
        if c.kind is ComponentKind.STORAGE
    ]
    fixtures: list[LightFixture] = []
    for run in wall_runs(floor):
        for module, along in zip(run.modules, run.slot_centers()):
            x, z = _fixture_point(floor, run.side, along)
            if any(box.distance_to(x, z) < margin for box in storage_boxes):
                continue
            fixtures.append(
                LightFixture(wall=run.side, module_index=module.index, x=x, z=z)
            )
    return fixtures
