"""Smart TV repositioning on wall runs.

When a TV is dropped on a wall slot, or rotated between landscape and
portrait, its footprint may stick out past the end of the wall or up
into the ceiling margin. The repositioner moves it to the nearest slot
and height tier where it fits, or to the least-bad slot when nothing
fits exactly.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .. import catalog
from ..catalog import TvSize
from ..entities import PlacedComponent
from ..value_objects import EPSILON, Orientation, TvPlacement, WallRun

logger = logging.getLogger(__name__)

__all__ = ["TOP_MARGIN", "TvRepositioner", "place_tv", "tv_dimensions", "tvs_overlap"]

# Minimum gap between a TV's top edge and the top of the wall
TOP_MARGIN = 0.1


def tv_dimensions(tv: TvSize, orientation: Orientation) -> tuple[float, float]:
    """(width, height) of a TV for an orientation."""
    if orientation is Orientation.PORTRAIT:
        return tv.height, tv.width
    return tv.width, tv.height


# (center x, center y, width, height) of a TV on the wall face
TvBox = tuple[float, float, float, float]


def _tv_box(
    run: WallRun, slot_index: int, height_tier: str, width: float, height: float
) -> TvBox:
    return run.slot_center(slot_index), catalog.height_tier(height_tier), width, height


def _component_box(run: WallRun, component: PlacedComponent) -> TvBox:
    tv = catalog.lookup(catalog.TV_SIZES, component.catalog_index, "tv")
    width, height = tv_dimensions(tv, component.orientation)
    position = component.wall_position
    return _tv_box(run, position.slot_index, position.height_tier, width, height)


def _boxes_overlap(first: TvBox, second: TvBox) -> bool:
    x1, y1, w1, h1 = first
    x2, y2, w2, h2 = second
    return (
        abs(x1 - x2) < (w1 + w2) / 2 - EPSILON
        and abs(y1 - y2) < (h1 + h2) / 2 - EPSILON
    )


def tvs_overlap(run: WallRun, first: PlacedComponent, second: PlacedComponent) -> bool:
    """Whether two TVs hanging on the same run overlap on the wall face."""
    if first.wall_position.wall != second.wall_position.wall:
        return False
    return _boxes_overlap(_component_box(run, first), _component_box(run, second))


class TvRepositioner:
    """Corrects TV placements against wall bounds and height.

    The repositioner is stateless; identical arguments always give the
    same placement.

    Attributes:
        top_margin: Required clearance below the top of the wall.
    """

    def __init__(self, top_margin: float = TOP_MARGIN) -> None:
        self.top_margin = top_margin

    def place(
        self,
        run: WallRun,
        existing_tvs: Iterable[PlacedComponent],
        chosen_slot_index: int,
        height_tier: str,
        tv: TvSize,
        orientation: Orientation = Orientation.LANDSCAPE,
    ) -> TvPlacement:
        """Find the final slot and height tier for a TV.

        Args:
            run: Wall run the TV hangs on.
            existing_tvs: Other TVs already on this wall. Slots whose span
                overlaps one of them are skipped, the chosen slot included.
            chosen_slot_index: Slot the user picked.
            height_tier: Tier the user picked.
            tv: TV catalog row.
            orientation: Landscape or portrait.

        Returns:
            TvPlacement with the corrected slot, tier and remaining overhang.
        """
        width, height = tv_dimensions(tv, orientation)
        tier = self._vertical_tier(run.height, height, height_tier)

        blocked = self._blocked_slots(run, list(existing_tvs), width, height, tier)
        chosen_overhang = self._overhang(run, chosen_slot_index, width)
        if chosen_overhang <= EPSILON and chosen_slot_index not in blocked:
            return TvPlacement(slot_index=chosen_slot_index, height_tier=tier)

        candidates = [i for i in range(run.slot_count) if i not in blocked]
        if not candidates:
            candidates = list(range(run.slot_count))

        by_distance = sorted(
            candidates, key=lambda i: (abs(i - chosen_slot_index), i)
        )
        for index in by_distance:
            if self._overhang(run, index, width) <= EPSILON:
                logger.debug(
                    f"TV {tv.label} moved from slot {chosen_slot_index} to {index} "
                    f"on {run.side.value} wall"
                )
                return TvPlacement(slot_index=index, height_tier=tier)

        best = min(
            by_distance,
            key=lambda i: (self._overhang(run, i, width), abs(i - chosen_slot_index), i),
        )
        overhang = self._overhang(run, best, width)
        logger.debug(
            f"TV {tv.label} does not fit {run.side.value} wall; "
            f"slot {best} overhangs {overhang:.2f} m"
        )
        return TvPlacement(slot_index=best, height_tier=tier, overhang=overhang)

    def toggle_orientation(
        self,
        run: WallRun,
        existing_tvs: Iterable[PlacedComponent],
        slot_index: int,
        height_tier: str,
        tv: TvSize,
        orientation: Orientation,
    ) -> tuple[Orientation, TvPlacement]:
        """Switch landscape/portrait and re-run both corrections."""
        new_orientation = orientation.toggled()
        placement = self.place(
            run, existing_tvs, slot_index, height_tier, tv, new_orientation
        )
        return new_orientation, placement

    def _vertical_tier(self, wall_height: float, tv_height: float, tier: str) -> str:
        """Step down the height tiers until the top edge clears the margin."""
        catalog.height_tier(tier)
        names = [name for name, _ in catalog.HEIGHT_TIERS]
        start = names.index(tier)
        limit = wall_height - self.top_margin
        for name, y in catalog.HEIGHT_TIERS[start:]:
            if y + tv_height / 2 <= limit + EPSILON:
                return name
        return names[-1]

    def _overhang(self, run: WallRun, slot_index: int, width: float) -> float:
        center = run.slot_center(slot_index)
        left_deficit = -run.half_length - (center - width / 2)
        right_deficit = (center + width / 2) - run.half_length
        return max(0.0, left_deficit) + max(0.0, right_deficit)

    def _blocked_slots(
        self,
        run: WallRun,
        existing_tvs: list[PlacedComponent],
        width: float,
        height: float,
        tier: str,
    ) -> set[int]:
        """Slots where the TV would overlap another TV on the wall."""
        blocked: set[int] = set()
        for other in existing_tvs:
            position = other.wall_position
            if position.wall != run.side or position.slot_index >= run.slot_count:
                continue
            other_box = _component_box(run, other)
            for index in range(run.slot_count):
                box = _tv_box(run, index, tier, width, height)
                if _boxes_overlap(box, other_box):
                    blocked.add(index)
        return blocked


def place_tv(
    run: WallRun,
    existing_tvs: Iterable[PlacedComponent],
    chosen_slot_index: int,
    height_tier: str,
    tv: TvSize,
    orientation: Orientation = Orientation.LANDSCAPE,
) -> TvPlacement:
    """Module-level shortcut for TvRepositioner().place()."""
    return TvRepositioner().place(
        run, existing_tvs, chosen_slot_index, height_tier, tv, orientation
    )
