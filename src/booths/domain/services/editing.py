"""Validated mutations of a caller-owned booth layout.

Every mutation is checked against the floor and the other components
before it is applied. A rejected placement, move or rotation leaves the
layout unchanged and reports the outcome as None or False; rejections
are expected and frequent, so they are not exceptions.
"""

from __future__ import annotations

import logging

from .. import catalog
from ..entities import BoothLayout, PlacedComponent
from ..value_objects import (
    ComponentKind,
    FloorPosition,
    Orientation,
    WallPosition,
    WallSide,
)
from .placement import PlacementValidator
from .tv_placement import TvRepositioner
from .walls import run_for_side, wall_sides

logger = logging.getLogger(__name__)

__all__ = ["LayoutEditor"]


class LayoutEditor:
    """Places, moves, rotates and removes components on a BoothLayout.

    The editor holds no booth state of its own; the same editor can
    serve any number of layouts.

    Attributes:
        validator: Placement validator used for every mutation.
        tv_repositioner: Corrects TV slots and height tiers.
    """

    def __init__(
        self,
        validator: PlacementValidator | None = None,
        tv_repositioner: TvRepositioner | None = None,
    ) -> None:
        self.validator = validator or PlacementValidator()
        self.tv_repositioner = tv_repositioner or TvRepositioner()

    def place(
        self,
        layout: BoothLayout,
        kind: ComponentKind,
        catalog_index: int,
        position: FloorPosition | WallPosition,
        rotation: float = 0.0,
    ) -> PlacedComponent | None:
        """Place a new component if it fits.

        TVs are routed through the TV repositioner; use place_tv() to
        control orientation.

        Returns:
            The placed component, or None when the placement is rejected.

        Raises:
            UnknownCatalogIndexError: If catalog_index is out of range.
        """
        if kind is ComponentKind.TV:
            if not isinstance(position, WallPosition):
                raise ValueError("tv components need a WallPosition")
            return self.place_tv(
                layout, catalog_index, position.wall, position.slot_index,
                position.height_tier,
            )

        candidate = PlacedComponent(
            id=layout.next_id(kind),
            kind=kind,
            catalog_index=catalog_index,
            position=position,
            rotation=rotation % 360,
        )
        if not self.validator.can_place(layout.floor, layout.components, candidate):
            return None
        layout.add(candidate)
        logger.debug(f"Placed {candidate.id} at {position}")
        return candidate

    def place_tv(
        self,
        layout: BoothLayout,
        catalog_index: int,
        wall: WallSide,
        slot_index: int,
        height_tier: str = "mid",
        orientation: Orientation = Orientation.LANDSCAPE,
    ) -> PlacedComponent | None:
        """Hang a TV, moving it to the nearest slot and tier where it fits."""
        tv = catalog.lookup(catalog.TV_SIZES, catalog_index, "tv")
        if wall not in wall_sides(layout.floor.wall_shape):
            return None
        run = run_for_side(layout.floor, wall)
        if not 0 <= slot_index < run.slot_count:
            return None

        existing = [
            c for c in layout.of_kind(ComponentKind.TV) if c.wall_position.wall is wall
        ]
        placement = self.tv_repositioner.place(
            run, existing, slot_index, height_tier, tv, orientation
        )
        candidate = PlacedComponent(
            id=layout.next_id(ComponentKind.TV),
            kind=ComponentKind.TV,
            catalog_index=catalog_index,
            position=WallPosition(
                wall=wall,
                slot_index=placement.slot_index,
                height_tier=placement.height_tier,
            ),
            orientation=orientation,
        )
        if not self.validator.can_place(layout.floor, layout.components, candidate):
            return None
        layout.add(candidate)
        return candidate

    def toggle_tv_orientation(
        self, layout: BoothLayout, component_id: str
    ) -> PlacedComponent | None:
        """Switch a TV between landscape and portrait and re-correct it."""
        tv_component = layout.get(component_id)
        if tv_component is None or tv_component.kind is not ComponentKind.TV:
            return None
        tv = catalog.lookup(catalog.TV_SIZES, tv_component.catalog_index, "tv")
        position = tv_component.wall_position
        run = run_for_side(layout.floor, position.wall)
        others = [
            c
            for c in layout.of_kind(ComponentKind.TV)
            if c.id != component_id and c.wall_position.wall is position.wall
        ]
        orientation, placement = self.tv_repositioner.toggle_orientation(
            run,
            others,
            position.slot_index,
            position.height_tier,
            tv,
            tv_component.orientation,
        )
        updated = tv_component.with_orientation(orientation).with_position(
            WallPosition(
                wall=position.wall,
                slot_index=placement.slot_index,
                height_tier=placement.height_tier,
            )
        )
        if not self.validator.can_place(layout.floor, layout.components, updated):
            return None
        layout.replace(updated)
        return updated

    def rotate(self, layout: BoothLayout, component_id: str, rotation: float) -> bool:
        """Rotate a floor component to an absolute angle.

        A rotation that would leave the floor or collide is rejected and
        the component keeps its current rotation.
        """
        component = layout.get(component_id)
        if component is None or component.kind.is_wall_mounted:
            return False
        updated = component.with_rotation(rotation)
        if not self.validator.can_place(layout.floor, layout.components, updated):
            logger.debug(f"Rotation of {component_id} to {rotation} rejected")
            return False
        layout.replace(updated)
        return True

    def move(
        self,
        layout: BoothLayout,
        component_id: str,
        position: FloorPosition | WallPosition,
    ) -> bool:
        """Move a component; rejected moves leave it where it was."""
        component = layout.get(component_id)
        if component is None:
            return False
        try:
            updated = component.with_position(position)
        except ValueError:
            return False
        if not self.validator.can_place(layout.floor, layout.components, updated):
            return False
        layout.replace(updated)
        return True

    def remove(self, layout: BoothLayout, component_id: str) -> bool:
        return layout.remove(component_id)
