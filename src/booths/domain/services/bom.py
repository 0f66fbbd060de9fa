"""Bill of materials aggregation for a booth.

Expands every placed component and every global selection (walls,
carpet, graphics, extras) into packing-list entries and merges them.
Labels are the part names used on the printed packing list, so they are
stable strings in Swedish as the warehouse knows them.

The aggregation is recomputed from scratch for each call. Counts are
additive and the result is sorted by label, so the same component set
gives the same BOM in any order.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .. import catalog
from ..catalog import CounterType
from ..entities import BoothLayout, BoothOptions, PlacedComponent
from ..value_objects import (
    BillOfMaterials,
    CarpetFamily,
    ComponentKind,
    FloorPlan,
    GraphicType,
    TrussType,
    WallShape,
)
from .frames import WallFramePlanner
from .lighting import billed_led_count
from .placement import PlacementValidator
from .rounding import round_half_up
from .surfaces import storage_face_length, wall_graphic_area
from .walls import total_wall_length

logger = logging.getLogger(__name__)

__all__ = [
    "BomAggregator",
    "counter_recipe",
    "front_truss_segments",
    "truss_recipe",
]

OPTION_LABELS: dict[str, str] = {
    "clothes_rack": "Klädhängare",
    "espresso_machine": "Espressomaskin",
    "flower_vase": "Blomma",
    "candy_bowl": "Godiskål",
    "power_outlet": "El-uttag",
}

# Longest counter front a single frame covers
MAX_FRONT_FRAME = 3.0


def _fmt(value: float) -> str:
    """Swedish decimal comma without trailing zeros: 1.5 -> "1,5"."""
    return f"{round(value, 2):g}".replace(".", ",")


def _frame_parts(frames: dict[str, int]) -> dict[str, int]:
    """Frame entries plus the matching printed graphic panel per frame."""
    parts: dict[str, int] = {}
    for size, count in frames.items():
        parts[f"Bematrix ram {size}"] = count
        parts[f"Grafik {size}"] = count
    return parts


def counter_recipe(counter: CounterType) -> dict[str, int]:
    """Parts for one counter.

    Straight counters have two 0.5x2 end frames and a front frame sized
    to the width. Fronts wider than 3 m need a 3x1 frame plus a
    remainder frame joined with connectors. L counters use a fixed,
    larger recipe; mirroring does not change the parts.

    Example:
        >>> counter_recipe(catalog.COUNTERS[2])["Bematrix ram 2x1"]
        1
    """
    if counter.is_l_shaped:
        parts = _frame_parts({"0,5x2": 4, "1x1": 1, "1,5x1": 1})
        parts.update(
            {
                "Barskiva 1,5x0,5": 1,
                "Barskiva 1x0,5": 1,
                "Lister forex": 6,
                "Corners": 4,
                "M8pin": 10,
                "Special connector": 4,
                "disk innehylla": 2,
            }
        )
        return parts

    frames: dict[str, int] = {"0,5x2": 2}
    connectors = 0
    if counter.width <= MAX_FRONT_FRAME + 1e-6:
        frames[f"{_fmt(counter.width)}x1"] = 1
    else:
        frames[f"{_fmt(MAX_FRONT_FRAME)}x1"] = 1
        extra = f"{_fmt(counter.width - MAX_FRONT_FRAME)}x1"
        frames[extra] = frames.get(extra, 0) + 1
        connectors = 2

    parts = _frame_parts(frames)
    parts.update(
        {
            f"Barskiva {_fmt(counter.width)}x0,5": 1,
            "Lister forex": 4,
            "Corners": 2,
            "M8pin": 6,
            "Special connector": 2,
            "disk innehylla": 2,
        }
    )
    if connectors:
        parts["Connectors"] = connectors
    return parts


def front_truss_segments(width: float) -> tuple[int, int]:
    """Greedy split of a width into 2 m truss plus at most one 1 m truss."""
    twos = int((width + 1e-6) // 2)
    remainder = width - twos * 2
    ones = 1 if remainder > 1e-6 else 0
    return twos, ones


def truss_recipe(truss_type: TrussType, floor_width: float) -> dict[str, int]:
    """Parts for one truss rig."""
    if truss_type is TrussType.HANGING_SQUARE:
        return {"Truss 2m": 4, "Vajer upphängning": 4, "Trusslampa": 4}
    if truss_type is TrussType.HANGING_ROUND:
        return {"Truss rund 90grader": 4, "Vajer upphängning": 4, "Trusslampa": 6}
    twos, ones = front_truss_segments(floor_width)
    return {
        "Truss 2m": twos,
        "Truss 1m": ones,
        "Vajer upphängning": 4,
        "Trusslampa": round_half_up(floor_width),
    }


class BomAggregator:
    """Aggregates the packing list for a booth."""

    def __init__(
        self,
        validator: PlacementValidator | None = None,
        frame_planner: WallFramePlanner | None = None,
    ) -> None:
        self.validator = validator or PlacementValidator()
        self.frame_planner = frame_planner or WallFramePlanner(self.validator)

    def aggregate_layout(self, layout: BoothLayout) -> BillOfMaterials:
        """Aggregate the BOM for a booth layout."""
        return self.aggregate(
            layout.floor,
            layout.components,
            carpet_index=layout.carpet_index,
            wall_graphic=layout.wall_graphic,
            storage_graphic=layout.storage_graphic,
            options=layout.options,
        )

    def aggregate(
        self,
        floor: FloorPlan,
        components: Iterable[PlacedComponent],
        carpet_index: int = 0,
        wall_graphic: GraphicType = GraphicType.NONE,
        storage_graphic: GraphicType = GraphicType.NONE,
        options: BoothOptions | None = None,
    ) -> BillOfMaterials:
        """Aggregate the BOM from a floor, components and selections.

        Args:
            floor: Floor plan with wall shape and height.
            components: Placed components, in any order.
            carpet_index: Index into catalog.CARPETS.
            wall_graphic: Graphic option for the walls.
            storage_graphic: Graphic option for storage units.
            options: Extras toggles.

        Returns:
            BillOfMaterials sorted by label.
        """
        components = list(components)
        options = options or BoothOptions()
        bom = BillOfMaterials()

        for component in components:
            bom.merge(self._component_parts(floor, component))

        for field_name, label in OPTION_LABELS.items():
            if getattr(options, field_name):
                bom.add(label, 1)

        bom.add("SAM-led", billed_led_count(floor, options.lights))

        if floor.wall_shape is not WallShape.NONE:
            bom.merge(self.frame_planner.plan(floor, components).totals)

        self._describe_carpet(bom, floor, carpet_index)
        self._describe_wall_graphics(bom, floor, wall_graphic)
        self._describe_storage_graphics(bom, floor, components, storage_graphic)

        logger.debug(
            f"Aggregated {len(components)} components into {len(bom)} BOM lines"
        )
        return bom

    def _component_parts(
        self, floor: FloorPlan, component: PlacedComponent
    ) -> dict[str, int]:
        kind = component.kind
        index = component.catalog_index
        if kind is ComponentKind.COUNTER:
            return counter_recipe(catalog.lookup(catalog.COUNTERS, index, "counter"))
        if kind is ComponentKind.STORAGE:
            storage = catalog.lookup(catalog.STORAGE_TYPES, index, "storage")
            return {f"Förråd {storage.label}": 1}
        if kind is ComponentKind.TV:
            return {catalog.lookup(catalog.TV_SIZES, index, "tv").bom_label: 1}
        if kind is ComponentKind.PLANT:
            return {catalog.lookup(catalog.PLANT_TYPES, index, "plant").label: 1}
        if kind is ComponentKind.FURNITURE:
            item = catalog.lookup(catalog.FURNITURE_TYPES, index, "furniture")
            return {item.label: 1}
        if kind is ComponentKind.SHELF:
            return {"Hyllplan": 1, "Hyllbracket": 2}
        if kind is ComponentKind.SPEAKER:
            return {"Högtalare": 1, "Högtalarstativ": 1}
        if kind is ComponentKind.TRUSS:
            truss = catalog.lookup(catalog.TRUSS_TYPES, index, "truss")
            return truss_recipe(truss.truss_type, floor.width)
        raise ValueError(f"Unhandled component kind: {kind}")

    def _describe_carpet(
        self, bom: BillOfMaterials, floor: FloorPlan, carpet_index: int
    ) -> None:
        carpet = catalog.lookup(catalog.CARPETS, carpet_index, "carpet")
        if carpet.family is CarpetFamily.NONE:
            return
        bom.describe(
            "Matta",
            f"{_fmt(floor.width)}×{_fmt(floor.depth)} {carpet.label} matta",
        )

    def _describe_wall_graphics(
        self, bom: BillOfMaterials, floor: FloorPlan, graphic: GraphicType
    ) -> None:
        if graphic is GraphicType.NONE or floor.wall_shape is WallShape.NONE:
            return
        if graphic is GraphicType.HYR:
            bom.describe("Hyrgrafik", f"{_fmt(wall_graphic_area(floor))} m² hyrgrafik")
        elif graphic is GraphicType.VEPA:
            bom.describe("Vepa", f"{_fmt(wall_graphic_area(floor))} m² vepa")
        elif graphic is GraphicType.FOREX:
            bom.describe(
                "Forex",
                f"{_fmt(total_wall_length(floor))} lm forex "
                f"({_fmt(floor.wall_height)} m)",
            )

    def _describe_storage_graphics(
        self,
        bom: BillOfMaterials,
        floor: FloorPlan,
        components: list[PlacedComponent],
        graphic: GraphicType,
    ) -> None:
        if graphic is GraphicType.NONE:
            return
        length = storage_face_length(floor, components, self.validator)
        if length <= 0:
            return
        if graphic is GraphicType.FOREX:
            text = f"{_fmt(length)} lm forex ({_fmt(floor.wall_height)} m)"
        else:
            area = length * floor.wall_height
            text = f"{_fmt(area)} m² {graphic.value}"
        bom.describe("Förrådsgrafik", text)
