"""Quote calculation: material cost, labor, fees and markup.

The quote is the sum of two independent sub-models. Material cost prices
walls, carpet, graphics, every placed component and the extras from
fixed schedules. Labor picks crew size and base hours from an area tier
table, adds time for TVs and truss, and derives teardown from build time.
All amounts are whole SEK.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .. import catalog
from ..catalog import CounterType
from ..entities import BoothLayout, BoothOptions, PlacedComponent
from ..value_objects import (
    ComponentKind,
    FloorPlan,
    GraphicType,
    LaborEstimate,
    PriceBreakdown,
    TrussType,
    WallShape,
)
from .rounding import ceil_to_step, round_half_up
from .lighting import billed_led_count
from .surfaces import storage_face_length, wall_graphic_area
from .placement import PlacementValidator
from .walls import total_wall_length

logger = logging.getLogger(__name__)

__all__ = [
    "ADMIN_FEE_LARGE",
    "ADMIN_FEE_SMALL",
    "HOURLY_RATE",
    "LABOR_TIERS",
    "LaborTier",
    "MARKUP_RATE",
    "PriceCalculator",
    "admin_fee",
    "consumables_fee",
    "counter_price",
    "labor_tier",
    "labor_tier_area",
]

# Billing step for wall and storage meters
WALL_BILLING_STEP = 0.5

COUNTER_BASE_PRICE = 3500
COUNTER_STEP_PRICE = 760
COUNTER_STEP = 0.5
L_COUNTER_PRICE = 8500

HOURLY_RATE = 750
HOURS_PER_TV = 1
TRUSS_HOURS = 6
DEMOLITION_FACTOR = 0.75

ADMIN_FEE_SMALL = 5000
ADMIN_FEE_LARGE = 10000
ADMIN_FEE_THRESHOLD = 25.0

MARKUP_RATE = 0.15


@dataclass(frozen=True)
class LaborTier:
    """Crew size and base build hours up to a floor area."""

    max_area: float
    crew: int
    hours: int


LABOR_TIERS: tuple[LaborTier, ...] = (
    LaborTier(9, crew=2, hours=4),
    LaborTier(12, crew=2, hours=6),
    LaborTier(16, crew=2, hours=8),
    LaborTier(25, crew=2, hours=10),
    LaborTier(36, crew=2, hours=12),
    LaborTier(49, crew=3, hours=9),
    LaborTier(64, crew=3, hours=12),
    LaborTier(float("inf"), crew=3, hours=15),
)

# (max area, fee), checked in order
CONSUMABLES_TIERS: tuple[tuple[float, int], ...] = (
    (25, 750),
    (64, 1350),
    (float("inf"), 2000),
)


def _is_catalog_size(floor: FloorPlan) -> bool:
    for size in catalog.FLOOR_SIZES:
        same = abs(size.width - floor.width) < 1e-6 and abs(size.depth - floor.depth) < 1e-6
        swapped = abs(size.width - floor.depth) < 1e-6 and abs(size.depth - floor.width) < 1e-6
        if same or swapped:
            return True
    return False


def labor_tier_area(floor: FloorPlan) -> float:
    """Floor area used for the labor tier.

    Catalog sizes use their own area. A custom size maps to the smallest
    catalog size whose area is at least the custom area; beyond the
    largest catalog size the custom area is used as is.
    """
    if _is_catalog_size(floor):
        return floor.area
    candidates = [s.area for s in catalog.FLOOR_SIZES if s.area >= floor.area - 1e-6]
    if not candidates:
        return floor.area
    return min(candidates)


def labor_tier(area: float) -> LaborTier:
    for tier in LABOR_TIERS:
        if area <= tier.max_area + 1e-6:
            return tier
    return LABOR_TIERS[-1]


def admin_fee(area: float) -> int:
    """Sketch (admin) fee, a step function of floor area."""
    return ADMIN_FEE_SMALL if area <= ADMIN_FEE_THRESHOLD + 1e-6 else ADMIN_FEE_LARGE


def consumables_fee(area: float) -> int:
    for max_area, fee in CONSUMABLES_TIERS:
        if area <= max_area + 1e-6:
            return fee
    return CONSUMABLES_TIERS[-1][1]


def counter_price(counter: CounterType) -> int:
    """Base price plus a surcharge per half meter above one meter.

    Example:
        >>> counter_price(catalog.COUNTERS[2])  # 2m disk
        5020
    """
    if counter.is_l_shaped:
        return L_COUNTER_PRICE
    steps = max(0, round((counter.width - 1.0) / COUNTER_STEP))
    return COUNTER_BASE_PRICE + steps * COUNTER_STEP_PRICE


class PriceCalculator:
    """Computes a PriceBreakdown for a booth.

    Example:
        >>> calculator = PriceCalculator()
        >>> quote = calculator.calculate_layout(layout)
        >>> quote.total
    """

    def __init__(
        self,
        validator: PlacementValidator | None = None,
        hourly_rate: int = HOURLY_RATE,
        markup_rate: float = MARKUP_RATE,
    ) -> None:
        self.validator = validator or PlacementValidator()
        self.hourly_rate = hourly_rate
        self.markup_rate = markup_rate

    def calculate_layout(self, layout: BoothLayout) -> PriceBreakdown:
        """Price a booth layout."""
        return self.calculate(
            layout.floor,
            layout.components,
            carpet_index=layout.carpet_index,
            wall_graphic=layout.wall_graphic,
            storage_graphic=layout.storage_graphic,
            options=layout.options,
        )

    def calculate(
        self,
        floor: FloorPlan,
        components: Iterable[PlacedComponent],
        carpet_index: int = 0,
        wall_graphic: GraphicType = GraphicType.NONE,
        storage_graphic: GraphicType = GraphicType.NONE,
        options: BoothOptions | None = None,
    ) -> PriceBreakdown:
        """Price a booth from a floor, components and selections.

        Args:
            floor: Floor plan with wall shape and height.
            components: Placed components.
            carpet_index: Index into catalog.CARPETS.
            wall_graphic: Graphic option for the walls.
            storage_graphic: Graphic option for storage units.
            options: Extras toggles.

        Returns:
            PriceBreakdown with itemised material lines and labor.
        """
        components = list(components)
        options = options or BoothOptions()

        lines = self.material_lines(
            floor, components, carpet_index, wall_graphic, storage_graphic, options
        )
        material_cost = sum(lines.values())

        labor = self.labor(floor, components)
        build_cost = labor.crew * labor.build_hours * self.hourly_rate
        demolition_cost = labor.crew * labor.demolition_hours * self.hourly_rate
        consumables = consumables_fee(floor.area)
        admin = admin_fee(floor.area)

        subtotal = material_cost + build_cost + demolition_cost + consumables + admin
        markup = round_half_up(subtotal * self.markup_rate)

        logger.debug(
            f"Quote: material={material_cost} build={build_cost} "
            f"demolition={demolition_cost} subtotal={subtotal} markup={markup}"
        )
        return PriceBreakdown(
            material_cost=material_cost,
            build_cost=build_cost,
            demolition_cost=demolition_cost,
            consumables=consumables,
            admin_fee=admin,
            subtotal=subtotal,
            markup=markup,
            total=subtotal + markup,
            labor=labor,
            material_lines=lines,
        )

    def labor(
        self, floor: FloorPlan, components: Iterable[PlacedComponent]
    ) -> LaborEstimate:
        """Crew and hours from the area tier plus TV and truss additions."""
        components = list(components)
        area = labor_tier_area(floor)
        tier = labor_tier(area)
        tv_count = sum(1 for c in components if c.kind is ComponentKind.TV)
        has_truss = any(c.kind is ComponentKind.TRUSS for c in components)

        build_hours = tier.hours + tv_count * HOURS_PER_TV
        if has_truss:
            build_hours += TRUSS_HOURS
        demolition_hours = round_half_up(build_hours * DEMOLITION_FACTOR)
        return LaborEstimate(
            crew=tier.crew,
            build_hours=build_hours,
            demolition_hours=demolition_hours,
            tier_area=area,
        )

    def material_lines(
        self,
        floor: FloorPlan,
        components: list[PlacedComponent],
        carpet_index: int,
        wall_graphic: GraphicType,
        storage_graphic: GraphicType,
        options: BoothOptions,
    ) -> dict[str, int]:
        """Material cost per quote line. Lines with zero cost are omitted."""
        wall_spec = catalog.wall_height_spec(floor.wall_height)
        carpet = catalog.lookup(catalog.CARPETS, carpet_index, "carpet")

        lines: dict[str, float] = {
            "walls": ceil_to_step(total_wall_length(floor), WALL_BILLING_STEP)
            * wall_spec.price_per_meter,
            "carpet": floor.area * catalog.CARPET_PRICE_PER_SQM[carpet.family],
            "wall_graphics": self._wall_graphics_cost(floor, wall_graphic),
            "storage_graphics": self._storage_graphics_cost(
                floor, components, storage_graphic
            ),
            "lighting": billed_led_count(floor, options.lights) * catalog.LED_PRICE,
        }

        for component in components:
            line, cost = self._component_cost(floor, component)
            lines[line] = lines.get(line, 0) + cost

        for name, price in catalog.OPTION_PRICES.items():
            if getattr(options, name):
                lines[name] = price

        return {label: round_half_up(cost) for label, cost in lines.items() if cost > 0}

    def _wall_graphics_cost(self, floor: FloorPlan, graphic: GraphicType) -> float:
        if graphic is GraphicType.NONE or floor.wall_shape is WallShape.NONE:
            return 0
        if graphic is GraphicType.FOREX:
            spec = catalog.wall_height_spec(floor.wall_height)
            return total_wall_length(floor) * spec.forex_per_meter
        return wall_graphic_area(floor) * catalog.GRAPHIC_PRICE_PER_SQM[graphic]

    def _storage_graphics_cost(
        self,
        floor: FloorPlan,
        components: list[PlacedComponent],
        graphic: GraphicType,
    ) -> float:
        if graphic is GraphicType.NONE:
            return 0
        length = storage_face_length(floor, components, self.validator)
        if graphic is GraphicType.FOREX:
            spec = catalog.wall_height_spec(floor.wall_height)
            return length * spec.forex_per_meter
        area = length * floor.wall_height
        return area * catalog.GRAPHIC_PRICE_PER_SQM[graphic]

    def _component_cost(
        self, floor: FloorPlan, component: PlacedComponent
    ) -> tuple[str, float]:
        kind = component.kind
        index = component.catalog_index
        if kind is ComponentKind.COUNTER:
            counter = catalog.lookup(catalog.COUNTERS, index, "counter")
            return "counters", counter_price(counter)
        if kind is ComponentKind.STORAGE:
            storage = catalog.lookup(catalog.STORAGE_TYPES, index, "storage")
            perimeter = 2 * (storage.width + storage.depth)
            spec = catalog.wall_height_spec(floor.wall_height)
            return "storage", ceil_to_step(perimeter, WALL_BILLING_STEP) * spec.price_per_meter
        if kind is ComponentKind.TV:
            return "tvs", catalog.lookup(catalog.TV_SIZES, index, "tv").price
        if kind is ComponentKind.PLANT:
            return "plants", catalog.lookup(catalog.PLANT_TYPES, index, "plant").price
        if kind is ComponentKind.FURNITURE:
            item = catalog.lookup(catalog.FURNITURE_TYPES, index, "furniture")
            return "furniture", item.price
        if kind is ComponentKind.SHELF:
            return "shelves", catalog.SHELF.price
        if kind is ComponentKind.SPEAKER:
            return "speakers", catalog.SPEAKER.price
        if kind is ComponentKind.TRUSS:
            truss = catalog.lookup(catalog.TRUSS_TYPES, index, "truss")
            if truss.truss_type is TrussType.FRONT_STRAIGHT:
                return "truss", floor.width * truss.price_per_meter
            return "truss", truss.price
        raise ValueError(f"Unhandled component kind: {kind}")
