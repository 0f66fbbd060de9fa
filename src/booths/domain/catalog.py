"""Static catalog of booth components, sizes and unit prices.

Every selection in the configurator is an index into one of the tables
below. Tables are immutable tuples of frozen rows; use lookup() to resolve
an index. An index outside a table is a programming error and raises
UnknownCatalogIndexError immediately.

Dimensions are in meters, prices in SEK.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from .value_objects import CarpetFamily, GraphicType, TrussType

__all__ = [
    "CARPETS",
    "CARPET_PRICE_PER_SQM",
    "COUNTERS",
    "CounterType",
    "CarpetType",
    "FLOOR_SIZES",
    "FURNITURE_TYPES",
    "FloorSize",
    "FurnitureType",
    "GRAPHIC_PRICE_PER_SQM",
    "HEIGHT_TIERS",
    "LED_PRICE",
    "OPTION_PRICES",
    "PLANT_TYPES",
    "PlantType",
    "SHELF",
    "SPEAKER",
    "STORAGE_TYPES",
    "ShelfSpec",
    "SpeakerSpec",
    "StorageType",
    "TRUSS_TYPES",
    "TV_SIZES",
    "TrussSpec",
    "TvSize",
    "UnknownCatalogIndexError",
    "WALL_HEIGHTS",
    "WallHeightSpec",
    "lookup",
    "height_tier",
    "truss_index",
    "wall_height_spec",
]

T = TypeVar("T")


class UnknownCatalogIndexError(LookupError):
    """Raised when a selection index does not resolve to a catalog row."""

    def __init__(self, table: str, index: int, size: int) -> None:
        self.table = table
        self.index = index
        self.size = size
        super().__init__(
            f"Unknown {table} index {index} (catalog has {size} entries)"
        )


def lookup(table: Sequence[T], index: int, name: str = "catalog") -> T:
    """Resolve a selection index to exactly one catalog row.

    Args:
        table: One of the catalog tables.
        index: Zero-based selection index.
        name: Table name used in the error message.

    Returns:
        The catalog row at index.

    Raises:
        UnknownCatalogIndexError: If the index is out of range.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise UnknownCatalogIndexError(name, index, len(table))
    if not 0 <= index < len(table):
        raise UnknownCatalogIndexError(name, index, len(table))
    return table[index]


# =============================================================================
# Floor sizes
# =============================================================================


@dataclass(frozen=True)
class FloorSize:
    label: str
    width: float
    depth: float

    @property
    def area(self) -> float:
        return self.width * self.depth


FLOOR_SIZES: tuple[FloorSize, ...] = (
    FloorSize("2x2", 2.0, 2.0),
    FloorSize("3x2", 3.0, 2.0),
    FloorSize("3x3", 3.0, 3.0),
    FloorSize("4x3", 4.0, 3.0),
    FloorSize("5x3", 5.0, 3.0),
    FloorSize("4x4", 4.0, 4.0),
    FloorSize("5x4", 5.0, 4.0),
    FloorSize("6x4", 6.0, 4.0),
    FloorSize("5x5", 5.0, 5.0),
    FloorSize("6x6", 6.0, 6.0),
    FloorSize("7x7", 7.0, 7.0),
    FloorSize("8x8", 8.0, 8.0),
    FloorSize("10x10", 10.0, 10.0),
)


# =============================================================================
# Walls
# =============================================================================


@dataclass(frozen=True)
class WallHeightSpec:
    """Wall height with its per-meter wall and forex prices."""

    height: float
    price_per_meter: int
    forex_per_meter: int


WALL_HEIGHTS: tuple[WallHeightSpec, ...] = (
    WallHeightSpec(2.5, price_per_meter=862, forex_per_meter=1450),
    WallHeightSpec(3.0, price_per_meter=982, forex_per_meter=2000),
    WallHeightSpec(3.5, price_per_meter=1342, forex_per_meter=2850),
)


def wall_height_spec(height: float) -> WallHeightSpec:
    """Find the wall height row for a height in meters."""
    for spec in WALL_HEIGHTS:
        if abs(spec.height - height) < 1e-6:
            return spec
    raise UnknownCatalogIndexError("wall height", height, len(WALL_HEIGHTS))  # type: ignore[arg-type]


# Center heights of wall-mounted items, ordered from the top down
HEIGHT_TIERS: tuple[tuple[str, float], ...] = (
    ("high", 2.0),
    ("mid", 1.6),
    ("low", 1.2),
)


def height_tier(name: str) -> float:
    """Center height of a named tier."""
    for tier_name, y in HEIGHT_TIERS:
        if tier_name == name:
            return y
    raise UnknownCatalogIndexError("height tier", name, len(HEIGHT_TIERS))  # type: ignore[arg-type]


# =============================================================================
# Counters and storage
# =============================================================================


@dataclass(frozen=True)
class CounterType:
    """Counter (disk) type.

    Attributes:
        label: Display label, e.g. "2m disk".
        width: Front width in meters (long leg for L shapes).
        shape: "straight", "l" or "l-mirrored".
    """

    label: str
    width: float
    shape: str = "straight"
    depth: float = 0.5
    height: float = 1.0

    @property
    def is_l_shaped(self) -> bool:
        return self.shape != "straight"


COUNTERS: tuple[CounterType, ...] = (
    CounterType("1m disk", 1.0),
    CounterType("1,5m disk", 1.5),
    CounterType("2m disk", 2.0),
    CounterType("2,5m disk", 2.5),
    CounterType("3m disk", 3.0),
    CounterType("3,5m disk", 3.5),
    CounterType("4m disk", 4.0),
    CounterType("L-disk (1,5m + 1m)", 1.5, shape="l"),
    CounterType("L-disk spegelvänd (1,5m + 1m)", 1.5, shape="l-mirrored"),
)

# Short leg of L counters
L_COUNTER_SHORT_LEG = 1.0


@dataclass(frozen=True)
class StorageType:
    """Enclosed storage room built from wall frames (width x depth)."""

    label: str
    width: float
    depth: float


STORAGE_TYPES: tuple[StorageType, ...] = (
    StorageType("1x1", 1.0, 1.0),
    StorageType("2x1", 2.0, 1.0),
    StorageType("3x1", 3.0, 1.0),
    StorageType("4x1", 4.0, 1.0),
)


# =============================================================================
# TVs, plants, furniture
# =============================================================================


@dataclass(frozen=True)
class TvSize:
    """TV screen size in landscape orientation."""

    label: str
    width: float
    height: float
    price: int

    @property
    def bom_label(self) -> str:
        return f"TV {self.label}"


TV_SIZES: tuple[TvSize, ...] = (
    TvSize('32"', 0.71, 0.40, price=1500),
    TvSize('43"', 0.96, 0.56, price=2000),
    TvSize('50"', 1.11, 0.63, price=2500),
    TvSize('55"', 1.22, 0.71, price=3000),
    TvSize('65"', 1.45, 0.82, price=4000),
    TvSize('75"', 1.67, 0.95, price=5500),
)


@dataclass(frozen=True)
class PlantType:
    label: str
    width: float
    depth: float
    height: float
    price: int


PLANT_TYPES: tuple[PlantType, ...] = (
    PlantType("Monstera", 0.6, 0.6, 1.2, price=450),
    PlantType("Ficus", 0.5, 0.5, 1.6, price=450),
    PlantType("Bambu", 0.4, 0.4, 1.8, price=400),
    PlantType("Kaktus", 0.3, 0.3, 0.8, price=250),
    PlantType("Lavendel", 0.3, 0.3, 0.5, price=200),
    PlantType("Palmlilja", 0.5, 0.5, 1.4, price=400),
    PlantType("Rosmarin", 0.3, 0.3, 0.5, price=200),
    PlantType("Sansevieria", 0.4, 0.4, 0.9, price=300),
    PlantType("Olivträd", 0.7, 0.7, 1.8, price=650),
    PlantType("Dracaena", 0.5, 0.5, 1.5, price=400),
)


@dataclass(frozen=True)
class FurnitureType:
    label: str
    width: float
    depth: float
    height: float
    price: int


FURNITURE_TYPES: tuple[FurnitureType, ...] = (
    FurnitureType("Soffa", 1.2, 0.6, 0.7, price=1800),
    FurnitureType("Fåtölj", 0.8, 0.8, 0.7, price=900),
    FurnitureType("Barbord", 0.6, 0.6, 1.1, price=600),
    FurnitureType("Barstol", 0.4, 0.4, 0.8, price=350),
    FurnitureType("Pall", 0.4, 0.4, 0.5, price=250),
    FurnitureType("Sidobord", 0.5, 0.5, 0.4, price=400),
)


# =============================================================================
# Wall shelves, speakers, truss
# =============================================================================


@dataclass(frozen=True)
class ShelfSpec:
    width: float
    depth: float
    price: int


SHELF = ShelfSpec(width=0.6, depth=0.25, price=400)


@dataclass(frozen=True)
class SpeakerSpec:
    price: int


SPEAKER = SpeakerSpec(price=1200)


@dataclass(frozen=True)
class TrussSpec:
    """Truss rig.

    Hanging trusses have a fixed footprint centered over the floor. The
    front-straight truss spans the full floor width along the front edge,
    so its width is taken from the floor and its price is per meter.
    """

    truss_type: TrussType
    label: str
    width: float | None
    depth: float
    height: float
    price: int
    price_per_meter: int = 0


TRUSS_TYPES: tuple[TrussSpec, ...] = (
    TrussSpec(
        TrussType.FRONT_STRAIGHT,
        "Fronttruss rak",
        width=None,
        depth=0.3,
        height=3.0,
        price=0,
        price_per_meter=900,
    ),
    TrussSpec(
        TrussType.HANGING_ROUND,
        "Hängande truss rund",
        width=2.0,
        depth=2.0,
        height=3.5,
        price=7500,
    ),
    TrussSpec(
        TrussType.HANGING_SQUARE,
        "Hängande truss fyrkant",
        width=2.0,
        depth=2.0,
        height=3.5,
        price=6000,
    ),
)


def truss_index(truss_type: TrussType) -> int:
    """Catalog index of a truss type."""
    for i, spec in enumerate(TRUSS_TYPES):
        if spec.truss_type == truss_type:
            return i
    raise UnknownCatalogIndexError("truss", truss_type, len(TRUSS_TYPES))  # type: ignore[arg-type]


# =============================================================================
# Carpets, graphics, options
# =============================================================================


@dataclass(frozen=True)
class CarpetType:
    label: str
    family: CarpetFamily


CARPETS: tuple[CarpetType, ...] = (
    CarpetType("Ingen matta", CarpetFamily.NONE),
    CarpetType("Grå", CarpetFamily.PLAIN),
    CarpetType("Svart", CarpetFamily.PLAIN),
    CarpetType("Röd", CarpetFamily.PLAIN),
    CarpetType("Blå", CarpetFamily.PLAIN),
    CarpetType("EXPO Grå", CarpetFamily.EXPO),
    CarpetType("EXPO Blå", CarpetFamily.EXPO),
    CarpetType("SALSA Röd", CarpetFamily.SALSA),
    CarpetType("SALSA Grön", CarpetFamily.SALSA),
    CarpetType("Rutmönster svart/vit", CarpetFamily.CHECKERBOARD),
)

CARPET_PRICE_PER_SQM: dict[CarpetFamily, int] = {
    CarpetFamily.NONE: 0,
    CarpetFamily.PLAIN: 145,
    CarpetFamily.EXPO: 180,
    CarpetFamily.SALSA: 240,
    CarpetFamily.CHECKERBOARD: 255,
}

# Forex is billed per linear meter, see WALL_HEIGHTS
GRAPHIC_PRICE_PER_SQM: dict[GraphicType, int] = {
    GraphicType.NONE: 0,
    GraphicType.HYR: 200,
    GraphicType.VEPA: 700,
}

# Price of one billed SAM-led fixture
LED_PRICE = 350

OPTION_PRICES: dict[str, int] = {
    "clothes_rack": 450,
    "espresso_machine": 1500,
    "flower_vase": 150,
    "candy_bowl": 100,
    "power_outlet": 1200,
}
