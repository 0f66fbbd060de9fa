"""Domain layer - core booth logic."""

from .catalog import UnknownCatalogIndexError, lookup
from .entities import BoothLayout, BoothOptions, PlacedComponent
from .services import (
    BomAggregator,
    LayoutEditor,
    MarkerGenerator,
    PlacementValidator,
    PriceCalculator,
    TvRepositioner,
    WallFramePlanner,
    segment_wall,
    wall_runs,
)
from .value_objects import (
    BillOfMaterials,
    ComponentKind,
    DegenerateFloorError,
    FloorPlan,
    FloorPosition,
    GraphicType,
    Orientation,
    PriceBreakdown,
    WallPosition,
    WallShape,
    WallSide,
)

__all__ = [
    "BillOfMaterials",
    "BomAggregator",
    "BoothLayout",
    "BoothOptions",
    "ComponentKind",
    "DegenerateFloorError",
    "FloorPlan",
    "FloorPosition",
    "GraphicType",
    "LayoutEditor",
    "MarkerGenerator",
    "Orientation",
    "PlacedComponent",
    "PlacementValidator",
    "PriceBreakdown",
    "PriceCalculator",
    "TvRepositioner",
    "UnknownCatalogIndexError",
    "WallFramePlanner",
    "WallPosition",
    "WallShape",
    "WallSide",
    "lookup",
    "segment_wall",
    "wall_runs",
]
