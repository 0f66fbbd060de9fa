"""Value objects for the booth domain.

This module provides immutable data types used throughout the booth
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    EPSILON,
    CompositeFootprint,
    FloorPosition,
    Footprint,
    Rect,
)

# Floor plan, selections and component kinds
from ._booth import (
    CarpetFamily,
    ComponentKind,
    DegenerateFloorError,
    FloorPlan,
    GraphicType,
    Orientation,
    TrussType,
    WALL_HEIGHT_OPTIONS,
    WallPosition,
    WallShape,
    WallSide,
)

# Wall runs
from ._walls import (
    Seam,
    WallModule,
    WallRun,
)

# Derived results
from ._results import (
    BillOfMaterials,
    BomValue,
    LaborEstimate,
    PriceBreakdown,
    Slot,
    TvPlacement,
)

__all__ = [
    "EPSILON",
    "BillOfMaterials",
    "BomValue",
    "CarpetFamily",
    "ComponentKind",
    "CompositeFootprint",
    "DegenerateFloorError",
    "FloorPlan",
    "FloorPosition",
    "Footprint",
    "GraphicType",
    "LaborEstimate",
    "Orientation",
    "PriceBreakdown",
    "Rect",
    "Seam",
    "Slot",
    "TrussType",
    "TvPlacement",
    "WALL_HEIGHT_OPTIONS",
    "WallModule",
    "WallPosition",
    "WallRun",
    "WallShape",
    "WallSide",
]
