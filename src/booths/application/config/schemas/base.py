"""Base enums and shared helpers for booth configuration schemas.

Enums are imported from the domain layer (they are str enums, so they
parse directly from JSON) and aliased here under their config names.
"""

from typing import Sequence

from booths.domain.value_objects import (
    GraphicType,
    Orientation,
    WALL_HEIGHT_OPTIONS,
    TrussType,
    WallShape,
    WallSide,
)

# Supported schema versions for configuration files
# Version 1.0: Initial booth schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Allowed wall heights in meters
WALL_HEIGHTS: tuple[float, ...] = WALL_HEIGHT_OPTIONS

WallShapeConfig = WallShape
WallSideConfig = WallSide
GraphicTypeConfig = GraphicType
OrientationConfig = Orientation
TrussTypeConfig = TrussType


def check_catalog_index(value: int, table: Sequence[object], name: str) -> int:
    """Reject an index that does not resolve to a catalog row."""
    if not 0 <= value < len(table):
        raise ValueError(
            f"{name} index must be between 0 and {len(table) - 1} (got {value})"
        )
    return value
