"""Floor, wall, graphics and extras configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from booths.application.config.schemas.base import (
    WALL_HEIGHTS,
    GraphicTypeConfig,
    WallShapeConfig,
    check_catalog_index,
)
from booths.domain import catalog


class FloorConfig(BaseModel):
    """Booth floor size.

    Either pick a catalog size with `size_index`, or give a custom
    `width` and `depth` in meters. Custom sizes are priced for labor as
    the smallest catalog size with at least the same area.

    Attributes:
        size_index: Index into the catalog floor sizes.
        width: Custom floor width in meters (1.0 to 20.0).
        depth: Custom floor depth in meters (1.0 to 20.0).
    """

    model_config = ConfigDict(extra="forbid")

    size_index: int | None = Field(default=None, ge=0)
    width: float | None = Field(default=None, ge=1.0, le=20.0)
    depth: float | None = Field(default=None, ge=1.0, le=20.0)

    @field_validator("size_index")
    @classmethod
    def validate_size_index(cls, v: int | None) -> int | None:
        if v is None:
            return v
        return check_catalog_index(v, catalog.FLOOR_SIZES, "floor size")

    @model_validator(mode="after")
    def validate_size_or_dimensions(self) -> "FloorConfig":
        """Exactly one of size_index or width+depth must be given."""
        has_custom = self.width is not None or self.depth is not None
        if self.size_index is not None and has_custom:
            raise ValueError("Specify either 'size_index' or 'width'/'depth', not both")
        if self.size_index is None:
            if self.width is None or self.depth is None:
                raise ValueError("Specify 'size_index' or both 'width' and 'depth'")
        return self

    def dimensions(self) -> tuple[float, float]:
        """Resolved (width, depth) in meters."""
        if self.size_index is not None:
            size = catalog.FLOOR_SIZES[self.size_index]
            return size.width, size.depth
        assert self.width is not None and self.depth is not None
        return self.width, self.depth


class WallsConfig(BaseModel):
    """Wall shape and height.

    Attributes:
        shape: none, straight (back wall), l (back + left) or u (all three).
        height: Wall height in meters: 2.5, 3.0 or 3.5.
    """

    model_config = ConfigDict(extra="forbid")

    shape: WallShapeConfig = WallShapeConfig.NONE
    height: float = 2.5

    @field_validator("height")
    @classmethod
    def validate_height(cls, v: float) -> float:
        for allowed in WALL_HEIGHTS:
            if abs(v - allowed) < 1e-6:
                return allowed
        raise ValueError(f"Wall height must be one of {list(WALL_HEIGHTS)} (got {v})")


class GraphicsConfig(BaseModel):
    """Printed graphics for walls and storage units."""

    model_config = ConfigDict(extra="forbid")

    wall: GraphicTypeConfig = GraphicTypeConfig.NONE
    storage: GraphicTypeConfig = GraphicTypeConfig.NONE


class OptionsConfig(BaseModel):
    """On/off extras."""

    model_config = ConfigDict(extra="forbid")

    lights: bool = False
    clothes_rack: bool = False
    espresso_machine: bool = False
    flower_vase: bool = False
    candy_bowl: bool = False
    power_outlet: bool = False
